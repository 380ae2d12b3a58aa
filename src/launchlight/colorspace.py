"""RGB <-> HSV conversions.

Channels on the RGB side are 8-bit (0-255). On the HSV side every
component is a fraction in [0, 1]: hue is a fraction of a full turn,
saturation and value are plain ratios.

Example:
    >>> rgb_to_hsv(255, 0, 0)
    (0.0, 1.0, 1.0)
    >>> hsv_to_rgb(0.0, 1.0, 0.5)
    (128, 0, 0)
"""

import math


def round_half_up(x: float) -> int:
    """Round to the nearest integer with halves rounded up (127.5 -> 128)."""
    return math.floor(x + 0.5)


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert 8-bit RGB to (hue, saturation, value).

    Achromatic inputs (r == g == b, black and white included) have
    hue 0 and saturation 0. So do out-of-range inputs with no positive
    channel, such as (0, -10, 0).

    Args:
        r: Red (0-255)
        g: Green (0-255)
        b: Blue (0-255)

    Returns:
        tuple[float, float, float]: (h, s, v), each in [0, 1]
    """
    r_abs = r / 255
    g_abs = g / 255
    b_abs = b / 255

    v = max(r_abs, g_abs, b_abs)
    diff = v - min(r_abs, g_abs, b_abs)

    if diff == 0 or v <= 0:
        return 0.0, 0.0, v

    def diffc(c: float) -> float:
        return (v - c) / 6 / diff + 1 / 2

    s = diff / v
    rr = diffc(r_abs)
    gg = diffc(g_abs)
    bb = diffc(b_abs)

    if r_abs == v:
        h = bb - gg
    elif g_abs == v:
        h = (1 / 3) + rr - bb
    else:
        h = (2 / 3) + gg - rr

    if h < 0:
        h += 1
    elif h > 1:
        h -= 1

    return h, s, v


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """Convert (hue, saturation, value) to 8-bit RGB.

    Args:
        h: Hue as a fraction of a turn (0-1)
        s: Saturation (0-1)
        v: Value/brightness (0-1)

    Returns:
        tuple[int, int, int]: RGB rounded to integers (0-255)
    """
    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)
