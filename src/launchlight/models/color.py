"""Color model for pad and button LEDs.

A pad color is stored in one of the encodings a device understands:

- ``UnsetColor``: nothing assigned, renders black
- ``PaletteColor``: an index into a named firmware palette
- ``RGBColor``: direct 8-bit channels
- ``RGBAColor``: a full-brightness color plus its brightness as alpha,
  produced by ``Color.to_rgba()``

Every variant is a frozen Pydantic model deriving from ``Color``, so colors
are hashable, comparable and serialize with a ``type`` tag. Operations
return new colors and never mutate the receiver.

Palette lookups are passed in explicitly (``palettes=``) rather than read
from a global, and resolution never raises: an unknown palette, an index
outside the palette or a missing table all resolve to black.

Example:
    >>> table = {"classic": [(0, 0, 0)] * 5 + [(12, 200, 40)]}
    >>> Color.from_palette("classic", 5).to_css(table)
    'rgb(12, 200, 40)'
    >>> Color.from_rgb(255, 0, 0).to_rgba().value
    (255, 0, 0, 255)
"""

import logging
from collections.abc import Sequence
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from launchlight.colorspace import hsv_to_rgb, rgb_to_hsv, round_half_up
from launchlight.palettes.table import PaletteLookup, nearest_index

from .enums import ColorType

logger = logging.getLogger(__name__)

Number = Union[int, float]
RGBValue = tuple[Number, Number, Number]
RGBAValue = tuple[Number, Number, Number, Number]

BLACK: RGBValue = (0, 0, 0)


def _format_channel(value: Number) -> str:
    """Format a channel the way CSS color strings expect (100.0 -> '100')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class Color(BaseModel):
    """Base class for every color encoding.

    Use the ``from_*`` constructors or instantiate a variant directly.
    """

    model_config = ConfigDict(frozen=True)

    type: str

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def unset() -> "UnsetColor":
        """Create the unset (black) color."""
        return UnsetColor()

    @staticmethod
    def from_palette(palette: str, index: int) -> "PaletteColor":
        """Create a reference to entry ``index`` of palette ``palette``."""
        return PaletteColor(palette=palette, index=index)

    @staticmethod
    def from_rgb(r: Number, g: Number, b: Number) -> "RGBColor":
        """Create a direct RGB color. Channels are used as given."""
        return RGBColor(r=r, g=g, b=b)

    @staticmethod
    def from_value(color_type: ColorType | str | None, value: Sequence[Any] | None = None) -> "Color":
        """
        Create a color from a type tag and a positional payload.

        Payload shapes:
            PALETTE: [palette name, index]
            RGB: [r, g, b]
            RGBA: [r, g, b, a]

        A missing type or payload gives the unset color.

        Raises:
            ValueError: If the payload length does not match the type
        """
        if color_type is None or value is None:
            return UnsetColor()

        color_type = ColorType(color_type)
        expected = {
            ColorType.UNSET: 0,
            ColorType.PALETTE: 2,
            ColorType.RGB: 3,
            ColorType.RGBA: 4,
        }[color_type]
        if len(value) != expected:
            raise ValueError(
                f"{color_type.value} color needs {expected} values, got {len(value)}"
            )

        if color_type == ColorType.PALETTE:
            return PaletteColor(palette=value[0], index=value[1])
        if color_type == ColorType.RGB:
            return RGBColor(r=value[0], g=value[1], b=value[2])
        if color_type == ColorType.RGBA:
            return RGBAColor(r=value[0], g=value[1], b=value[2], a=value[3])
        return UnsetColor()

    @staticmethod
    def parse(data: Any) -> "Color":
        """
        Validate serialized data (as produced by ``model_dump``) into a color.

        Raises:
            pydantic.ValidationError: If the data is not a valid color
        """
        if isinstance(data, Color):
            return data
        return _COLOR_ADAPTER.validate_python(data)

    @staticmethod
    def from_string(text: str) -> "Color":
        """
        Parse the compact text form used on the command line.

        Forms: ``unset``, ``palette:<name>:<index>``, ``rgb:<r>,<g>,<b>``,
        ``rgba:<r>,<g>,<b>,<a>``. Channel numbers may be integers or floats.

        Raises:
            ValueError: If the text is malformed
        """
        kind, _, rest = text.strip().partition(":")
        kind = kind.lower()

        if kind == ColorType.UNSET.value and not rest:
            return UnsetColor()

        if kind == ColorType.PALETTE.value:
            name, sep, index = rest.rpartition(":")
            if not sep or not name:
                raise ValueError(f"Expected palette:<name>:<index>, got {text!r}")
            try:
                return PaletteColor(palette=name, index=int(index))
            except ValueError:
                raise ValueError(f"Palette index must be an integer, got {index!r}") from None

        if kind in (ColorType.RGB.value, ColorType.RGBA.value):
            try:
                channels = [_parse_number(part) for part in rest.split(",")]
            except ValueError:
                raise ValueError(f"Channels must be numbers, got {rest!r}") from None
            return Color.from_value(kind, channels)

        raise ValueError(f"Unknown color {text!r} (use unset, palette:, rgb: or rgba:)")

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    @property
    def value(self) -> tuple:
        """Positional payload, in the ``from_value`` shape."""
        return ()

    @property
    def palette_name(self) -> str | None:
        """Palette name for palette colors, None otherwise."""
        return None

    @property
    def palette_index(self) -> int | None:
        """Palette index for palette colors, None otherwise."""
        return None

    def rgb(self, palettes: PaletteLookup | None = None) -> RGBValue:
        """
        Resolve to an (r, g, b) triple.

        Args:
            palettes: Palette lookup, needed only by palette colors

        Returns:
            RGB channels; black when the color cannot be resolved
        """
        return BLACK

    def to_css(self, palettes: PaletteLookup | None = None) -> str:
        """
        Format as a CSS color string.

        Example:
            >>> Color.from_rgb(12, 200, 40).to_css()
            'rgb(12, 200, 40)'
        """
        r, g, b = self.rgb(palettes)
        return f"rgb({_format_channel(r)}, {_format_channel(g)}, {_format_channel(b)})"

    def is_black(self, palettes: PaletteLookup | None = None) -> bool:
        """True when every resolved channel is zero."""
        r, g, b = self.rgb(palettes)
        return not (r or g or b)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_rgba(self, palettes: PaletteLookup | None = None) -> "RGBAColor":
        """
        Split brightness out into an alpha channel.

        The color's hue and saturation are rebuilt at full brightness, and
        the original brightness (HSV value) becomes alpha on the same 0-255
        scale as the color channels. This is lossy.

        Example:
            >>> Color.from_rgb(128, 0, 0).to_rgba().value
            (255, 0, 0, 128)
        """
        h, s, v = rgb_to_hsv(*self.rgb(palettes))
        r, g, b = hsv_to_rgb(h, s, 1.0)
        return RGBAColor(r=r, g=g, b=b, a=round_half_up(v * 255))

    def rgba(self, palettes: PaletteLookup | None = None) -> RGBAValue:
        """Resolve to an (r, g, b, a) quadruple, converting with ``to_rgba``."""
        return self.to_rgba(palettes).value

    def to_7bit(self, palettes: PaletteLookup | None = None) -> tuple[int, int, int]:
        """
        Convert to 7-bit RGB for MIDI SysEx messages.

        Channels are rounded and clamped to 0-255 before the right shift.

        Example:
            >>> Color.from_rgb(255, 128, 0).to_7bit()
            (127, 64, 0)
        """
        r, g, b = (max(0, min(255, round_half_up(c))) for c in self.rgb(palettes))
        return (r >> 1, g >> 1, b >> 1)

    def to_palette(self, palette: str, palettes: PaletteLookup | None = None) -> "Color":
        """
        Re-encode as the nearest entry of ``palette``.

        Returns:
            A palette color, or the unset color if ``palette`` is not available
        """
        colors = palettes.get(palette) if palettes is not None else None
        index = nearest_index(colors, self.rgb(palettes)) if colors else None
        if index is None:
            logger.debug(f"Palette '{palette}' not available, cannot re-encode {self!r}")
            return UnsetColor()
        return PaletteColor(palette=palette, index=index)

    # ------------------------------------------------------------------
    # Compositing
    # ------------------------------------------------------------------

    def overlay(self, base: "Color", palettes: PaletteLookup | None = None) -> "RGBColor":
        """
        Lighten ``base`` using this color's channels as per-channel opacity.

        Each channel moves from ``base`` toward 255 by this color's channel
        divided by 255: black leaves ``base`` unchanged, white gives white.

        Example:
            >>> Color.from_rgb(100, 100, 100).overlay(Color.unset()).value
            (100.0, 100.0, 100.0)
        """
        top = self.rgb(palettes)
        bottom = base.rgb(palettes)
        r, g, b = (
            under + (255 - under) * over / 255 for over, under in zip(top, bottom)
        )
        return RGBColor(r=r, g=g, b=b)


class UnsetColor(Color):
    """No color assigned."""

    type: Literal["unset"] = ColorType.UNSET.value


class PaletteColor(Color):
    """Entry ``index`` of the firmware palette named ``palette``."""

    type: Literal["palette"] = ColorType.PALETTE.value
    palette: str
    index: int

    @property
    def value(self) -> tuple[str, int]:
        return (self.palette, self.index)

    @property
    def palette_name(self) -> str:
        return self.palette

    @property
    def palette_index(self) -> int:
        return self.index

    def rgb(self, palettes: PaletteLookup | None = None) -> RGBValue:
        if palettes is None:
            logger.debug(f"No palette table given for {self.palette}:{self.index}, using black")
            return BLACK

        colors = palettes.get(self.palette)
        if colors is None:
            logger.debug(f"Unknown palette '{self.palette}', using black")
            return BLACK

        if not 0 <= self.index < len(colors):
            logger.debug(
                f"Index {self.index} outside palette '{self.palette}' "
                f"(size {len(colors)}), using black"
            )
            return BLACK

        r, g, b = colors[self.index]
        return (r, g, b)


class RGBColor(Color):
    """Direct RGB channels (conventionally 0-255, not enforced)."""

    type: Literal["rgb"] = ColorType.RGB.value
    r: Number
    g: Number
    b: Number

    @property
    def value(self) -> RGBValue:
        return (self.r, self.g, self.b)

    def rgb(self, palettes: PaletteLookup | None = None) -> RGBValue:
        return (self.r, self.g, self.b)

    def to_css(self, palettes: PaletteLookup | None = None) -> str:
        return f"rgb({_format_channel(self.r)}, {_format_channel(self.g)}, {_format_channel(self.b)})"


class RGBAColor(Color):
    """RGB at full brightness with the brightness carried as alpha (0-255)."""

    type: Literal["rgba"] = ColorType.RGBA.value
    r: Number
    g: Number
    b: Number
    a: Number

    @property
    def value(self) -> RGBAValue:
        return (self.r, self.g, self.b, self.a)

    def rgb(self, palettes: PaletteLookup | None = None) -> RGBValue:
        return (self.r, self.g, self.b)

    def rgba(self, palettes: PaletteLookup | None = None) -> RGBAValue:
        return self.value

    def to_css(self, palettes: PaletteLookup | None = None) -> str:
        channels = ", ".join(_format_channel(c) for c in self.value)
        return f"rgba({channels})"


AnyColor = Annotated[
    Union[UnsetColor, PaletteColor, RGBColor, RGBAColor],
    Field(discriminator="type"),
]

_COLOR_ADAPTER: TypeAdapter[Color] = TypeAdapter(AnyColor)


def _parse_number(text: str) -> Number:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)
