"""Enumerations for launchlight."""

from enum import Enum


class ColorType(str, Enum):
    """Color encodings."""

    UNSET = "unset"  # No color assigned, renders black
    PALETTE = "palette"  # [palette name, palette index]
    RGB = "rgb"  # [r, g, b]
    RGBA = "rgba"  # [r, g, b, a], produced by Color.to_rgba()
