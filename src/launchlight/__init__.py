"""Launchlight: pad color model for Launchpad-family light shows."""

__version__ = "0.1.0"

from .colorspace import hsv_to_rgb, rgb_to_hsv
from .models import Color, ColorType, PaletteColor, RGBAColor, RGBColor, UnsetColor
from .palettes import PaletteTable, load_palettes

__all__ = [
    "Color",
    "ColorType",
    "PaletteColor",
    "PaletteTable",
    "RGBAColor",
    "RGBColor",
    "UnsetColor",
    "hsv_to_rgb",
    "load_palettes",
    "rgb_to_hsv",
]
