"""Data models for launchlight."""

from .color import AnyColor, Color, PaletteColor, RGBAColor, RGBColor, UnsetColor
from .config import AppConfig
from .enums import ColorType

__all__ = [
    "AnyColor",
    "AppConfig",
    # Models
    "Color",
    # Enums
    "ColorType",
    "PaletteColor",
    "RGBAColor",
    "RGBColor",
    "UnsetColor",
]
