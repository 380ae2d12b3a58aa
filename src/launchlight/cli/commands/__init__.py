"""CLI commands for launchlight."""

from .color import color_group
from .config import config_group
from .devices import devices
from .palettes import palettes_group

__all__ = ["color_group", "config_group", "devices", "palettes_group"]
