"""Palette and device related exceptions.

This module defines exceptions raised while loading palette data or
looking up palettes and devices by name:
- PaletteError: Base class for palette errors
- PaletteDataError: Palette contents violate the table invariants
- PaletteFileError: A palette file could not be read or parsed
- UnknownPaletteError: A palette name was requested that is not loaded
- DeviceNotFoundError: A device name is not in the catalog

Color resolution itself never raises these; an unknown palette renders
as black. They surface only at load time and from explicit lookups.
"""

from collections.abc import Iterable

from .base import LaunchlightError


class PaletteError(LaunchlightError):
    """Palette data is invalid or unavailable."""

    def __init__(self, user_message: str, palette_name: str | None = None, **kwargs):
        """
        Initialize palette error.

        Args:
            user_message: User-friendly error message
            palette_name: The palette involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.palette_name = palette_name


class PaletteDataError(PaletteError):
    """Palette table contents are malformed."""

    def __init__(self, palette_name: str, detail: str):
        """
        Initialize palette data error.

        Args:
            palette_name: Name of the offending palette
            detail: What is wrong with the data
        """
        super().__init__(
            user_message=f"Palette '{palette_name}' has invalid color data: {detail}",
            palette_name=palette_name,
            recoverable=False,
            recovery_hint="Each palette entry must be three integers between 0 and 255.",
        )
        self.detail = detail


class PaletteFileError(PaletteError):
    """Palette file could not be loaded."""

    def __init__(self, file_path: str, detail: str):
        """
        Initialize palette file error.

        Args:
            file_path: Path to the palette file
            detail: The underlying parse or validation message
        """
        super().__init__(
            user_message=f"Could not load palette file {file_path}",
            technical_message=f"Palette file {file_path}: {detail}",
            recoverable=True,
            recovery_hint=(
                'Palette files contain a "name" and a "colors" list of [r, g, b] '
                f"entries.\n  - Edit: {file_path}"
            ),
        )
        self.file_path = file_path
        self.detail = detail


class UnknownPaletteError(PaletteError):
    """Requested palette is not loaded."""

    def __init__(self, palette_name: str, available: Iterable[str] = ()):
        """
        Initialize unknown palette error.

        Args:
            palette_name: The palette name that wasn't found
            available: Names of the palettes that are loaded
        """
        names = ", ".join(sorted(available)) or "none"
        super().__init__(
            user_message=f"Palette '{palette_name}' not found.",
            palette_name=palette_name,
            recoverable=True,
            recovery_hint=(
                f"Available palettes: {names}\n"
                "Run 'launchlight palettes list' to see loaded palettes."
            ),
        )


class DeviceNotFoundError(LaunchlightError):
    """Requested device is not in the catalog."""

    def __init__(self, device_name: str, available: Iterable[str] = ()):
        """
        Initialize device-not-found error.

        Args:
            device_name: The device name that wasn't found
            available: Names of the supported devices
        """
        names = ", ".join(available) or "none"
        super().__init__(
            user_message=f"Device '{device_name}' not found.",
            recoverable=True,
            recovery_hint=(
                f"Supported devices: {names}\n"
                "Run 'launchlight devices' to see the device catalog."
            ),
        )
        self.device_name = device_name
