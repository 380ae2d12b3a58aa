"""Errors raised while loading ~/.launchlight/config.json.

The config file is a small JSON object with three keys (``palettes_dir``,
``default_palette`` and ``default_device``), so the hints below name them
directly.
"""

from typing import Any, Optional

from .base import LaunchlightError

CONFIG_KEYS = ("palettes_dir", "default_palette", "default_device")


class ConfigurationError(LaunchlightError):
    """Configuration cannot be loaded or saved."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Config file is not readable JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Path to the config file
            parse_error: Parser or read error message
        """
        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
            recovery = f"Remove the comma after the last key in {file_path}"
        elif "cannot read file" in parse_error.lower():
            user_msg = "Configuration file could not be read"
            recovery = f"Save {file_path} as UTF-8 text, or delete it to use the defaults"
        else:
            user_msg = "Configuration file is not valid JSON"
            recovery = (
                f"Fix {file_path} or delete it to use the defaults.\n"
                f"Expected an object with keys: {', '.join(CONFIG_KEYS)}"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"Parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A config key has a value of the wrong type."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Args:
            field: Config key that failed (or "multiple fields")
            value: The rejected value
            error_msg: Validation message
            file_path: Path to the config file, if known
        """
        if field == "palettes_dir":
            recovery = "Set it with 'launchlight config set --palettes-dir DIR'"
        elif field == "default_palette":
            recovery = (
                "Set it with 'launchlight config set --default-palette NAME'\n"
                "Run 'launchlight palettes list' to see loaded palettes"
            )
        elif field == "default_device":
            recovery = (
                "Set it with 'launchlight config set --default-device NAME'\n"
                "Run 'launchlight devices' to see supported devices"
            )
        else:
            recovery = f"Valid keys are: {', '.join(CONFIG_KEYS)}"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
