"""
Custom exception hierarchy for launchlight.

## Exception Hierarchy

```
LaunchlightError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
├── PaletteError
│   ├── PaletteDataError
│   ├── PaletteFileError
│   └── UnknownPaletteError
└── DeviceNotFoundError
```

All custom exceptions inherit from `LaunchlightError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

Rendering a color never raises any of these: an unknown palette, an
out-of-range index or an unset color all resolve to black. The
exceptions cover loading data and explicit lookups from the CLI.

### Example: Palette File Error

```python
from launchlight.exceptions import PaletteFileError

raise PaletteFileError("/home/me/.launchlight/palettes/mk2.yaml", "colors.3: too short")

# User sees: "Could not load palette file /home/me/.launchlight/palettes/mk2.yaml"
# Logs show: the validation detail
```
"""

from .base import LaunchlightError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)
from .palette import (
    DeviceNotFoundError,
    PaletteDataError,
    PaletteError,
    PaletteFileError,
    UnknownPaletteError,
)

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Palette
    "DeviceNotFoundError",
    "ErrorCollector",
    # Base
    "LaunchlightError",
    "PaletteDataError",
    "PaletteError",
    "PaletteFileError",
    "UnknownPaletteError",
    # Handlers
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
