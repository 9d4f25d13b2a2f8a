"""
Custom exception hierarchy for swatchbook.

## Exception Hierarchy

```
SwatchbookError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
├── PaletteError
│   ├── PaletteStoreNotFoundError
│   ├── PaletteStoreCorruptError
│   └── PaletteSaveError
└── SamplingError
```

All custom exceptions inherit from `SwatchbookError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Corrupt palette

```python
from swatchbook.exceptions import PaletteStoreCorruptError

raise PaletteStoreCorruptError("/home/me/.swatchbook/resources/colors.json", "Expecting ','")

# User sees: "Palette file is corrupt: /home/me/.swatchbook/resources/colors.json"
# Recovery hint: "Fix or remove ... by hand. A backup (.bak) ... may be available."
```
"""

from .base import SwatchbookError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error
from .palette import (
    PaletteError,
    PaletteSaveError,
    PaletteStoreCorruptError,
    PaletteStoreNotFoundError,
    SamplingError,
)

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Palette
    "PaletteError",
    "PaletteSaveError",
    "PaletteStoreCorruptError",
    "PaletteStoreNotFoundError",
    "SamplingError",
    # Base
    "SwatchbookError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
