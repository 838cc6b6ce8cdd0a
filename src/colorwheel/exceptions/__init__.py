"""
Custom exception hierarchy for colorwheel.

## Exception Hierarchy

```
ColorWheelError (base)
├── ConfigurationError
│   ├── MissingEntityError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
├── ColorParseError
│   └── UnrecognizedFormatError
└── BindingError
    ├── EntityNotFoundError
    ├── EntityWriteError
    └── BindingConnectionError
```

All custom exceptions inherit from `ColorWheelError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the card keeps running after the error (a per-family default)
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Unparseable entity value

```python
from colorwheel.exceptions import ColorParseError

raise ColorParseError("not-a-color", "no known color encoding matches")

# User sees: "Unable to parse color: not-a-color"
```
"""

from .base import ColorWheelError
from .binding import BindingConnectionError, BindingError, EntityNotFoundError, EntityWriteError
from .color import ColorParseError, UnrecognizedFormatError
from .config import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    MissingEntityError,
)
from .handlers import format_error_for_display, wrap_pydantic_error

__all__ = [
    # Binding
    "BindingConnectionError",
    "BindingError",
    # Base
    "ColorWheelError",
    # Color
    "ColorParseError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "EntityNotFoundError",
    "EntityWriteError",
    "MissingEntityError",
    "UnrecognizedFormatError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
