"""
Centralized error handling utilities.

Errors are translated layer by layer:

1. **Low level** (HTTP transport, JSON, pydantic) raises standard exceptions.
2. **Services and bindings** convert them to `ColorWheelError` subclasses
   carrying a user message and a recovery hint.
3. **User layer** (CLI/TUI) shows `user_message` and `recovery_hint` and
   leaves the technical message to the log file.

| Scenario | Use This |
|----------|----------|
| Card config has no entity | `MissingEntityError` |
| Config file syntax error | `ConfigFileInvalidError` |
| Config value invalid | `ConfigValidationError` (via `wrap_pydantic_error`) |
| External value unparseable | `ColorParseError` |
| Service call rejected | `EntityWriteError` |

Example:
    ```python
    try:
        config = CardConfig.model_validate(raw)
    except ValidationError as e:
        raise wrap_pydantic_error(e) from e
    ```
"""

from typing import Optional

from .base import ColorWheelError
from .config import ConfigFileInvalidError, ConfigValidationError, ConfigurationError, MissingEntityError


def wrap_pydantic_error(error: Exception, file_path: str | None = None) -> ConfigurationError:
    """
    Convert Pydantic validation errors to colorwheel exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation, if any

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Invalid JSON syntax rather than invalid values
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path or "<config>", parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()

        # A missing or empty entity is fatal regardless of other problems
        for err in errors:
            if err.get('loc', ())[:1] == ('entity',):
                return MissingEntityError()

        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        elif errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ColorWheelError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
