"""Color value parsing exceptions."""

from .base import ColorWheelError


class ColorParseError(ColorWheelError):
    """An external value could not be decoded into a color."""

    recoverable = True

    def __init__(self, value: str, reason: str, fmt: str | None = None):
        """
        Initialize color parse error.

        Args:
            value: The raw external value
            reason: Why decoding failed
            fmt: Format the value was decoded as, if known
        """
        super().__init__(
            user_message=f"Unable to parse color: {value}",
            technical_message=f"Failed to decode {value!r} as {fmt or 'color'}: {reason}",
            recovery_hint="Expected '#RRGGBB', 'rgb(R, G, B)' or '[R, G, B]'",
        )
        self.value = value
        self.reason = reason
        self.format = fmt


class UnrecognizedFormatError(ColorParseError):
    """Auto-detection found no known encoding for a value."""

    def __init__(self, value: str):
        super().__init__(value, "no known color encoding matches", fmt="auto")
