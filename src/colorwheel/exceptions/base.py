"""Base exception class for colorwheel.

Every error the package raises derives from ColorWheelError. Each error
family decides at class level whether the card keeps running after it:

- Parse and binding errors are recoverable. The card stays mounted, shows
  the message, and the next valid entity value or write clears it.
- Configuration errors are not. Nothing can be drawn or written until the
  card configuration is fixed, although file-level errors opt back in
  because the user can edit the file and reload.
"""


class ColorWheelError(Exception):
    """
    Base exception for all colorwheel errors.

    Attributes:
        user_message: Shown on the card or the command line
        technical_message: Written to the log (defaults to user_message)
        recovery_hint: Optional suggestion shown after the message
        recoverable: Family default, overridable per instance
    """

    recoverable: bool = False

    def __init__(
        self,
        user_message: str,
        technical_message: str | None = None,
        *,
        recovery_hint: str | None = None,
        recoverable: bool | None = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint
        if recoverable is not None:
            self.recoverable = recoverable

    @property
    def severity(self) -> str:
        """Notification severity used by the terminal UI."""
        return "warning" if self.recoverable else "error"

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg
