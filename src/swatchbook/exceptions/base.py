"""Root of the swatchbook exception hierarchy."""

from typing import Optional


class SwatchbookError(Exception):
    """
    Base class for every error swatchbook raises on purpose.

    Attributes:
        user_message: Short text shown by the CLI
        technical_message: Longer text for the log file (defaults to user_message)
        recoverable: Whether the session can carry on after this error
        recovery_hint: What the user can do about it, if anything
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
