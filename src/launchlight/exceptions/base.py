"""Root of the launchlight exception hierarchy.

Rendering a color never raises. These exceptions come from loading
palettes and config and from explicit lookups, and the CLI shows
``user_message`` plus ``recovery_hint`` for any of them.
"""

from typing import Optional


class LaunchlightError(Exception):
    """
    Base exception for all launchlight errors.

    Attributes:
        user_message: One-line message for the terminal
        technical_message: Detail for the log (file paths, parser output)
        recoverable: True when the user can fix the input and retry
        recovery_hint: What to change, usually naming a file or a command
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

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
