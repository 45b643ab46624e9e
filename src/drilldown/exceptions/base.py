"""Base exception for DrillDown."""

from typing import Dict, Optional


class DrillDownError(Exception):
    """Base exception for all DrillDown errors.

    Args:
        message: What went wrong.
        details: Context such as the offending key or file, rendered as
            ``key=value`` pairs after the message.
        hint: Optional suggestion for fixing the problem, rendered last.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, str]] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.hint = hint

    def __str__(self) -> str:
        text = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            text = f"{text} ({details_str})"
        if self.hint:
            text = f"{text}; hint: {self.hint}"
        return text
