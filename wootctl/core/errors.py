from __future__ import annotations


UNAVAILABLE_MESSAGE = "Wootility is not installed or not found"


class WootctlError(Exception):
    """Base class for errors surfaced to the command layer."""


class WootilityUnavailableError(WootctlError):
    """Raised when the Wootility executable cannot be located."""

    def __init__(self, message: str = UNAVAILABLE_MESSAGE) -> None:
        super().__init__(message)
