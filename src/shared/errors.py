"""Custom exception classes."""
from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class ConflictError(AppError):
    """Conflicting ownership or binding."""

    def __init__(self, detail: str = "Conflict") -> None:
        super().__init__(detail=detail)


class CapabilityConflictError(ConflictError):
    """A consumer is already bound to a different shared-state hub."""

    def __init__(self, detail: str = "Consumer already bound to another hub") -> None:
        super().__init__(detail=detail)
