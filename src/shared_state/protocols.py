"""Runtime-checkable protocols for the shared-state capability surfaces.

Capability holders receive ``VitalAccess`` and ``CounterAccess``. Every other
caller only ever receives a ``PublicView``, so reaching a restricted operation
from outside the capability set is a static type error.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from src.shared_state.models import SharedCounters


@runtime_checkable
class VitalAccess(Protocol):
    """Restricted operations on the bounded vital."""

    def get_current(self) -> int:
        ...

    def set_current(self, value: int) -> None:
        """Store ``value`` clamped into ``[0, maximum]``."""
        ...

    def get_maximum(self) -> int:
        ...

    def set_maximum(self, value: int) -> None:
        """Store a positive ``value`` as maximum; non-positive input is ignored."""
        ...

    def apply_damage(self, amount: int) -> None:
        """Subtract ``amount`` from current; a negative amount heals."""
        ...


@runtime_checkable
class CounterAccess(Protocol):
    """Open handle on the shared counters."""

    def handle(self) -> SharedCounters:
        """Return the owned counters record for direct read/write."""
        ...


@runtime_checkable
class VitalDiagnostics(Protocol):
    """Unrestricted read-only diagnostics on the bounded vital."""

    def dump_diagnostics(self, label: str | None = None) -> str:
        ...


@runtime_checkable
class TurnCountReader(Protocol):
    """Unrestricted read of the turn counter."""

    def get_turn_count(self) -> int:
        ...


@runtime_checkable
class PublicView(VitalDiagnostics, TurnCountReader, Protocol):
    """Everything a caller outside the capability set may do."""
