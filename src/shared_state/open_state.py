"""Shared counters exposed through one open handle."""
from __future__ import annotations

from src.shared_state.models import SharedCounters


class OpenSharedState:
    """Owns a ``SharedCounters`` record.

    Capability holders get the record itself through ``handle()`` and may
    read or write any field. Everyone else can only read the turn count.
    """

    def __init__(self, counters: SharedCounters | None = None) -> None:
        self._counters = counters.model_copy() if counters is not None else SharedCounters()

    def handle(self) -> SharedCounters:
        """Return the owned record (the same instance on every call)."""
        return self._counters

    def get_turn_count(self) -> int:
        return self._counters.turn_count
