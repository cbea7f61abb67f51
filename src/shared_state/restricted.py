"""Bounded vital guarded by clamping accessors."""
from __future__ import annotations

import logging
import threading

from src.shared.constants import MIN_HP
from src.shared_state.diagnostics import emit_diagnostics
from src.shared_state.models import BoundedVital, VitalSnapshot

logger = logging.getLogger(__name__)


class RestrictedSharedState:
    """Owns a ``BoundedVital`` and keeps ``0 <= current <= maximum``.

    The five vital operations are meant for capability holders only; they
    are handed out typed as ``VitalAccess``. ``dump_diagnostics`` is open to
    every caller and never mutates the vital.

    Every write is clamped or ignored, never rejected. A lock makes each
    operation's read-adjust-write sequence atomic.

    Args:
        vital: Initial values. Copied, so the caller keeps no reference into
            the owned record.
        diagnostics_sink: Logger that receives ``dump_diagnostics`` output.
    """

    def __init__(
        self,
        vital: BoundedVital | None = None,
        diagnostics_sink: logging.Logger | None = None,
    ) -> None:
        self._vital = vital.model_copy() if vital is not None else BoundedVital()
        self._sink = diagnostics_sink
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Capability-holder operations
    # ------------------------------------------------------------------

    def get_current(self) -> int:
        with self._lock:
            return self._vital.current

    def set_current(self, value: int) -> None:
        """Store ``value`` clamped into ``[0, maximum]``."""
        with self._lock:
            self._store_current(value)

    def get_maximum(self) -> int:
        with self._lock:
            return self._vital.maximum

    def set_maximum(self, value: int) -> None:
        """Store a positive ``value`` as the maximum.

        ``current`` is pulled down when it exceeds the new maximum.
        Non-positive input is silently ignored.
        """
        with self._lock:
            if value <= 0:
                logger.debug("set_maximum ignored non-positive value %d", value)
                return
            self._vital.maximum = value
            if self._vital.current > value:
                self._store_current(value)

    def apply_damage(self, amount: int) -> None:
        """Subtract ``amount`` from current; a negative amount heals."""
        with self._lock:
            self._store_current(self._vital.current - amount)

    def _store_current(self, value: int) -> None:
        # Sole write path for current; caller holds the lock.
        if value > self._vital.maximum:
            clamped = self._vital.maximum
        elif value < MIN_HP:
            clamped = MIN_HP
        else:
            clamped = value
        if clamped != value:
            logger.debug("current clamped from %d to %d", value, clamped)
        self._vital.current = clamped

    # ------------------------------------------------------------------
    # Unrestricted operations
    # ------------------------------------------------------------------

    def snapshot(self) -> VitalSnapshot:
        """Return a consistent copy of the current/maximum pair."""
        with self._lock:
            return VitalSnapshot(current=self._vital.current, maximum=self._vital.maximum)

    def dump_diagnostics(self, label: str | None = None) -> str:
        """Log the vital values and the calling context.

        Args:
            label: Optional caller-supplied label added to the output.

        Returns:
            The emitted diagnostic text.
        """
        return emit_diagnostics(self.snapshot(), label=label, sink=self._sink, skip=1)
