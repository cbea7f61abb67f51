"""Composition root that owns the shared-state singletons.

A composer builds one ``SharedStateHub`` at startup and injects it where
needed. Consumer classes declare capability-set membership by inheriting
``VitalCapable`` or ``CounterCapable``; the hub's ``grant_*`` methods only
accept such consumers, so a type checker rejects any other call site. The
restricted operations themselves carry no runtime permission check.
"""
from __future__ import annotations

import logging

from src.shared.config import SharedStateConfig
from src.shared.constants import PACKAGE_LOGGER_NAME, SERVICE_NAME, VERSION
from src.shared.errors import CapabilityConflictError
from src.shared.logging import setup_logging
from src.shared_state.models import BoundedVital
from src.shared_state.open_state import OpenSharedState
from src.shared_state.protocols import CounterAccess, PublicView, VitalAccess
from src.shared_state.restricted import RestrictedSharedState

logger = logging.getLogger(__name__)


class VitalCapable:
    """Mixin declaring membership in the vital capability set."""
    vitals: VitalAccess


class CounterCapable:
    """Mixin declaring membership in the counter capability set."""
    counters: CounterAccess


class _PublicFacade:
    """Read-only surface handed to callers outside the capability sets."""

    def __init__(self, restricted: RestrictedSharedState, open_state: OpenSharedState) -> None:
        self._restricted = restricted
        self._open_state = open_state

    def dump_diagnostics(self, label: str | None = None) -> str:
        return self._restricted.dump_diagnostics(label=label)

    def get_turn_count(self) -> int:
        return self._open_state.get_turn_count()


class SharedStateHub:
    """Owns exactly one ``RestrictedSharedState`` and one ``OpenSharedState``.

    Args:
        config: Settings for the initial maximum and the diagnostics sink.
            Read from the environment when omitted.
    """

    def __init__(self, config: SharedStateConfig | None = None) -> None:
        self._config = config or SharedStateConfig()
        setup_logging(SERVICE_NAME, self._config.log_level, logger_name=PACKAGE_LOGGER_NAME)
        initial = self._config.initial_max_hp
        self._restricted = RestrictedSharedState(
            BoundedVital(current=initial, maximum=initial),
            diagnostics_sink=logging.getLogger(self._config.diagnostics_logger),
        )
        self._open_state = OpenSharedState()
        self._public = _PublicFacade(self._restricted, self._open_state)
        logger.info("Shared-state hub created (v%s, max HP %d)", VERSION, initial)

    @property
    def config(self) -> SharedStateConfig:
        return self._config

    @property
    def public(self) -> PublicView:
        """Surface available to every caller."""
        return self._public

    def grant_vitals(self, consumer: VitalCapable) -> VitalAccess:
        """Inject the restricted vital operations into ``consumer``.

        Granting twice from the same hub is a no-op.

        Raises:
            CapabilityConflictError: ``consumer`` is bound to another hub.
        """
        existing = getattr(consumer, "vitals", None)
        if existing is not None and existing is not self._restricted:
            raise CapabilityConflictError(
                f"{type(consumer).__name__} already holds vitals from another hub"
            )
        consumer.vitals = self._restricted
        logger.debug("Granted vitals to %s", type(consumer).__name__)
        return self._restricted

    def grant_counters(self, consumer: CounterCapable) -> CounterAccess:
        """Inject the open counter handle into ``consumer``.

        Granting twice from the same hub is a no-op.

        Raises:
            CapabilityConflictError: ``consumer`` is bound to another hub.
        """
        existing = getattr(consumer, "counters", None)
        if existing is not None and existing is not self._open_state:
            raise CapabilityConflictError(
                f"{type(consumer).__name__} already holds counters from another hub"
            )
        consumer.counters = self._open_state
        logger.debug("Granted counters to %s", type(consumer).__name__)
        return self._open_state
