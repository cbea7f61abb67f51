"""Shared state with capability-scoped access and clamped invariants."""
from src.shared_state.hub import CounterCapable, SharedStateHub, VitalCapable
from src.shared_state.models import BoundedVital, SharedCounters, VitalSnapshot
from src.shared_state.open_state import OpenSharedState
from src.shared_state.protocols import (
    CounterAccess,
    PublicView,
    TurnCountReader,
    VitalAccess,
    VitalDiagnostics,
)
from src.shared_state.restricted import RestrictedSharedState

__all__ = [
    "SharedStateHub",
    "VitalCapable",
    "CounterCapable",
    "RestrictedSharedState",
    "OpenSharedState",
    "BoundedVital",
    "SharedCounters",
    "VitalSnapshot",
    "VitalAccess",
    "CounterAccess",
    "VitalDiagnostics",
    "TurnCountReader",
    "PublicView",
]
