"""Shared test fixtures for the shared-state test suite."""
from __future__ import annotations

import logging

import pytest

from src.shared.config import SharedStateConfig
from src.shared_state.hub import SharedStateHub
from src.shared_state.open_state import OpenSharedState
from src.shared_state.restricted import RestrictedSharedState
from tests.fixtures.consumers import Player


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove shared-state environment overrides."""
    for name in ("LOG_LEVEL", "INITIAL_MAX_HP", "DIAGNOSTICS_LOGGER"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config(clean_env: None) -> SharedStateConfig:
    """Provide a config with default values."""
    return SharedStateConfig()


@pytest.fixture
def hub(config: SharedStateConfig) -> SharedStateHub:
    """Provide a freshly composed hub."""
    return SharedStateHub(config)


@pytest.fixture
def diagnostics_sink() -> logging.Logger:
    """Provide a dedicated logger for diagnostic output."""
    return logging.getLogger("tests.diagnostics")


@pytest.fixture
def restricted(diagnostics_sink: logging.Logger) -> RestrictedSharedState:
    """Provide a RestrictedSharedState at its default 32/32."""
    return RestrictedSharedState(diagnostics_sink=diagnostics_sink)


@pytest.fixture
def open_state() -> OpenSharedState:
    """Provide an OpenSharedState with fresh counters."""
    return OpenSharedState()


@pytest.fixture
def player(hub: SharedStateHub) -> Player:
    """Provide a Player granted both capabilities."""
    consumer = Player()
    hub.grant_vitals(consumer)
    hub.grant_counters(consumer)
    return consumer
