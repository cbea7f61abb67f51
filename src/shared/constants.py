"""Shared constants used across the shared-state library."""
from __future__ import annotations

# Application version
VERSION: str = "1.0.0"

# Service name used for log records
SERVICE_NAME: str = "shared-state"

# Logger that parents every library module logger
PACKAGE_LOGGER_NAME: str = "src.shared_state"

# Vital bounds
DEFAULT_MAX_HP: int = 32
MIN_HP: int = 0

# Diagnostics
DIAGNOSTICS_LOGGER_NAME: str = "shared_state.diagnostics"
DIAGNOSTICS_LINE_FORMAT: str = "HP : {current}, MaxHP : {maximum}, Hierarchy is\n{hierarchy}"
DIAGNOSTICS_LABEL_PREFIX: str = "[label] "
