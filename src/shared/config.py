"""Shared configuration management using pydantic-settings."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from src.shared.constants import DEFAULT_MAX_HP, DIAGNOSTICS_LOGGER_NAME


class SharedConfig(BaseSettings):
    """Base configuration shared across all components."""
    log_level: str = Field(default="info", validation_alias="LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


class SharedStateConfig(SharedConfig):
    """Configuration for the shared-state hub."""
    initial_max_hp: int = Field(
        default=DEFAULT_MAX_HP, gt=0, validation_alias="INITIAL_MAX_HP"
    )
    diagnostics_logger: str = Field(
        default=DIAGNOSTICS_LOGGER_NAME, validation_alias="DIAGNOSTICS_LOGGER"
    )
