"""Pydantic v2 records owned by the shared-state components."""
from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from src.shared.constants import DEFAULT_MAX_HP, MIN_HP


class BoundedVital(BaseModel):
    """Current/maximum pair backing ``RestrictedSharedState``.

    The bound ``0 <= current <= maximum`` is checked once at construction.
    Afterwards only the owning component writes the fields, and it clamps
    every write instead of validating it.
    """
    current: int = DEFAULT_MAX_HP
    maximum: int = Field(default=DEFAULT_MAX_HP, gt=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> BoundedVital:
        if not MIN_HP <= self.current <= self.maximum:
            raise ValueError(
                f"current must be within [{MIN_HP}, {self.maximum}], got {self.current}"
            )
        return self


class SharedCounters(BaseModel):
    """Counters and flags backing ``OpenSharedState``.

    Any capability holder may set any field to any value of its type.
    """
    turn_count: int = 0
    suppress_flag_1: bool = False
    suppress_flag_2: bool = False
    suppress_flag_3: bool = False

    model_config = {"validate_assignment": True, "strict": True}


class VitalSnapshot(BaseModel):
    """Immutable copy of a ``BoundedVital`` taken at one instant."""
    current: int
    maximum: int

    model_config = {"frozen": True}
