"""Pydantic schemas for runtime configuration and display tiers."""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, Field, field_validator

MINIMUM_INTERVAL = 1.0


class TemperatureTier(str, Enum):
    """Severity buckets for an absolute temperature."""

    cool = "cool"
    warm = "warm"
    hot = "hot"


class DeltaTier(str, Enum):
    """Buckets for the change since the previous sample."""

    falling = "falling"
    steady = "steady"
    rising = "rising"
    surging = "surging"


class MonitorConfig(BaseModel):
    """Validated options for the polling loop."""

    interval: float = Field(..., description="Seconds between two samples.")
    delta: bool = Field(default=False, description="Show change since the previous sample.")

    @field_validator("interval")
    @classmethod
    def _check_interval(cls, value: float) -> float:
        if not math.isfinite(value) or value < MINIMUM_INTERVAL:
            raise ValueError("Time interval must be greater than 1 second.")
        return value
