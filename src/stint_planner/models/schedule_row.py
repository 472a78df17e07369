"""Schedule row model (one fuel stint of the plan)."""

from __future__ import annotations

from datetime import datetime, timedelta
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

from stint_planner._ids import time_ordered_uuid
from stint_planner.models.stint_type import StintType


class ScheduleRow(BaseModel):
    """Timing, lap and driver bookkeeping for one fuel stint.

    ``utc_end`` is the planned end; ``actual_end`` is what the next row
    chains from and is the only timing field a user overrides directly.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=time_ordered_uuid)
    stint_type: StintType
    fuel_stint_number: int
    utc_start: datetime
    utc_end: datetime
    tod_start: datetime
    tod_end: datetime
    actual_end: datetime
    duration_delta: timedelta = timedelta(0)
    damage_modifier: timedelta = timedelta(0)
    calculated_laps: NonNegativeInt = 0
    actual_laps: NonNegativeInt = 0
    driver_id: int | None = None
    stint_number: int = 1
    stint_preference: int = 0
    factor: float = 0.0
    local_start: datetime
    local_end: datetime

    @field_validator("damage_modifier")
    @classmethod
    def _non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("damage_modifier must not be negative")
        return value

    @property
    def duration(self) -> timedelta:
        """Planned length of the stint."""
        return self.utc_end - self.utc_start
