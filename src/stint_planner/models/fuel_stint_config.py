"""Pit stop overheads shared by every stint."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_validator


class FuelStintConfig(BaseModel):
    """Pit lane time, tank size and tire change overhead."""

    model_config = ConfigDict(frozen=True)

    pit_duration: timedelta = timedelta(0)
    fuel_tank_size: NonNegativeInt = 0
    tire_change_time: timedelta = timedelta(0)
    add_tire_time: bool = True

    @field_validator("pit_duration", "tire_change_time")
    @classmethod
    def _non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("durations must not be negative")
        return value

    @property
    def effective_tire_change_time(self) -> timedelta:
        """Tire change time added to stints that change tires."""
        return self.tire_change_time if self.add_tire_time else timedelta(0)
