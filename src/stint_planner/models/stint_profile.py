"""Average stint characteristics for one driving style."""

from __future__ import annotations

import math
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, NonNegativeFloat, NonNegativeInt, field_validator

from stint_planner.models.stint_type import DrivingStyle


class StintProfile(BaseModel):
    """Lap time, fuel burn and overheads of a full fuel stint."""

    model_config = ConfigDict(frozen=True)

    lap_time: timedelta = timedelta(0)
    fuel_per_lap: NonNegativeFloat = 0.0
    lap_count: NonNegativeInt = 0
    track_time: timedelta = timedelta(0)
    pit_duration: timedelta = timedelta(0)
    track_time_with_pit: timedelta = timedelta(0)
    lap_time_with_pit: timedelta = timedelta(0)
    fuel_per_stint: NonNegativeFloat = 0.0

    @field_validator(
        "lap_time", "track_time", "pit_duration", "track_time_with_pit", "lap_time_with_pit",
    )
    @classmethod
    def _non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("durations must not be negative")
        return value

    @classmethod
    def derive(
        cls,
        lap_time: timedelta,
        fuel_per_lap: float,
        fuel_tank_size: int,
        pit_duration: timedelta,
    ) -> StintProfile:
        """Build a profile from an average lap time and fuel use per lap.

        The lap count is the number of whole laps a full tank covers; a
        zero fuel use means the profile is not filled in yet and yields
        zero laps.
        """
        lap_count = 0 if fuel_per_lap == 0 else math.floor(fuel_tank_size / fuel_per_lap)
        track_time = lap_time * lap_count
        lap_time_with_pit = (
            timedelta(0) if lap_count == 0 else lap_time + pit_duration / lap_count
        )
        return cls(
            lap_time=lap_time,
            fuel_per_lap=fuel_per_lap,
            lap_count=lap_count,
            track_time=track_time,
            pit_duration=pit_duration,
            track_time_with_pit=track_time + pit_duration,
            lap_time_with_pit=lap_time_with_pit,
            fuel_per_stint=fuel_per_lap * lap_count,
        )

    @property
    def is_populated(self) -> bool:
        """True once the profile describes a stint of non-zero length."""
        return self.track_time_with_pit > timedelta(0)


class StintProfiles(BaseModel):
    """The standard and fuel-saving profiles of one plan."""

    model_config = ConfigDict(frozen=True)

    standard: StintProfile
    fuel_saving: StintProfile

    def for_style(self, style: DrivingStyle) -> StintProfile:
        if style is DrivingStyle.FUEL_SAVING:
            return self.fuel_saving
        return self.standard
