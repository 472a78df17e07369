"""Bundle of the plan inputs every schedule computation needs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo

from stint_planner.calculator import stint_duration_and_laps
from stint_planner.models.event_config import EventConfig
from stint_planner.models.fuel_stint_config import FuelStintConfig
from stint_planner.models.stint_profile import StintProfiles
from stint_planner.models.stint_type import StintType


@dataclass(frozen=True)
class ScheduleInputs:
    """Event, pit and profile data plus the viewer's timezone.

    Usage:
        inputs = ScheduleInputs(event_config, fuel_stint_config, profiles)
        duration, laps = inputs.stint(start, FUEL_SAVING_WITH_TIRES, timedelta(0))

    ``local_tz`` of None means the system's local timezone.
    """

    event_config: EventConfig
    fuel_stint_config: FuelStintConfig
    profiles: StintProfiles
    local_tz: tzinfo | None = None

    @property
    def race_end_utc(self) -> datetime:
        return self.event_config.race_end_utc

    @property
    def can_build(self) -> bool:
        """True when the race has a length and fuel-saving times are known."""
        return (
            not self.event_config.is_degenerate
            and self.profiles.fuel_saving.is_populated
        )

    def stint(
        self,
        start: datetime,
        stint_type: StintType,
        damage_modifier: timedelta,
    ) -> tuple[timedelta, int]:
        """Duration and laps of a stint starting at *start*."""
        return stint_duration_and_laps(
            start,
            stint_type,
            self.profiles,
            self.race_end_utc,
            self.fuel_stint_config.effective_tire_change_time,
            damage_modifier,
        )

    def to_local(self, instant: datetime) -> datetime:
        """Naive wall clock time of *instant* in the viewer's timezone."""
        return instant.astimezone(self.local_tz).replace(tzinfo=None)
