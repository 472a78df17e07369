"""Stint duration and lap count arithmetic."""

from __future__ import annotations

from datetime import datetime, timedelta

from stint_planner.models.stint_profile import StintProfiles
from stint_planner.models.stint_type import StintType


def _ceil_laps(duration: timedelta, lap_time: timedelta) -> int:
    """Laps needed to cover *duration*, counting a partial lap as a lap."""
    if duration <= timedelta(0) or lap_time <= timedelta(0):
        return 0
    return -(-duration // lap_time)


def stint_duration_and_laps(
    start: datetime,
    stint_type: StintType,
    profiles: StintProfiles,
    race_end: datetime,
    tire_change_time: timedelta,
    damage_modifier: timedelta,
) -> tuple[timedelta, int]:
    """Return the track duration and lap count of a stint starting at *start*.

    A full stint runs the profile's lap count with ``damage_modifier`` added
    to every lap. A stint that would run past *race_end* is cut to end
    exactly at *race_end*, and its laps are re-counted from the damaged lap
    time. The result can be zero or negative when *start* is at or past
    *race_end*; callers treat that as a finished schedule.
    """
    profile = profiles.for_style(stint_type.style)
    overhead = profile.track_time_with_pit
    if stint_type.tires_changed:
        overhead += tire_change_time

    nominal = damage_modifier * profile.lap_count + overhead

    if start + nominal > race_end:
        duration = race_end - start
        return duration, _ceil_laps(duration, profile.lap_time + damage_modifier)
    return nominal, profile.lap_count
