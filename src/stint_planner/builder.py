"""Initial schedule construction."""

from __future__ import annotations

from datetime import datetime, timedelta

from stint_planner.inputs import ScheduleInputs
from stint_planner.models.schedule_row import ScheduleRow
from stint_planner.models.stint_type import (
    FUEL_SAVING_NO_TIRES,
    FUEL_SAVING_WITH_TIRES,
    StintType,
)


def new_row(
    inputs: ScheduleInputs,
    stint_type: StintType,
    fuel_stint_number: int,
    utc_start: datetime,
    tod_start: datetime,
    damage_modifier: timedelta,
) -> ScheduleRow:
    """Create an unassigned row starting at *utc_start*."""
    duration, laps = inputs.stint(utc_start, stint_type, damage_modifier)
    utc_end = utc_start + duration
    return ScheduleRow(
        stint_type=stint_type,
        fuel_stint_number=fuel_stint_number,
        utc_start=utc_start,
        utc_end=utc_end,
        tod_start=tod_start,
        tod_end=tod_start + duration,
        actual_end=utc_end,
        damage_modifier=damage_modifier,
        calculated_laps=laps,
        actual_laps=laps,
        local_start=inputs.to_local(utc_start),
        local_end=inputs.to_local(utc_end),
    )


def next_row(inputs: ScheduleInputs, previous: ScheduleRow) -> ScheduleRow:
    """Create the row that follows *previous*, chained from its actual end.

    Follow-up stints default to fuel saving with a tire change and carry
    the previous row's damage modifier.
    """
    return new_row(
        inputs,
        FUEL_SAVING_WITH_TIRES,
        previous.fuel_stint_number + 1,
        previous.actual_end,
        inputs.event_config.to_tod(previous.actual_end),
        previous.damage_modifier,
    )


def covers_race_end(row: ScheduleRow, race_end: datetime) -> bool:
    """True when no further row is needed after *row*.

    A row ends the schedule once its planned end reaches the race end, or
    once its actual end does so that nothing starts past the flag.
    """
    return row.utc_end >= race_end or row.actual_end >= race_end


def build_schedule(inputs: ScheduleInputs) -> list[ScheduleRow]:
    """Build the full schedule from race start to race end.

    Returns an empty list while the inputs are incomplete (no race length
    or no fuel-saving stint times); the caller shows that as a prompt to
    finish the plan, not as an error.
    """
    if not inputs.can_build:
        return []

    config = inputs.event_config
    rows = [
        new_row(
            inputs,
            FUEL_SAVING_NO_TIRES,
            1,
            config.race_start_utc,
            config.race_start_tod,
            timedelta(0),
        )
    ]
    while not covers_race_end(rows[-1], inputs.race_end_utc):
        rows.append(next_row(inputs, rows[-1]))
    return rows
