"""Cascading recalculation of a schedule after a single-row edit.

Every row starts where the previous row actually ended, so an edit to one
row ripples forward through the rest of the schedule. The row list is
edited in place: interior rows are re-derived, rows are appended at the
tail while the race is not yet covered, and rows past the one that
reaches the race end are dropped.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta

from stint_planner.builder import covers_race_end, next_row
from stint_planner.drivers import resolve_stint_number
from stint_planner.exceptions import InvalidRowIndexError
from stint_planner.inputs import ScheduleInputs
from stint_planner.models.driver import Driver
from stint_planner.models.schedule_row import ScheduleRow
from stint_planner.models.stint_type import StintType


def _check_index(rows: list[ScheduleRow], index: int) -> None:
    if not 0 <= index < len(rows):
        raise InvalidRowIndexError(index, len(rows))


def _previous(rows: list[ScheduleRow], index: int) -> ScheduleRow | None:
    return rows[index - 1] if index > 0 else None


def _recompute(
    row: ScheduleRow,
    utc_start: datetime,
    tod_start: datetime,
    inputs: ScheduleInputs,
) -> None:
    """Re-derive timing and laps of *row* from a new start.

    Any manual actual end or lap override on the row is discarded.
    """
    duration, laps = inputs.stint(utc_start, row.stint_type, row.damage_modifier)
    row.utc_start = utc_start
    row.utc_end = utc_start + duration
    row.tod_start = tod_start
    row.tod_end = tod_start + duration
    row.actual_end = row.utc_end
    row.duration_delta = timedelta(0)
    row.calculated_laps = laps
    row.actual_laps = laps
    row.local_start = inputs.to_local(row.utc_start)
    row.local_end = inputs.to_local(row.utc_end)


def _chain(row: ScheduleRow, previous: ScheduleRow, inputs: ScheduleInputs) -> None:
    """Re-derive *row* so it starts at the actual end of *previous*."""
    row.fuel_stint_number = previous.fuel_stint_number + 1
    row.stint_number = resolve_stint_number(
        row.driver_id, previous.driver_id, previous.stint_number,
    )
    _recompute(
        row,
        previous.actual_end,
        inputs.event_config.to_tod(previous.actual_end),
        inputs,
    )


def propagate(
    rows: list[ScheduleRow],
    index: int,
    inputs: ScheduleInputs,
) -> list[ScheduleRow]:
    """Re-derive every row after *index* and fit the schedule to the race end.

    The walk stops at the first row that covers the race end (see
    :func:`~stint_planner.builder.covers_race_end`), so an early actual end
    on the last row does not add a row. Missing rows are appended on the
    way and surplus rows after the stop are removed. Returns *rows*, which
    is modified in place.
    """
    _check_index(rows, index)
    if not inputs.can_build:
        rows.clear()
        return rows

    race_end = inputs.race_end_utc
    cursor = index
    while not covers_race_end(rows[cursor], race_end):
        current = rows[cursor]
        if cursor == len(rows) - 1:
            rows.append(next_row(inputs, current))
        else:
            _chain(rows[cursor + 1], current, inputs)
        cursor += 1

    del rows[cursor + 1:]
    return rows


def update_stint_type(
    rows: list[ScheduleRow],
    index: int,
    stint_type: StintType,
    inputs: ScheduleInputs,
) -> list[ScheduleRow]:
    """Change the classification of a row and recompute it from its own start."""
    _check_index(rows, index)
    row = rows[index]
    row.stint_type = stint_type
    previous = _previous(rows, index)
    if previous is not None:
        row.stint_number = resolve_stint_number(
            row.driver_id, previous.driver_id, previous.stint_number,
        )
    _recompute(row, row.utc_start, row.tod_start, inputs)
    return propagate(rows, index, inputs)


def update_actual_end_time(
    rows: list[ScheduleRow],
    index: int,
    wall_clock: time,
    inputs: ScheduleInputs,
) -> list[ScheduleRow]:
    """Override when a stint really ended.

    Only the hour, minute and second of *wall_clock* are applied; the date
    of the current actual end is kept.
    """
    _check_index(rows, index)
    row = rows[index]
    row.actual_end = row.actual_end.replace(
        hour=wall_clock.hour,
        minute=wall_clock.minute,
        second=wall_clock.second,
    )
    row.duration_delta = row.actual_end - row.utc_end
    return propagate(rows, index, inputs)


def update_driver(
    rows: list[ScheduleRow],
    index: int,
    driver: Driver | None,
    inputs: ScheduleInputs,
) -> list[ScheduleRow]:
    """Assign *driver* (or nobody) to a row."""
    _check_index(rows, index)
    row = rows[index]
    row.driver_id = driver.id if driver is not None else None
    row.stint_preference = driver.stint_preference if driver is not None else 0
    previous = _previous(rows, index)
    if previous is None:
        row.stint_number = 1
    else:
        row.stint_number = resolve_stint_number(
            row.driver_id, previous.driver_id, previous.stint_number,
        )
    return propagate(rows, index, inputs)


def update_damage_modifier(
    rows: list[ScheduleRow],
    index: int,
    damage_modifier: timedelta,
    inputs: ScheduleInputs,
) -> list[ScheduleRow]:
    """Set the per-lap damage penalty from a row onwards.

    The change is added to every later row as well, so damage picked up
    in one stint stays on the car and any further damage recorded later
    is kept on top of it.
    """
    _check_index(rows, index)
    row = rows[index]
    delta = damage_modifier - row.damage_modifier
    row.damage_modifier = damage_modifier
    for later in rows[index + 1:]:
        later.damage_modifier = max(timedelta(0), later.damage_modifier + delta)
    _recompute(row, row.utc_start, row.tod_start, inputs)
    return propagate(rows, index, inputs)


def update_actual_laps(
    rows: list[ScheduleRow],
    index: int,
    actual_laps: int,
) -> list[ScheduleRow]:
    """Record the laps a stint really ran. Timing is not affected."""
    _check_index(rows, index)
    rows[index].actual_laps = actual_laps
    return rows


def rebase(rows: list[ScheduleRow], inputs: ScheduleInputs) -> list[ScheduleRow]:
    """Re-anchor a persisted schedule at the race start and re-derive it.

    Used when a saved schedule is loaded against inputs that may have
    changed since it was saved.
    """
    if not rows or not inputs.can_build:
        rows.clear()
        return rows

    config = inputs.event_config
    first = rows[0]
    first.fuel_stint_number = 1
    first.stint_number = 1
    _recompute(first, config.race_start_utc, config.race_start_tod, inputs)
    return propagate(rows, 0, inputs)
