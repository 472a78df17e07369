"""Driver assignment helpers: stint numbering and roster lookups."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable

from stint_planner.exceptions import UnknownDriverError
from stint_planner.models.driver import Driver
from stint_planner.models.schedule_row import ScheduleRow


def resolve_stint_number(
    current_driver: int | None,
    previous_driver: int | None,
    previous_stint_number: int,
) -> int:
    """Return the consecutive-stint count for the current row's driver.

    A driver continuing from the previous row extends that row's count;
    anything else (a new driver, or no driver on either row) starts at 1.
    """
    if current_driver is not None and current_driver == previous_driver:
        return previous_stint_number + 1
    return 1


def find_driver(drivers: Iterable[Driver], driver_id: int) -> Driver:
    """Return the roster entry with *driver_id*."""
    for driver in drivers:
        if driver.id == driver_id:
            return driver
    raise UnknownDriverError(driver_id)


def driver_local_times(row: ScheduleRow, driver: Driver | None) -> tuple[datetime, datetime]:
    """Start and end of *row* on the assigned driver's local clock.

    Without a driver the UTC times are returned unchanged.
    """
    start = row.utc_start.replace(tzinfo=None)
    end = row.utc_end.replace(tzinfo=None)
    if driver is None:
        return start, end
    offset = timedelta(hours=driver.utc_offset)
    return start + offset, end + offset
