"""Public schedule class owning one plan's rows."""

from __future__ import annotations

from datetime import time, timedelta, tzinfo
from typing import Any, Iterable

from stint_planner import recalculator
from stint_planner._logging import log_schedule_call
from stint_planner.builder import build_schedule, covers_race_end
from stint_planner.drivers import find_driver
from stint_planner.formatters import parse_stint_type, parse_wall_clock
from stint_planner.inputs import ScheduleInputs
from stint_planner.models.driver import Driver
from stint_planner.models.event_config import EventConfig
from stint_planner.models.fuel_stint_config import FuelStintConfig
from stint_planner.models.schedule_row import ScheduleRow
from stint_planner.models.stint_profile import StintProfiles
from stint_planner.models.stint_type import StintType


class FuelStintSchedule:
    """Fuel stint schedule of one plan.

    Usage:
        schedule = FuelStintSchedule(event_config, fuel_stint_config, profiles, drivers)
        schedule.update_driver(0, driver_id=7)
        schedule.update_actual_end_time(0, "3:05 PM")
        rows = schedule.rows

        # Reload a saved schedule against the current inputs:
        schedule = FuelStintSchedule(event_config, fuel_stint_config, profiles, rows=saved)

    An empty schedule means the plan's inputs are not complete yet.
    """

    def __init__(
        self,
        event_config: EventConfig,
        fuel_stint_config: FuelStintConfig,
        profiles: StintProfiles,
        drivers: Iterable[Driver] = (),
        rows: Iterable[ScheduleRow] | None = None,
        local_tz: tzinfo | None = None,
    ) -> None:
        self._inputs = ScheduleInputs(
            event_config=event_config,
            fuel_stint_config=fuel_stint_config,
            profiles=profiles,
            local_tz=local_tz,
        )
        self._drivers = list(drivers)
        self._rows: list[ScheduleRow] = []
        if rows is None:
            self.build()
        else:
            self.load(rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"FuelStintSchedule(rows={len(self._rows)})"

    @property
    def inputs(self) -> ScheduleInputs:
        return self._inputs

    @property
    def drivers(self) -> list[Driver]:
        return list(self._drivers)

    @property
    def rows(self) -> list[ScheduleRow]:
        """Copies of the current rows, in fuel stint order."""
        return [row.model_copy() for row in self._rows]

    @property
    def is_empty(self) -> bool:
        return not self._rows

    @property
    def is_complete(self) -> bool:
        """True when the last row covers the race end."""
        return bool(self._rows) and covers_race_end(self._rows[-1], self._inputs.race_end_utc)

    def to_records(self) -> list[dict[str, Any]]:
        """Rows as plain dicts for the host to persist."""
        return [row.model_dump() for row in self._rows]

    # ── Operations ─────────────────────────────────────────────

    @log_schedule_call
    def build(self) -> list[ScheduleRow]:
        """Replace the rows with a freshly built schedule."""
        self._rows = build_schedule(self._inputs)
        return self.rows

    @log_schedule_call
    def load(self, rows: Iterable[ScheduleRow]) -> list[ScheduleRow]:
        """Adopt saved rows and re-derive them against the current inputs."""
        self._rows = [row.model_copy(deep=True) for row in rows]
        recalculator.rebase(self._rows, self._inputs)
        return self.rows

    @log_schedule_call
    def recalculate(self, index: int = 0) -> list[ScheduleRow]:
        """Re-run propagation from a row without editing it."""
        recalculator.propagate(self._rows, index, self._inputs)
        return self.rows

    @log_schedule_call
    def update_stint_type(self, index: int, stint_type: StintType | str) -> list[ScheduleRow]:
        """Change a row's stint type; accepts a type or its display label."""
        if isinstance(stint_type, str):
            stint_type = parse_stint_type(stint_type)
        recalculator.update_stint_type(self._rows, index, stint_type, self._inputs)
        return self.rows

    @log_schedule_call
    def update_actual_end_time(self, index: int, wall_clock: time | str) -> list[ScheduleRow]:
        """Override a row's actual end; accepts a time or a wall clock string."""
        if isinstance(wall_clock, str):
            wall_clock = parse_wall_clock(wall_clock)
        recalculator.update_actual_end_time(self._rows, index, wall_clock, self._inputs)
        return self.rows

    @log_schedule_call
    def update_driver(self, index: int, driver_id: int | None) -> list[ScheduleRow]:
        """Assign a roster driver to a row, or clear it with None."""
        driver = None if driver_id is None else find_driver(self._drivers, driver_id)
        recalculator.update_driver(self._rows, index, driver, self._inputs)
        return self.rows

    @log_schedule_call
    def update_damage_modifier(self, index: int, damage_modifier: timedelta) -> list[ScheduleRow]:
        """Set the per-lap damage penalty from a row onwards."""
        recalculator.update_damage_modifier(self._rows, index, damage_modifier, self._inputs)
        return self.rows

    @log_schedule_call
    def update_actual_laps(self, index: int, actual_laps: int) -> list[ScheduleRow]:
        """Record the laps a stint really ran."""
        recalculator.update_actual_laps(self._rows, index, actual_laps)
        return self.rows
