"""Stint planner: fuel stint schedules for endurance races."""

from stint_planner._logging import disable_file_log, enable_file_log
from stint_planner.builder import build_schedule
from stint_planner.calculator import stint_duration_and_laps
from stint_planner.drivers import driver_local_times, find_driver, resolve_stint_number
from stint_planner.exceptions import (
    InvalidRowIndexError,
    StintPlannerError,
    StintPlannerParseError,
    UnknownDriverError,
)
from stint_planner.inputs import ScheduleInputs
from stint_planner.models import (
    FUEL_SAVING_NO_TIRES,
    FUEL_SAVING_WITH_TIRES,
    STANDARD_NO_TIRES,
    STANDARD_WITH_TIRES,
    Driver,
    DrivingStyle,
    EventConfig,
    FuelStintConfig,
    ScheduleRow,
    StintProfile,
    StintProfiles,
    StintType,
)
from stint_planner.schedule import FuelStintSchedule

__all__ = [
    "Driver",
    "DrivingStyle",
    "EventConfig",
    "FUEL_SAVING_NO_TIRES",
    "FUEL_SAVING_WITH_TIRES",
    "FuelStintConfig",
    "FuelStintSchedule",
    "InvalidRowIndexError",
    "STANDARD_NO_TIRES",
    "STANDARD_WITH_TIRES",
    "ScheduleInputs",
    "ScheduleRow",
    "StintPlannerError",
    "StintPlannerParseError",
    "StintProfile",
    "StintProfiles",
    "StintType",
    "UnknownDriverError",
    "build_schedule",
    "disable_file_log",
    "driver_local_times",
    "enable_file_log",
    "find_driver",
    "resolve_stint_number",
    "stint_duration_and_laps",
]

__version__ = "0.1.0"
