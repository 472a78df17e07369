"""Stint planner data models."""

from stint_planner.models.driver import Driver
from stint_planner.models.event_config import EventConfig
from stint_planner.models.fuel_stint_config import FuelStintConfig
from stint_planner.models.schedule_row import ScheduleRow
from stint_planner.models.stint_profile import StintProfile, StintProfiles
from stint_planner.models.stint_type import (
    ALL_STINT_TYPES,
    FUEL_SAVING_NO_TIRES,
    FUEL_SAVING_WITH_TIRES,
    STANDARD_NO_TIRES,
    STANDARD_WITH_TIRES,
    DrivingStyle,
    StintType,
)

__all__ = [
    "ALL_STINT_TYPES",
    "Driver",
    "DrivingStyle",
    "EventConfig",
    "FUEL_SAVING_NO_TIRES",
    "FUEL_SAVING_WITH_TIRES",
    "FuelStintConfig",
    "STANDARD_NO_TIRES",
    "STANDARD_WITH_TIRES",
    "ScheduleRow",
    "StintProfile",
    "StintProfiles",
    "StintType",
]
