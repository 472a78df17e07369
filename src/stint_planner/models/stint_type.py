"""Stint classification (driving style x tire change)."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DrivingStyle(str, Enum):
    """How hard the car is driven during a stint."""

    STANDARD = "standard"
    FUEL_SAVING = "fuel_saving"


class StintType(BaseModel):
    """Driving style of a stint and whether its pit stop changes tires."""

    model_config = ConfigDict(frozen=True)

    style: DrivingStyle
    tires_changed: bool


FUEL_SAVING_NO_TIRES = StintType(style=DrivingStyle.FUEL_SAVING, tires_changed=False)
FUEL_SAVING_WITH_TIRES = StintType(style=DrivingStyle.FUEL_SAVING, tires_changed=True)
STANDARD_NO_TIRES = StintType(style=DrivingStyle.STANDARD, tires_changed=False)
STANDARD_WITH_TIRES = StintType(style=DrivingStyle.STANDARD, tires_changed=True)

ALL_STINT_TYPES: tuple[StintType, ...] = (
    FUEL_SAVING_NO_TIRES,
    FUEL_SAVING_WITH_TIRES,
    STANDARD_NO_TIRES,
    STANDARD_WITH_TIRES,
)
