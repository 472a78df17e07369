"""Conversions between engine values and the strings a UI shows or accepts."""

from __future__ import annotations

import re
from datetime import datetime, time, timedelta
from enum import Enum

from stint_planner.constants import WALL_CLOCK_DISPLAY_FORMAT, WALL_CLOCK_FORMATS
from stint_planner.exceptions import StintPlannerParseError
from stint_planner.models.stint_type import (
    FUEL_SAVING_NO_TIRES,
    FUEL_SAVING_WITH_TIRES,
    STANDARD_NO_TIRES,
    STANDARD_WITH_TIRES,
    StintType,
)

STINT_TYPE_LABELS: dict[StintType, str] = {
    FUEL_SAVING_NO_TIRES: "fs no tires",
    FUEL_SAVING_WITH_TIRES: "fs w/ tires",
    STANDARD_NO_TIRES: "std no tires",
    STANDARD_WITH_TIRES: "std w/ tires",
}

_LABEL_TO_STINT_TYPE = {label: stint_type for stint_type, label in STINT_TYPE_LABELS.items()}

_HOUR_MIN_SEC_RE = re.compile(r"^\d+(?::\d+){0,2}$", re.ASCII)
_MIN_SEC_MILLI_RE = re.compile(
    r"^(?:(?P<minutes>\d{1,2}):)?(?P<seconds>\d+)(?:\.(?P<fraction>\d+))?$",
    re.ASCII,
)


class DurationFormat(str, Enum):
    """Display formats for durations."""

    HOUR_MIN_SEC = "hh:mm:ss"
    MIN_SEC_MILLI = "mm:ss.fff"


def format_stint_type(stint_type: StintType) -> str:
    """Short select-box label, e.g. 'fs w/ tires'."""
    return STINT_TYPE_LABELS[stint_type]


def parse_stint_type(label: str) -> StintType:
    """Inverse of format_stint_type."""
    try:
        return _LABEL_TO_STINT_TYPE[label.strip()]
    except KeyError:
        raise StintPlannerParseError(
            f"{label!r} cannot be mapped to a valid stint type"
        ) from None


def format_duration(duration: timedelta, fmt: DurationFormat = DurationFormat.HOUR_MIN_SEC) -> str:
    """Format a duration as -HH:MM:SS or -MM:SS.fff (sign only when negative)."""
    prefix = "-" if duration < timedelta(0) else ""
    total_ms = abs(duration) // timedelta(milliseconds=1)
    total_seconds, millis = divmod(total_ms, 1000)
    total_minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(total_minutes, 60)
    if fmt is DurationFormat.HOUR_MIN_SEC:
        return f"{prefix}{hours:02}:{minutes:02}:{seconds:02}"
    return f"{prefix}{minutes:02}:{seconds:02}.{millis:03}"


def parse_duration(text: str, fmt: DurationFormat = DurationFormat.HOUR_MIN_SEC) -> timedelta:
    """Parse a duration typed by a user.

    HOUR_MIN_SEC accepts 'H:M:S', 'M:S' or 'S'. MIN_SEC_MILLI accepts
    'M:S.fff', 'M:S', 'S.fff' or 'S'; the fraction is read as a decimal
    fraction of a second.
    """
    value = text.strip()
    if fmt is DurationFormat.HOUR_MIN_SEC:
        if _HOUR_MIN_SEC_RE.match(value) is None:
            raise StintPlannerParseError(f"{text!r} is not a valid duration")
        seconds = 0
        for part in value.split(":"):
            seconds = seconds * 60 + int(part)
        return timedelta(seconds=seconds)

    match = _MIN_SEC_MILLI_RE.match(value)
    if match is None:
        raise StintPlannerParseError(f"{text!r} is not a valid duration")
    minutes = int(match.group("minutes") or 0)
    seconds = int(match.group("seconds"))
    fraction = match.group("fraction") or "0"
    millis = int(fraction.ljust(3, "0")[:3])
    return timedelta(minutes=minutes, seconds=seconds, milliseconds=millis)


def parse_wall_clock(text: str) -> time:
    """Parse an actual end time such as '3:05 PM', '15:05' or '15:05:30'."""
    value = text.strip()
    for fmt in WALL_CLOCK_FORMATS:
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise StintPlannerParseError(f"The actual end time {text!r} could not be parsed")


def format_wall_clock(value: datetime) -> str:
    """Format a time of day as 'h:MM AM'."""
    return value.strftime(WALL_CLOCK_DISPLAY_FORMAT).lstrip("0")
