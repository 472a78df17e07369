"""Shared constants for the stint planner."""

from __future__ import annotations

LOG_DIR_ENV_VAR = "STINT_PLANNER_LOG_DIR"
LOG_FILE_NAME = "schedule_operations.log"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Wall clock formats accepted for an actual end time, tried in order
WALL_CLOCK_FORMATS: tuple[str, ...] = (
    "%I:%M %p",
    "%H:%M",
    "%H:%M:%S",
    "%I:%M:%S %p",
)

WALL_CLOCK_DISPLAY_FORMAT = "%I:%M %p"
