"""Custom exceptions for the stint planner."""

from __future__ import annotations


class StintPlannerError(Exception):
    """Base exception for all stint planner errors."""


class InvalidRowIndexError(StintPlannerError, IndexError):
    """Raised when an edit references a row outside the current schedule."""

    def __init__(self, index: int, row_count: int) -> None:
        self.index = index
        self.row_count = row_count
        super().__init__(f"Row {index} is outside a schedule of {row_count} rows")


class UnknownDriverError(StintPlannerError, LookupError):
    """Raised when a driver id is not part of the roster."""

    def __init__(self, driver_id: int) -> None:
        self.driver_id = driver_id
        super().__init__(f"Driver {driver_id} is not in the roster")


class StintPlannerParseError(StintPlannerError, ValueError):
    """Raised when a presentation string cannot be parsed."""
