"""Tests for stint numbering and roster helpers."""

from __future__ import annotations

from datetime import datetime

import pytest

from stint_planner import (
    UnknownDriverError,
    build_schedule,
    driver_local_times,
    find_driver,
    resolve_stint_number,
)


class TestResolveStintNumber:
    def test_same_driver_continues(self) -> None:
        assert resolve_stint_number(3, 3, 2) == 3

    def test_different_driver_resets(self) -> None:
        assert resolve_stint_number(3, 4, 2) == 1

    def test_unassigned_row(self) -> None:
        assert resolve_stint_number(None, None, 5) == 1

    def test_previous_unassigned(self) -> None:
        assert resolve_stint_number(3, None, 5) == 1


class TestFindDriver:
    def test_found(self, drivers) -> None:
        assert find_driver(drivers, 2).name == "Sam"

    def test_missing(self, drivers) -> None:
        with pytest.raises(UnknownDriverError):
            find_driver(drivers, 99)

    def test_missing_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            find_driver([], 1)


class TestDriverLocalTimes:
    def test_shifted_by_driver_offset(self, inputs, drivers) -> None:
        row = build_schedule(inputs)[0]
        start, end = driver_local_times(row, drivers[0])
        assert start == datetime(2021, 10, 2, 7, 0)
        assert end == datetime(2021, 10, 2, 7, 21)

    def test_no_driver(self, inputs) -> None:
        row = build_schedule(inputs)[0]
        assert driver_local_times(row, None) == (
            datetime(2021, 10, 2, 12, 0),
            datetime(2021, 10, 2, 12, 21),
        )
