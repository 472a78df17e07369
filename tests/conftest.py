"""Shared fixtures: a one hour race whose fuel-saving stint is 1260s long."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

import stint_planner._logging as engine_logging
from stint_planner import (
    Driver,
    EventConfig,
    FuelStintConfig,
    FuelStintSchedule,
    ScheduleInputs,
    StintProfile,
    StintProfiles,
)
from stint_planner.constants import LOG_DIR_ENV_VAR

RACE_START = datetime(2021, 10, 2, 12, 0, tzinfo=timezone.utc)
RACE_START_TOD = datetime(2021, 10, 2, 9, 0)
PIT = timedelta(seconds=60)
TANK = 30


def at(seconds: float) -> datetime:
    """Instant *seconds* after the green flag."""
    return RACE_START + timedelta(seconds=seconds)


def _make_event_config(race_seconds: float = 3600) -> EventConfig:
    return EventConfig(
        race_start_utc=RACE_START,
        race_duration=timedelta(seconds=race_seconds),
        race_start_tod=RACE_START_TOD,
    )


def _make_profiles() -> StintProfiles:
    # fuel saving: 10 laps of 120s, standard: 30 laps of 100s
    return StintProfiles(
        standard=StintProfile.derive(timedelta(seconds=100), 1.0, TANK, PIT),
        fuel_saving=StintProfile.derive(timedelta(seconds=120), 3.0, TANK, PIT),
    )


@pytest.fixture(autouse=True)
def _isolated_operation_log(monkeypatch):
    """Start every test without a log file and with the env var unset."""
    engine_logging.disable_file_log()
    monkeypatch.delenv(LOG_DIR_ENV_VAR, raising=False)
    monkeypatch.setattr(engine_logging, "_env_checked", False)

    yield

    engine_logging.disable_file_log()


@pytest.fixture
def make_event_config():
    """Factory fixture for event configs of a given race length in seconds."""
    return _make_event_config


@pytest.fixture
def event_config() -> EventConfig:
    return _make_event_config()


@pytest.fixture
def fuel_stint_config() -> FuelStintConfig:
    return FuelStintConfig(
        pit_duration=PIT,
        fuel_tank_size=TANK,
        tire_change_time=timedelta(0),
    )


@pytest.fixture
def profiles() -> StintProfiles:
    return _make_profiles()


@pytest.fixture
def drivers() -> list[Driver]:
    return [
        Driver(id=1, name="Alex", stint_preference=2, utc_offset=-5),
        Driver(id=2, name="Sam", stint_preference=1, utc_offset=2),
    ]


@pytest.fixture
def inputs(event_config, fuel_stint_config, profiles) -> ScheduleInputs:
    return ScheduleInputs(event_config, fuel_stint_config, profiles, local_tz=timezone.utc)


@pytest.fixture
def schedule(event_config, fuel_stint_config, profiles, drivers) -> FuelStintSchedule:
    return FuelStintSchedule(
        event_config, fuel_stint_config, profiles, drivers, local_tz=timezone.utc,
    )
