"""Tests for the schedule operation log."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

import stint_planner._logging as engine_logging
from stint_planner import (
    STANDARD_NO_TIRES,
    FuelStintSchedule,
    InvalidRowIndexError,
    disable_file_log,
    enable_file_log,
)
from stint_planner.constants import LOG_DIR_ENV_VAR, LOG_FILE_NAME


@pytest.fixture
def new_schedule(event_config, fuel_stint_config, profiles, drivers):
    """Factory fixture so the build itself happens inside the test."""

    def _make() -> FuelStintSchedule:
        return FuelStintSchedule(event_config, fuel_stint_config, profiles, drivers)

    return _make


def _messages(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == engine_logging.LOGGER_NAME]


class TestOperationRecords:
    def test_build_reports_rows(self, new_schedule, caplog) -> None:
        caplog.set_level(logging.INFO, logger=engine_logging.LOGGER_NAME)
        new_schedule()
        assert any(m.startswith("build(): 0 -> 3 rows (appended 3)") for m in _messages(caplog))

    def test_appended_rows(self, schedule, caplog) -> None:
        caplog.set_level(logging.INFO, logger=engine_logging.LOGGER_NAME)
        schedule.update_actual_end_time(0, "12:05 PM")
        assert any(
            m.startswith("update_actual_end_time(index=0, wall_clock='12:05 PM'): 3 -> 4 rows (appended 1)")
            for m in _messages(caplog)
        )

    def test_trimmed_rows(self, schedule, caplog) -> None:
        caplog.set_level(logging.INFO, logger=engine_logging.LOGGER_NAME)
        schedule.update_stint_type(1, "std no tires")
        assert schedule.rows[1].stint_type == STANDARD_NO_TIRES
        assert any(
            m.startswith("update_stint_type(index=1, stint_type='std no tires'): 3 -> 2 rows (trimmed 1)")
            for m in _messages(caplog)
        )

    def test_unchanged_row_count(self, schedule, caplog) -> None:
        caplog.set_level(logging.INFO, logger=engine_logging.LOGGER_NAME)
        schedule.update_driver(0, 1)
        (message,) = _messages(caplog)
        assert message.startswith("update_driver(index=0, driver_id=1): 3 -> 3 rows in ")

    def test_saved_rows_summarised(self, schedule, event_config, fuel_stint_config, profiles, caplog) -> None:
        caplog.set_level(logging.INFO, logger=engine_logging.LOGGER_NAME)
        FuelStintSchedule(event_config, fuel_stint_config, profiles, rows=schedule.rows)
        assert any(m.startswith("load(rows=<3 rows>): 0 -> 3 rows") for m in _messages(caplog))

    def test_rejected_edit(self, schedule, caplog) -> None:
        caplog.set_level(logging.INFO, logger=engine_logging.LOGGER_NAME)
        with pytest.raises(InvalidRowIndexError):
            schedule.update_driver(9, None)
        (record,) = [r for r in caplog.records if r.name == engine_logging.LOGGER_NAME]
        assert record.levelno == logging.WARNING
        assert record.getMessage().startswith(
            "update_driver(index=9, driver_id=None) rejected: InvalidRowIndexError: Row 9"
        )


class TestLogFile:
    def test_no_file_by_default(self, new_schedule, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        new_schedule().update_driver(0, 1)
        assert engine_logging._file_handler is None
        assert list(tmp_path.iterdir()) == []

    def test_enable_file_log(self, new_schedule, tmp_path) -> None:
        path = enable_file_log(tmp_path / "logs")
        new_schedule().update_actual_end_time(0, "12:05 PM")
        content = Path(path).read_text(encoding="utf-8")
        assert Path(path).name == LOG_FILE_NAME
        assert "build(): 0 -> 3 rows" in content
        assert "3 -> 4 rows (appended 1)" in content

    def test_enable_twice_keeps_one_handler(self, tmp_path) -> None:
        enable_file_log(tmp_path)
        enable_file_log(tmp_path)
        handlers = [h for h in engine_logging.logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(handlers) == 1

    def test_disable_file_log(self, new_schedule, tmp_path) -> None:
        path = Path(enable_file_log(tmp_path))
        disable_file_log()
        new_schedule()
        assert path.read_text(encoding="utf-8") == ""
        assert engine_logging.logger.level == logging.NOTSET

    def test_env_var_opts_in(self, new_schedule, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv(LOG_DIR_ENV_VAR, str(tmp_path / "env_logs"))
        new_schedule()
        content = (tmp_path / "env_logs" / LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "build(): 0 -> 3 rows" in content

    def test_failures_reach_file(self, schedule, tmp_path) -> None:
        path = Path(enable_file_log(tmp_path))
        with pytest.raises(InvalidRowIndexError):
            schedule.update_driver(9, None)
        content = path.read_text(encoding="utf-8")
        assert "WARNING" in content
        assert "update_driver(index=9, driver_id=None) rejected: InvalidRowIndexError" in content
