"""Logging of schedule operations.

Every public :class:`~stint_planner.FuelStintSchedule` operation reports
to the ``stint_planner`` logger which row it touched and how the row count
changed. The library only attaches a ``NullHandler``; records reach disk
when the host configures logging, calls :func:`enable_file_log`, or sets
``STINT_PLANNER_LOG_DIR`` before the first operation runs.
"""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from stint_planner.constants import LOG_DIR_ENV_VAR, LOG_FILE_NAME, LOG_FORMAT

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "stint_planner"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_file_handler: logging.FileHandler | None = None
_env_checked = False
_owns_level = False
_lock = threading.Lock()


def _attach_file_handler(log_dir: str) -> str:
    # caller holds _lock
    global _file_handler, _owns_level
    path = os.path.abspath(os.path.join(log_dir, LOG_FILE_NAME))
    if _file_handler is not None:
        if _file_handler.baseFilename == path:
            return path
        _detach_file_handler()

    os.makedirs(log_dir, exist_ok=True)
    _file_handler = logging.FileHandler(path, encoding="utf-8")
    _file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_file_handler)
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
        _owns_level = True
    return path


def _detach_file_handler() -> None:
    # caller holds _lock
    global _file_handler, _owns_level
    if _file_handler is None:
        return
    logger.removeHandler(_file_handler)
    _file_handler.close()
    _file_handler = None
    if _owns_level:
        logger.setLevel(logging.NOTSET)
        _owns_level = False


def enable_file_log(log_dir: str | os.PathLike[str]) -> str:
    """Append operation records to a log file in *log_dir*.

    Returns the path of the log file. Calling it again with another
    directory moves the log there.
    """
    with _lock:
        return _attach_file_handler(os.fspath(log_dir))


def disable_file_log() -> None:
    """Stop writing operation records to the log file, if one is open."""
    with _lock:
        _detach_file_handler()


def _file_log_from_env() -> None:
    global _env_checked
    if _env_checked:
        return
    with _lock:
        if _env_checked:
            return
        _env_checked = True
        log_dir = os.environ.get(LOG_DIR_ENV_VAR)
        if log_dir:
            _attach_file_handler(log_dir)


def _describe(value: Any) -> str:
    # saved rows are summarised; their repr would span the whole schedule
    if isinstance(value, (list, tuple)):
        return f"<{len(value)} rows>"
    return repr(value)


def _row_change(before: int, after: int) -> str:
    if after > before:
        return f" (appended {after - before})"
    if after < before:
        return f" (trimmed {before - after})"
    return ""


def log_schedule_call(fn: F) -> F:
    """Decorator for schedule operations.

    Logs the operation with its bound arguments (the edited row index
    among them) and the row count before and after. Failures are logged
    as warnings and re-raised unchanged.
    """
    signature = inspect.signature(fn)

    @functools.wraps(fn)
    def wrapper(schedule: Any, *args: Any, **kwargs: Any) -> Any:
        _file_log_from_env()
        bound = signature.bind(schedule, *args, **kwargs)
        described = ", ".join(
            f"{name}={_describe(value)}"
            for name, value in bound.arguments.items()
            if name != "self"
        )
        before = len(schedule)

        start = time.perf_counter()
        try:
            result = fn(schedule, *args, **kwargs)
        except Exception as exc:
            logger.warning(
                "%s(%s) rejected: %s: %s",
                fn.__name__, described, type(exc).__name__, exc,
            )
            raise

        after = len(schedule)
        logger.info(
            "%s(%s): %d -> %d rows%s in %.3fs",
            fn.__name__, described, before, after,
            _row_change(before, after), time.perf_counter() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]
