"""Event timing configuration."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, field_validator


class EventConfig(BaseModel):
    """Race start, race length and the in-game clock at the green flag."""

    model_config = ConfigDict(frozen=True)

    race_start_utc: datetime
    race_duration: timedelta
    race_start_tod: datetime

    @field_validator("race_start_utc")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @field_validator("race_start_tod")
    @classmethod
    def _as_naive(cls, value: datetime) -> datetime:
        return value.replace(tzinfo=None)

    @field_validator("race_duration")
    @classmethod
    def _non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("race_duration must not be negative")
        return value

    @classmethod
    def from_session_start(
        cls,
        session_start_utc: datetime,
        green_flag_offset: timedelta,
        race_duration: timedelta,
        race_start_tod: datetime,
    ) -> EventConfig:
        """Build a config from the session start and the green flag offset."""
        return cls(
            race_start_utc=session_start_utc + green_flag_offset,
            race_duration=race_duration,
            race_start_tod=race_start_tod,
        )

    @property
    def race_end_utc(self) -> datetime:
        return self.race_start_utc + self.race_duration

    @property
    def tod_offset(self) -> timedelta:
        """Constant shift from the UTC clock to the in-game clock."""
        return self.race_start_tod - self.race_start_utc.replace(tzinfo=None)

    @property
    def is_degenerate(self) -> bool:
        """True when the race has no length and no schedule can be built."""
        return self.race_end_utc == self.race_start_utc

    def to_tod(self, instant: datetime) -> datetime:
        """Translate a UTC instant to the in-game clock."""
        return instant.astimezone(timezone.utc).replace(tzinfo=None) + self.tod_offset
