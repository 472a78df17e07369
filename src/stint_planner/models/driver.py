"""Driver roster entry."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Driver(BaseModel):
    """A driver on the plan's roster.

    ``total_stints`` and ``fair_share`` are carried for display and are
    never derived by the engine.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = ""
    stint_preference: int = 0
    color: str = ""
    utc_offset: int = 0
    irating: int = 0
    total_stints: int = 0
    fair_share: bool = False
