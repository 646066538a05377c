"""Payload models for data leaving the service layer.

The civil-time records live in :mod:`timedate.domain.records`; they are
re-exported here next to the listing payload so adapters have one import.
"""

from __future__ import annotations

from pydantic import BaseModel

from timedate.domain.records import TimeFormatInfo, TimeInfo, TimezoneInfo

__all__ = [
    "TimeFormatInfo",
    "TimeInfo",
    "TimezoneInfo",
    "ZoneListData",
]


class ZoneListData(BaseModel):
    """Payload for ``TimeService.list_timezones``."""

    model_config = {"frozen": True}

    filter: str | None = None
    count: int
    items: list[str]
