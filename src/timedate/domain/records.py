"""Output records produced by the time engine.

All records are frozen value types, built fresh per query.
"""

from __future__ import annotations

from pydantic import BaseModel


class TimeInfo(BaseModel):
    """An instant rendered through a zone."""

    model_config = {"frozen": True}

    timestamp: str
    timezone: str
    utc_offset: str
    is_dst: bool
    format_12h: str
    format_24h: str


class TimezoneInfo(BaseModel):
    """The host's ambient local zone at the current instant."""

    model_config = {"frozen": True}

    name: str
    current_time: str
    utc_offset: str
    is_dst: bool


class TimeFormatInfo(BaseModel):
    """Detected 12h/24h display preference plus the current time both ways."""

    model_config = {"frozen": True}

    detected_format: str
    is_12_hour: bool
    current_time_12h: str
    current_time_24h: str
