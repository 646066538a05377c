"""Civil-time arithmetic and rendering.

Arithmetic happens on the absolute UTC instant; zone projection (and so
DST) is applied only when rendering. Adding one hour always means 3600
real seconds, even across a transition.

KNOWN GAP: ``is_dst`` is always reported as False. Callers must not rely
on it.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo

from timedate.domain.errors import TimeOutOfRange
from timedate.domain.records import TimeInfo, TimezoneInfo
from timedate.domain.zones import FixedUtc, ZoneId


def add_hours(instant: datetime, hours: int) -> datetime:
    """Add a signed number of hours to an absolute instant.

    Raises:
        TimeOutOfRange: if the result falls outside years 1-9999.
    """
    try:
        return instant.astimezone(UTC) + timedelta(hours=hours)
    except OverflowError as exc:
        raise TimeOutOfRange(
            f"Offset of {hours} hours leaves the supported date range", hours=hours
        ) from exc


def offset_string(moment: datetime) -> str:
    """Signed ``±HHMM`` offset of an aware datetime (seconds dropped)."""
    offset = moment.utcoffset() or timedelta(0)
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, remainder = divmod(abs(total), 3600)
    return f"{sign}{hours:02d}{remainder // 60:02d}"


def clock_12h(moment: datetime) -> str:
    """``hh:mm:ss AM/PM``; the meridiem is fixed English, not locale-driven."""
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment:%I:%M:%S} {meridiem}"


def clock_24h(moment: datetime) -> str:
    return f"{moment:%H:%M:%S}"


class CivilTimeFormatter:
    """Projects instants through zones into the canonical output fields."""

    def project(self, instant: datetime, zone: ZoneId) -> datetime:
        """Civil time of *instant* in *zone*, with the offset in force at that instant.

        Raises:
            TimeOutOfRange: if the civil time falls outside years 1-9999
                (e.g. 9999-12-31T23:00Z seen from UTC+9).
        """
        try:
            return instant.astimezone(zone.tzinfo)
        except OverflowError as exc:
            raise TimeOutOfRange(
                f"Time {instant.isoformat()} cannot be shown in {zone.name}"
            ) from exc

    def format(self, instant: datetime, zone: ZoneId) -> TimeInfo:
        """Render *instant* in *zone*. Raises TimeOutOfRange like :meth:`project`."""
        civil = self.project(instant, zone)
        if isinstance(zone, FixedUtc):
            label = zone.name
        else:
            label = civil.tzname() or zone.name
        return TimeInfo(
            timestamp=civil.isoformat(),
            timezone=label,
            utc_offset=offset_string(civil),
            is_dst=False,
            format_12h=clock_12h(civil),
            format_24h=clock_24h(civil),
        )

    def describe_local(self, instant: datetime, local_zone: tzinfo, name: str) -> TimezoneInfo:
        """Describe the host's local zone as observed at *instant*."""
        civil = instant.astimezone(local_zone)
        abbreviation = civil.tzname() or ""
        return TimezoneInfo(
            name=name,
            current_time=f"{civil:%Y-%m-%d %H:%M:%S} {abbreviation}".rstrip(),
            utc_offset=offset_string(civil),
            is_dst=False,
        )
