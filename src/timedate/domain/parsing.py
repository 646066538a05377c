"""Instant parsing — free-form text to a UTC-anchored instant.

Grammars are tried in a fixed order; each attempt returns an instant or
None, and the first success wins:

1. ``now`` (any case): the clock's current instant.
2. RFC3339 with an explicit ``Z`` or ``±HH:MM`` offset. A leap second
   (``:60``) is clamped to ``:59``.
3. ``YYYY-MM-DD HH:MM:SS``: civil time in the reference zone.
4. ``YYYY-MM-DD``: midnight civil time in the reference zone.

Grammars 3 and 4 take the zone's offset at the parsed civil time, not at
call time. Wall times inside a DST gap or overlap resolve with ``fold=0``
(the offset in force before the transition).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from datetime import UTC, date, datetime, time
from enum import StrEnum
from typing import TYPE_CHECKING

from timedate.domain.errors import InvalidTimeFormat, TimeOutOfRange
from timedate.domain.zones import FIXED_UTC, ZoneId

if TYPE_CHECKING:
    from timedate.infrastructure.clock import Clock

logger = logging.getLogger(__name__)

_RFC3339_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:)(\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)
_LEAP_SECOND = "60"
_CIVIL_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")
_CIVIL_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class Grammar(StrEnum):
    """Text grammars accepted by the parser, in precedence order."""

    NOW = "now"
    RFC3339 = "rfc3339"
    CIVIL_DATETIME = "civil_datetime"
    CIVIL_DATE = "civil_date"


ALL_GRAMMARS: tuple[Grammar, ...] = tuple(Grammar)

# Only time_at accepts a bare date; offset and convert stop at grammar 3.
TIME_AT_GRAMMARS: tuple[Grammar, ...] = ALL_GRAMMARS
OFFSET_GRAMMARS: tuple[Grammar, ...] = (Grammar.NOW, Grammar.RFC3339, Grammar.CIVIL_DATETIME)
CONVERT_GRAMMARS: tuple[Grammar, ...] = OFFSET_GRAMMARS

_Attempt = Callable[[str, ZoneId, "Clock"], datetime | None]


def _parse_now(text: str, zone: ZoneId, clock: Clock) -> datetime | None:
    if text.lower() != "now":
        return None
    return clock.now().astimezone(UTC)


def _to_utc(moment: datetime, text: str) -> datetime:
    try:
        return moment.astimezone(UTC)
    except OverflowError as exc:
        raise TimeOutOfRange(f"Time leaves the supported date range: {text}") from exc


def _parse_rfc3339(text: str, zone: ZoneId, clock: Clock) -> datetime | None:
    match = _RFC3339_RE.match(text)
    if not match:
        return None
    normalized = text
    if match.group(2) == _LEAP_SECOND:
        # A leap second is read as the last second of its minute.
        normalized = f"{match.group(1)}59{text[match.end(2):]}"
    try:
        parsed = datetime.fromisoformat(normalized.upper())
    except ValueError:
        return None
    return _to_utc(parsed, text)


def _parse_civil_datetime(text: str, zone: ZoneId, clock: Clock) -> datetime | None:
    if not _CIVIL_DATETIME_RE.match(text):
        return None
    try:
        civil = datetime.strptime(text, "%Y-%m-%d %H:%M:%S")
    except ValueError:
        return None
    return _to_utc(civil.replace(tzinfo=zone.tzinfo), text)


def _parse_civil_date(text: str, zone: ZoneId, clock: Clock) -> datetime | None:
    if not _CIVIL_DATE_RE.match(text):
        return None
    try:
        day = date.fromisoformat(text)
    except ValueError:
        return None
    return _to_utc(datetime.combine(day, time(), tzinfo=zone.tzinfo), text)


_ATTEMPTS: dict[Grammar, _Attempt] = {
    Grammar.NOW: _parse_now,
    Grammar.RFC3339: _parse_rfc3339,
    Grammar.CIVIL_DATETIME: _parse_civil_datetime,
    Grammar.CIVIL_DATE: _parse_civil_date,
}


class InstantParser:
    """Converts text into an absolute instant using an ordered grammar chain."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    def attempt(
        self, grammar: Grammar, text: str, reference_zone: ZoneId = FIXED_UTC
    ) -> datetime | None:
        """Try a single grammar. Returns None when it does not match.

        Raises:
            TimeOutOfRange: if the text matches but its UTC instant falls
                outside years 1-9999.
        """
        return _ATTEMPTS[grammar](text, reference_zone, self._clock)

    def parse(
        self,
        text: str,
        reference_zone: ZoneId = FIXED_UTC,
        *,
        grammars: Sequence[Grammar] = ALL_GRAMMARS,
    ) -> datetime:
        """Parse *text* with the first matching grammar in *grammars*.

        Order follows the Grammar enum regardless of the order of *grammars*.

        Raises:
            InvalidTimeFormat: if no enabled grammar matches.
            TimeOutOfRange: if the matching grammar yields an unrepresentable instant.
        """
        enabled = set(grammars)
        for grammar in Grammar:
            if grammar not in enabled:
                continue
            instant = self.attempt(grammar, text, reference_zone)
            if instant is not None:
                logger.debug("Parsed %r with grammar %s", text, grammar.value)
                return instant
        raise InvalidTimeFormat(text)
