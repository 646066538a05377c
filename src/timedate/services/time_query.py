"""TimeService — the time query facade.

Seven read-only operations composed from the domain engine:

- current_time: the clock's instant in a zone (default UTC)
- time_at: parse text (now, RFC3339, civil date-time, bare date) in a zone
- offset: parse text (no bare date), add signed hours, render in a zone
- convert: parse text relative to a source zone, render in a target zone
- timezone_info: describe the host's local zone
- format_preference: 12h/24h preference from locale signals
- list_timezones: filtered, truncated zone catalog

Every failure is terminal for that call: no retries, no fallback zone.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING

from timedate.domain.civil import CivilTimeFormatter, add_hours
from timedate.domain.errors import InvalidTimeFormat, TimeOutOfRange, UnknownTimezone
from timedate.domain.parsing import (
    CONVERT_GRAMMARS,
    OFFSET_GRAMMARS,
    TIME_AT_GRAMMARS,
    Grammar,
    InstantParser,
)
from timedate.domain.preference import FormatPreferenceDetector
from timedate.domain.zones import ZoneId
from timedate.services.base import BaseService
from timedate.services.contracts import ZoneListData
from timedate.services.result import ErrorCode, ServiceResult
from timedate.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from timedate.infrastructure.runtime import Runtime

logger = logging.getLogger(__name__)


class TimeService(BaseService):
    """Answers civil-time queries against the runtime's clock and registry."""

    def __init__(self, runtime: Runtime) -> None:
        super().__init__(runtime)
        self._parser = InstantParser(runtime.clock)
        self._formatter = CivilTimeFormatter()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def current_time(self, timezone: str | None = None) -> ServiceResult:
        """Current instant rendered in *timezone* (UTC when omitted)."""
        op = "current_time"
        try:
            zone = self._resolve(timezone)
        except UnknownTimezone as exc:
            return self._unknown_zone(op, exc, code=ErrorCode.UNKNOWN_TIMEZONE)
        return self._render(op, self._clock.now(), zone)

    @traced
    def time_at(self, date_time: str, timezone: str | None = None) -> ServiceResult:
        """Parse *date_time* relative to *timezone* and render it there.

        Accepts ``now``, RFC3339, ``YYYY-MM-DD HH:MM:SS``, and ``YYYY-MM-DD``.
        """
        op = "time_at"
        try:
            zone = self._resolve(timezone)
        except UnknownTimezone as exc:
            return self._unknown_zone(op, exc, code=ErrorCode.UNKNOWN_TIMEZONE)
        try:
            instant = self._parse(date_time, zone, TIME_AT_GRAMMARS)
            return self._render(op, instant, zone)
        except InvalidTimeFormat as exc:
            return self._invalid_format(op, exc)
        except TimeOutOfRange as exc:
            return self._out_of_range(op, exc, date_time=date_time)

    @traced
    def offset(
        self, base_time: str, offset_hours: int, timezone: str | None = None
    ) -> ServiceResult:
        """Add *offset_hours* real hours to *base_time* and render in *timezone*.

        Bare dates are not accepted here; see ``time_at``.
        """
        op = "time_offset"
        try:
            zone = self._resolve(timezone)
        except UnknownTimezone as exc:
            return self._unknown_zone(op, exc, code=ErrorCode.UNKNOWN_TIMEZONE)
        try:
            base = self._parse(base_time, zone, OFFSET_GRAMMARS)
            with trace_span("add_hours") as span:
                shifted = add_hours(base, offset_hours)
                if span:
                    span.annotate("hours", offset_hours)
            return self._render(op, shifted, zone)
        except InvalidTimeFormat as exc:
            return self._invalid_format(op, exc)
        except TimeOutOfRange as exc:
            return self._out_of_range(op, exc, base_time=base_time, offset_hours=offset_hours)

    @traced
    def convert(self, time: str, from_timezone: str, to_timezone: str) -> ServiceResult:
        """Parse *time* relative to *from_timezone* and render it in *to_timezone*."""
        op = "convert_timezone"
        try:
            source = self._resolve(from_timezone)
        except UnknownTimezone as exc:
            return self._unknown_zone(
                op, exc, code=ErrorCode.INVALID_SOURCE_TIMEZONE, label="Invalid source timezone"
            )
        try:
            target = self._resolve(to_timezone)
        except UnknownTimezone as exc:
            return self._unknown_zone(
                op, exc, code=ErrorCode.INVALID_TARGET_TIMEZONE, label="Invalid target timezone"
            )
        try:
            instant = self._parse(time, source, CONVERT_GRAMMARS)
            return self._render(op, instant, target)
        except InvalidTimeFormat as exc:
            return self._invalid_format(op, exc, label="Invalid time format")
        except TimeOutOfRange as exc:
            return self._out_of_range(op, exc, time=time)

    @traced
    def timezone_info(self) -> ServiceResult:
        """Describe the host's local zone without the caller naming it."""
        info = self._formatter.describe_local(
            self._clock.now(), self._clock.local_zone(), self._clock.local_zone_name()
        )
        return ServiceResult.success("timezone_info", info)

    @traced
    def format_preference(self) -> ServiceResult:
        """Detect the ambient 12h/24h preference and show the time both ways."""
        detector = FormatPreferenceDetector(self._runtime.environment)
        info = detector.detect(self._clock.now(), self._clock.local_zone())
        return ServiceResult.success("time_format", info)

    @traced
    def list_timezones(self, filter: str | None = None) -> ServiceResult:  # noqa: A002
        """List catalog entries containing *filter* (case-insensitive).

        Truncated to ``[zones] list_limit`` entries (50 by default).
        """
        limit = self._runtime.settings.zones.list_limit
        items = self._registry.enumerate(filter, limit=limit)
        listing = ZoneListData(filter=filter, count=len(items), items=items)
        return ServiceResult.success("list_timezones", listing)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve(self, identifier: str | None) -> ZoneId:
        with trace_span("resolve_zone") as span:
            zone = self._registry.resolve(identifier)
            if span:
                span.annotate("zone", zone.name)
            return zone

    def _parse(self, text: str, zone: ZoneId, grammars: Sequence[Grammar]) -> datetime:
        with trace_span("parse_instant") as span:
            if span:
                span.annotate("grammars", [g.value for g in grammars])
            return self._parser.parse(text, zone, grammars=grammars)

    def _render(self, op: str, instant: datetime, zone: ZoneId) -> ServiceResult:
        with trace_span("format"):
            info = self._formatter.format(instant, zone)
        return ServiceResult.success(op, info)

    def _unknown_zone(
        self,
        op: str,
        exc: UnknownTimezone,
        *,
        code: ErrorCode,
        label: str = "Invalid timezone",
    ) -> ServiceResult:
        return ServiceResult.failure(
            op, code, f"{label}: {exc.identifier}", timezone=exc.identifier
        )

    def _invalid_format(
        self,
        op: str,
        exc: InvalidTimeFormat,
        *,
        label: str = "Invalid date format",
    ) -> ServiceResult:
        logger.debug("No grammar matched %r for %s", exc.text, op)
        return ServiceResult.failure(
            op, ErrorCode.INVALID_TIME_FORMAT, f"{label}: {exc.text}", text=exc.text
        )

    def _out_of_range(self, op: str, exc: TimeOutOfRange, **detail: object) -> ServiceResult:
        logger.debug("%s: %s", op, exc)
        return ServiceResult.failure(op, ErrorCode.TIME_OUT_OF_RANGE, str(exc), **detail)
