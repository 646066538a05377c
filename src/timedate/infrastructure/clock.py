"""Clock capability — the system clock and the ambient local zone.

Services never call ``datetime.now()`` directly; they read the clock
owned by the Runtime so tests can substitute a fixed instant.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfoNotFoundError

import tzlocal

from timedate.domain.zones import UTC_NAME

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Source of the current instant and the host's local zone."""

    def now(self) -> datetime:
        """Current instant as an aware UTC datetime."""
        ...

    def local_zone(self) -> tzinfo:
        """The host's configured local zone."""
        ...

    def local_zone_name(self) -> str:
        """Display label for the local zone (IANA key where known)."""
        ...


class SystemClock:
    """Clock backed by the OS clock and ``tzlocal`` zone detection.

    A host whose zone cannot be detected (no zone configured, ``TZ`` naming
    an unknown zone or an absolute path) is treated as UTC.
    """

    def now(self) -> datetime:
        return datetime.now(UTC)

    def local_zone(self) -> tzinfo:
        try:
            return tzlocal.get_localzone()
        except (ZoneInfoNotFoundError, ValueError) as exc:
            logger.debug("Local zone not detected (%s); using UTC", exc)
            return UTC

    def local_zone_name(self) -> str:
        try:
            name = tzlocal.get_localzone_name()
        except (ZoneInfoNotFoundError, ValueError) as exc:
            logger.debug("Local zone name not detected (%s); using UTC", exc)
            return UTC_NAME
        return name or UTC_NAME
