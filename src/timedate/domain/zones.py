"""Zone registry over the IANA time zone database.

Two ZoneId variants:
- FixedUtc: the distinguished zero-offset zone. Resolving ``"UTC"`` or an
  omitted identifier never touches the database.
- DatabaseZone: a ``zoneinfo.ZoneInfo`` keyed by its canonical IANA name.

INVARIANT: a DatabaseZone is only ever constructed by ``ZoneRegistry.resolve``,
so every DatabaseZone names an entry in the catalog.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from datetime import UTC, tzinfo
from itertools import islice
from zoneinfo import ZoneInfo, available_timezones

from timedate.domain.errors import UnknownTimezone

logger = logging.getLogger(__name__)

UTC_NAME = "UTC"
DEFAULT_LIST_LIMIT = 50


@dataclass(frozen=True)
class FixedUtc:
    """The fixed zero-offset zone."""

    name: str = UTC_NAME

    @property
    def tzinfo(self) -> tzinfo:
        return UTC


@dataclass(frozen=True)
class DatabaseZone:
    """A zone backed by the IANA database, with its transition rules."""

    name: str
    zone: ZoneInfo = field(repr=False, compare=False)

    @property
    def tzinfo(self) -> tzinfo:
        return self.zone


ZoneId = FixedUtc | DatabaseZone

FIXED_UTC = FixedUtc()


@functools.cache
def zone_catalog() -> tuple[str, ...]:
    """All known zone identifiers in canonical (sorted) order.

    Built once per process; the tuple is shared read-only by every caller.
    """
    catalog = tuple(sorted(available_timezones()))
    logger.debug("Loaded zone catalog with %d entries", len(catalog))
    return catalog


@functools.cache
def _catalog_names() -> frozenset[str]:
    return frozenset(zone_catalog())


class ZoneRegistry:
    """Resolves identifiers to ZoneId values and enumerates the catalog."""

    def resolve(self, identifier: str | None) -> ZoneId:
        """Resolve *identifier* (exact, case-sensitive) to a ZoneId.

        ``None`` and ``"UTC"`` return the fixed UTC zone.

        Raises:
            UnknownTimezone: if the identifier is not in the catalog.
        """
        if identifier is None or identifier == UTC_NAME:
            return FIXED_UTC
        if identifier not in _catalog_names():
            logger.debug("Unknown timezone identifier: %r", identifier)
            raise UnknownTimezone(identifier)
        return DatabaseZone(name=identifier, zone=ZoneInfo(identifier))

    def enumerate(
        self,
        filter: str | None = None,  # noqa: A002
        *,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> list[str]:
        """Return up to *limit* catalog entries, optionally filtered.

        The filter is a case-insensitive substring match. Order is catalog
        order, truncated after filtering.
        """
        if filter is None:
            return list(zone_catalog()[:limit])
        needle = filter.lower()
        return list(islice((name for name in zone_catalog() if needle in name.lower()), limit))
