"""MCP resource definitions — 4 URI-based resources.

URIs: timedate://current-time/{timezone}, timedate://timezone-info,
timedate://timezones/{filter}, timedate://time-format.

In path parameters the literal ``local`` (timezone) and ``all`` (filter)
mean "not given". Each resource has an ``*_impl`` function testable
without the mcp package.
"""

from __future__ import annotations

import json
from typing import Any

from timedate.services.result import ServiceResult

LOCAL_TOKEN = "local"
ALL_TOKEN = "all"


def _payload(result: ServiceResult) -> dict[str, Any]:
    """Resource body on success.

    Raises ValueError with the service error message otherwise; FastMCP
    reports it to the client as a resource read failure.
    """
    if result.error is not None:
        raise ValueError(f"{result.error.code}: {result.error.message}")
    return dict(result.data)


# ---------------------------------------------------------------------------
# Resource implementations (testable without mcp)
# ---------------------------------------------------------------------------


def current_time_impl(runtime: Any, timezone: str) -> dict[str, Any]:
    """Current time for a path-supplied timezone (``local`` = default zone)."""
    from timedate.services.time_query import TimeService

    zone = None if timezone == LOCAL_TOKEN else timezone
    return _payload(TimeService(runtime).current_time(zone))


def timezone_info_impl(runtime: Any) -> dict[str, Any]:
    from timedate.services.time_query import TimeService

    return _payload(TimeService(runtime).timezone_info())


def timezone_list_impl(runtime: Any, filter: str) -> list[str]:  # noqa: A002
    """Timezone identifiers for a path-supplied filter (``all`` = unfiltered).

    A bare list, unlike the ``list_timezones`` tool's ``{filter, count, items}``.
    """
    from timedate.services.time_query import TimeService

    needle = None if filter == ALL_TOKEN else filter
    return list(_payload(TimeService(runtime).list_timezones(needle))["items"])


def time_format_impl(runtime: Any) -> dict[str, Any]:
    from timedate.services.time_query import TimeService

    return _payload(TimeService(runtime).format_preference())


# ---------------------------------------------------------------------------
# Registration: wrap the _impl functions with FastMCP decorators
# ---------------------------------------------------------------------------


def register_resources(server: Any, runtime: Any) -> None:
    """Register all 4 MCP resources on the FastMCP server."""

    @server.resource(  # type: ignore[untyped-decorator]
        "timedate://current-time/{timezone}",
        name="current_time",
        mime_type="application/json",
    )
    def current_time_resource(timezone: str) -> str:
        """Current time in the specified timezone."""
        return json.dumps(current_time_impl(runtime, timezone), indent=2)

    @server.resource(  # type: ignore[untyped-decorator]
        "timedate://timezone-info",
        name="timezone_info",
        mime_type="application/json",
    )
    def timezone_info_resource() -> str:
        """Information about the local timezone."""
        return json.dumps(timezone_info_impl(runtime), indent=2)

    @server.resource(  # type: ignore[untyped-decorator]
        "timedate://timezones/{filter}",
        name="timezone_list",
        mime_type="application/json",
    )
    def timezone_list_resource(filter: str) -> str:  # noqa: A002
        """List of available timezones, optionally filtered."""
        return json.dumps(timezone_list_impl(runtime, filter), indent=2)

    @server.resource(  # type: ignore[untyped-decorator]
        "timedate://time-format",
        name="time_format",
        mime_type="application/json",
    )
    def time_format_resource() -> str:
        """Time format preferences and current time in both formats."""
        return json.dumps(time_format_impl(runtime), indent=2)
