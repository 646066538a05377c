"""MCP tool definitions — 7 tools, one per TimeService operation.

Each tool has a ``*_impl`` function testable without the mcp package.
``register_tools()`` wraps them with FastMCP decorators.
"""

from __future__ import annotations

from typing import Any

from timedate.services.result import ServiceResult


def _to_mcp_response(result: ServiceResult) -> dict[str, Any]:
    """Convert a ServiceResult to an MCP-friendly dict."""
    response: dict[str, Any] = {
        "ok": result.ok,
        "op": result.op,
        "data": result.data,
    }
    if result.error is not None:
        response["error"] = {
            "code": result.error.code,
            "message": result.error.message,
        }
    return response


# ---------------------------------------------------------------------------
# Tool implementations (testable without mcp)
# ---------------------------------------------------------------------------


def get_current_time_impl(runtime: Any, *, timezone: str | None = None) -> dict[str, Any]:
    """Current time in a timezone (UTC when omitted)."""
    from timedate.services.time_query import TimeService

    return _to_mcp_response(TimeService(runtime).current_time(timezone))


def get_time_at_impl(
    runtime: Any,
    date_time: str,
    *,
    timezone: str | None = None,
) -> dict[str, Any]:
    """Time at a specific date in a timezone."""
    from timedate.services.time_query import TimeService

    return _to_mcp_response(TimeService(runtime).time_at(date_time, timezone))


def calculate_time_offset_impl(
    runtime: Any,
    base_time: str,
    offset_hours: int,
    *,
    timezone: str | None = None,
) -> dict[str, Any]:
    """Add or subtract hours from a base time."""
    from timedate.services.time_query import TimeService

    return _to_mcp_response(TimeService(runtime).offset(base_time, offset_hours, timezone))


def convert_timezone_impl(
    runtime: Any,
    time: str,
    from_timezone: str,
    to_timezone: str,
) -> dict[str, Any]:
    """Convert a time between two timezones."""
    from timedate.services.time_query import TimeService

    return _to_mcp_response(TimeService(runtime).convert(time, from_timezone, to_timezone))


def get_timezone_info_impl(runtime: Any) -> dict[str, Any]:
    """Information about the host's local timezone."""
    from timedate.services.time_query import TimeService

    return _to_mcp_response(TimeService(runtime).timezone_info())


def get_time_format_impl(runtime: Any) -> dict[str, Any]:
    """Detected 12h/24h preference and current time in both formats."""
    from timedate.services.time_query import TimeService

    return _to_mcp_response(TimeService(runtime).format_preference())


def list_timezones_impl(runtime: Any, *, filter: str | None = None) -> dict[str, Any]:  # noqa: A002
    """Known timezone identifiers, optionally filtered.

    ``data`` is ``{"filter", "count", "items"}``; the ``timedate://timezones/{filter}``
    resource returns only the bare ``items`` list.
    """
    from timedate.services.time_query import TimeService

    return _to_mcp_response(TimeService(runtime).list_timezones(filter))


# ---------------------------------------------------------------------------
# Registration: wrap the _impl functions with FastMCP decorators
# ---------------------------------------------------------------------------


def register_tools(server: Any, runtime: Any) -> None:
    """Register all 7 MCP tools on the FastMCP server."""

    @server.tool()  # type: ignore[untyped-decorator]
    def get_current_time(timezone: str | None = None) -> dict[str, Any]:
        """Get the current time in a timezone (IANA name; UTC when omitted)."""
        return get_current_time_impl(runtime, timezone=timezone)

    @server.tool()  # type: ignore[untyped-decorator]
    def get_time_at(date_time: str, timezone: str | None = None) -> dict[str, Any]:
        """Get the time at a date: 'now', RFC3339, 'YYYY-MM-DD HH:MM:SS', or 'YYYY-MM-DD'."""
        return get_time_at_impl(runtime, date_time, timezone=timezone)

    @server.tool()  # type: ignore[untyped-decorator]
    def calculate_time_offset(
        base_time: str,
        offset_hours: int,
        timezone: str | None = None,
    ) -> dict[str, Any]:
        """Add (or subtract, with negative hours) time from a base time or 'now'."""
        return calculate_time_offset_impl(runtime, base_time, offset_hours, timezone=timezone)

    @server.tool()  # type: ignore[untyped-decorator]
    def convert_timezone(time: str, from_timezone: str, to_timezone: str) -> dict[str, Any]:
        """Convert a time from one timezone to another."""
        return convert_timezone_impl(runtime, time, from_timezone, to_timezone)

    @server.tool()  # type: ignore[untyped-decorator]
    def get_timezone_info() -> dict[str, Any]:
        """Get information about the local timezone."""
        return get_timezone_info_impl(runtime)

    @server.tool()  # type: ignore[untyped-decorator]
    def get_time_format() -> dict[str, Any]:
        """Get the preferred time format and the current time in 12h and 24h form."""
        return get_time_format_impl(runtime)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_timezones(filter: str | None = None) -> dict[str, Any]:  # noqa: A002
        """List available timezones, optionally filtered by substring (max 50).

        Returns data with filter, count, and items (the matching names).
        """
        return list_timezones_impl(runtime, filter=filter)
