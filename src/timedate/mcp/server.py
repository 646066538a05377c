"""FastMCP server setup.

Optional extra, guarded behind try/except ImportError.
Transport: stdio default, SSE and streamable HTTP optional.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from timedate.config.settings import TimedateSettings

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["create_server", "mcp_available"]

SERVER_NAME = "timedate"
SERVER_INSTRUCTIONS = (
    "Time and date operations with timezone support. Timezones are IANA "
    "identifiers such as 'Europe/Berlin'; omit them for UTC."
)


def create_server(
    *,
    settings: TimedateSettings | None = None,
    host: str | None = None,
    port: int | None = None,
) -> Any:
    """Create and configure the MCP server.

    Builds a Runtime from *settings* (discovered from CWD when omitted) and
    registers all tools and resources. Returns the FastMCP instance.

    *host* and *port* override ``[mcp]`` settings for HTTP transports
    (sse, streamable-http). They are ignored when using stdio.

    Raises RuntimeError if the mcp extra is not installed.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install timedate[mcp]"
        raise RuntimeError(msg)

    from timedate.config.settings import TimedateSettings
    from timedate.infrastructure.runtime import Runtime
    from timedate.mcp.resources import register_resources
    from timedate.mcp.tools import register_tools

    if settings is None:
        settings = TimedateSettings.from_cli()
    runtime = Runtime(settings)

    server = _FastMCP(
        SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
        host=host or settings.mcp.host,
        port=port or settings.mcp.port,
    )

    register_tools(server, runtime)
    register_resources(server, runtime)

    return server
