"""Start the MCP server (requires timedate[mcp] extra)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timedate.commands._base import TimedateCommand

if TYPE_CHECKING:
    from timedate.commands._context import AppContext


@click.command(
    cls=TimedateCommand,
    examples="""\
  # Start the MCP server (stdio transport, default)
  timedate serve

  # Streamable HTTP on custom host/port
  timedate serve --transport streamable-http --host 0.0.0.0 --port 9000

  # SSE transport on default address
  timedate serve --transport sse""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol (default: [mcp] transport, else stdio).",
)
@click.option("--host", default=None, help="Bind address (HTTP transports only).")
@click.option("--port", default=None, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: AppContext, transport: str | None, host: str | None, port: int | None) -> None:
    """Start the MCP server (requires timedate[mcp] extra)."""
    from timedate.mcp import server as mcp_server

    if not mcp_server.mcp_available:
        click.echo("MCP not installed. Install with: pip install timedate[mcp]", err=True)
        raise SystemExit(1)

    server = mcp_server.create_server(settings=app.settings, host=host, port=port)
    server.run(transport=transport or app.settings.mcp.transport)
