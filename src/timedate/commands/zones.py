"""Command group: timezone catalog and local zone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timedate.commands._base import TimedateGroup

if TYPE_CHECKING:
    from timedate.commands._context import AppContext


@click.group(
    cls=TimedateGroup,
    examples="""\
  timedate zones list
  timedate zones list america
  timedate -q zones list europe
  timedate zones local""",
)
def zones() -> None:
    """Inspect known timezones and the local zone."""


@zones.command(
    "list",
    examples="""\
  timedate zones list
  timedate zones list pacific""",
)
@click.argument("filter", required=False, default=None)
@click.pass_obj
def list_cmd(app: AppContext, filter: str | None) -> None:  # noqa: A002
    """List timezones whose name contains FILTER (case-insensitive, max 50)."""
    app.emit(app.service.list_timezones(filter))


@zones.command("local", examples="  timedate zones local")
@click.pass_obj
def local(app: AppContext) -> None:
    """Show the local timezone, its current time, and UTC offset."""
    app.emit(app.service.timezone_info())
