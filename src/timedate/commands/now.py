"""Command: current time in a timezone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timedate.commands._base import TimedateCommand

if TYPE_CHECKING:
    from timedate.commands._context import AppContext


@click.command(
    cls=TimedateCommand,
    examples="""\
  timedate now
  timedate now --tz Europe/Berlin
  timedate --json now --tz America/New_York""",
)
@click.option("--tz", "timezone", default=None, help="IANA timezone (default: UTC).")
@click.pass_obj
def now(app: AppContext, timezone: str | None) -> None:
    """Show the current time in a timezone."""
    app.emit(app.service.current_time(timezone))
