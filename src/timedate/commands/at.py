"""Command: time at a given date in a timezone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timedate.commands._base import TimedateCommand

if TYPE_CHECKING:
    from timedate.commands._context import AppContext


@click.command(
    cls=TimedateCommand,
    examples="""\
  timedate at 2024-01-15T10:30:00+02:00
  timedate at "2024-01-15 10:30:00" --tz Asia/Tokyo
  timedate at 2024-07-01 --tz America/New_York""",
)
@click.argument("date_time")
@click.option("--tz", "timezone", default=None, help="Zone to read and render the time in.")
@click.pass_obj
def at(app: AppContext, date_time: str, timezone: str | None) -> None:
    """Show the time at DATE_TIME (now, RFC3339, 'YYYY-MM-DD HH:MM:SS', or YYYY-MM-DD)."""
    app.emit(app.service.time_at(date_time, timezone))
