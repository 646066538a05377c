"""Command: add or subtract hours from a base time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timedate.commands._base import TimedateCommand

if TYPE_CHECKING:
    from timedate.commands._context import AppContext


@click.command(
    cls=TimedateCommand,
    examples="""\
  timedate offset now --hours 3
  timedate offset 2024-03-10T01:30:00-05:00 --hours 1 --tz America/New_York
  timedate offset "2024-01-15 09:00:00" --hours -8 --tz Europe/London""",
)
@click.argument("base_time")
@click.option("-H", "--hours", "offset_hours", type=int, required=True, help="Signed hours.")
@click.option("--tz", "timezone", default=None, help="Zone to read and render the time in.")
@click.pass_obj
def offset(app: AppContext, base_time: str, offset_hours: int, timezone: str | None) -> None:
    """Shift BASE_TIME (now, RFC3339, or 'YYYY-MM-DD HH:MM:SS') by real hours."""
    app.emit(app.service.offset(base_time, offset_hours, timezone))
