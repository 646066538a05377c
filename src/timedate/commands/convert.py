"""Command: convert a time between timezones."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timedate.commands._base import TimedateCommand

if TYPE_CHECKING:
    from timedate.commands._context import AppContext


@click.command(
    cls=TimedateCommand,
    examples="""\
  timedate convert now UTC Asia/Kolkata
  timedate convert "2024-06-01 09:00:00" America/Los_Angeles Europe/Paris""",
)
@click.argument("time")
@click.argument("from_timezone")
@click.argument("to_timezone")
@click.pass_obj
def convert(app: AppContext, time: str, from_timezone: str, to_timezone: str) -> None:
    """Read TIME in FROM_TIMEZONE and show it in TO_TIMEZONE."""
    app.emit(app.service.convert(time, from_timezone, to_timezone))
