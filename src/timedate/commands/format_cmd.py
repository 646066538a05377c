"""Command: detected 12h/24h time format preference."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timedate.commands._base import TimedateCommand

if TYPE_CHECKING:
    from timedate.commands._context import AppContext


@click.command(
    "format",
    cls=TimedateCommand,
    examples="""\
  timedate format
  LC_TIME=en_US.UTF-8 timedate --json format""",
)
@click.pass_obj
def format_cmd(app: AppContext) -> None:
    """Show the preferred time format (from LC_TIME / LANG) and the time both ways."""
    app.emit(app.service.format_preference())
