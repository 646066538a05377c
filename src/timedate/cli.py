"""``timedate`` root command: global output flags, then one subcommand per query."""

from __future__ import annotations

import click

from timedate import __version__
from timedate.commands import register_commands
from timedate.commands._base import TimedateGroup
from timedate.commands._context import AppContext
from timedate.config.settings import TimedateSettings


@click.group(
    cls=TimedateGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    examples="""\
  timedate now --tz Asia/Tokyo
  timedate --json convert "2024-01-15 10:30:00" America/New_York Europe/London
  timedate -q zones list pacific
  timedate -c ./timedate.toml serve --transport sse""",
)
@click.version_option(__version__, prog_name="timedate")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the headline value.")
@click.option("-v", "--verbose", is_flag=True, help="Show DST flag, error codes, and timings.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    metavar="PATH",
    help="Use this timedate.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Civil time queries: current time, parsing, offsets, and zone conversion.

    Timezones are IANA names such as Europe/Berlin; omitted zones mean UTC.
    """
    ctx.obj = AppContext(TimedateSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
