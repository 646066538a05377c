"""Subcommand modules for timedate.

Provides register_commands() which uses deferred imports to keep
``timedate --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    1 group (has subcommands) + 6 standalone commands.
    """
    # --- Groups ---
    from timedate.commands.zones import zones

    cli.add_command(zones)

    # --- Standalone commands ---
    from timedate.commands.at import at
    from timedate.commands.convert import convert
    from timedate.commands.format_cmd import format_cmd
    from timedate.commands.now import now
    from timedate.commands.offset import offset
    from timedate.commands.serve import serve

    cli.add_command(now)
    cli.add_command(at)
    cli.add_command(offset)
    cli.add_command(convert)
    cli.add_command(format_cmd)
    cli.add_command(serve)
