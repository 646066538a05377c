"""Click command/group classes that take an ``examples=`` keyword.

A command declared with examples gets an eager ``--examples`` flag that
prints them and exits, so ``--help`` stays short.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


class _ExamplesMixin:
    examples: str | None

    def _install_examples(self, examples: str | None) -> None:
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if self.examples is None:
            return
        params: list[click.Parameter] = self.params  # type: ignore[attr-defined]
        params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._print_examples,
                help="Show usage examples and exit.",
            )
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(self.examples or "", "  "))
        ctx.exit(0)


class TimedateCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


class TimedateGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`TimedateCommand`."""

    command_class = TimedateCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)
