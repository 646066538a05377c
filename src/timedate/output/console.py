"""Buffered Rich console with the timedate colour theme.

Renderers print into an in-memory console and hand back the text, so
``format_result`` stays a pure ``ServiceResult -> str`` function. Rich
strips styling by itself when stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO
from typing import cast

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

TIMEDATE_THEME = Theme(
    {
        "td.ok": "bold green",
        "td.error": "bold red",
        "td.op": "bold cyan",
        "td.key": "dim",
        "td.zone": "bold blue",
        "td.time": "bold",
        "td.offset": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int = DEFAULT_WIDTH) -> Console:
    return Console(
        file=StringIO(),
        theme=TIMEDATE_THEME,
        no_color=no_color,
        highlight=False,
        width=width,
    )


def get_output(console: Console) -> str:
    """Everything printed to a console made by :func:`create_console`."""
    return cast(StringIO, console.file).getvalue()
