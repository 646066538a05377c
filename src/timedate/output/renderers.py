"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from timedate.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from timedate.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_KEYS.get(result.op)
    if key is None:
        return f"OK: {result.op}"
    value = result.data.get(key)
    if isinstance(value, list):
        return "\n".join(str(v) for v in value)
    return str(value)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="td.ok")
    op = Text(f"  {result.op}", style="td.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="td.key")
    v = Text(str(value), style=style)
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    line = Text(f"{prefix}{duration:>8.3f}ms  ", style="dim")
    line.append(name)
    annotations = span_data.get("annotations")
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="td.error")
    op = Text(f"  {result.op}", style="td.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


# ── Time renderers ────────────────────────────────────────────────────


def _render_time_info(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render current_time / time_at / time_offset / convert_timezone results."""
    d = result.data
    _status_line(console, result)
    _field(console, "timestamp", d.get("timestamp", ""), style="td.time")
    _field(console, "timezone", d.get("timezone", ""), style="td.zone")
    _field(console, "utc_offset", d.get("utc_offset", ""), style="td.offset")
    _field(console, "12h", d.get("format_12h", ""))
    _field(console, "24h", d.get("format_24h", ""))
    if verbose:
        _field(console, "is_dst", d.get("is_dst", False))
        _render_meta(console, result)


def _render_timezone_info(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "name", d.get("name", ""), style="td.zone")
    _field(console, "current_time", d.get("current_time", ""), style="td.time")
    _field(console, "utc_offset", d.get("utc_offset", ""), style="td.offset")
    if verbose:
        _field(console, "is_dst", d.get("is_dst", False))
        _render_meta(console, result)


def _render_time_format(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "detected_format", d.get("detected_format", ""), style="td.time")
    _field(console, "12h", d.get("current_time_12h", ""))
    _field(console, "24h", d.get("current_time_24h", ""))
    if verbose:
        _render_meta(console, result)


def _render_zone_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_timezones as a numbered table."""
    d = result.data
    items: list[str] = d.get("items", [])
    _status_line(console, result)
    if d.get("filter") is not None:
        _field(console, "filter", d["filter"])
    _field(console, "count", d.get("count", len(items)))

    if items:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Timezone", style="td.zone", no_wrap=True)
        for index, name in enumerate(items, start=1):
            table.add_row(str(index), name)
        console.print(table)

    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line plus key-value fields."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch tables ───────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "current_time": _render_time_info,
    "time_at": _render_time_info,
    "time_offset": _render_time_info,
    "convert_timezone": _render_time_info,
    "timezone_info": _render_timezone_info,
    "time_format": _render_time_format,
    "list_timezones": _render_zone_list,
}

_QUIET_KEYS: dict[str, str] = {
    "current_time": "timestamp",
    "time_at": "timestamp",
    "time_offset": "timestamp",
    "convert_timezone": "timestamp",
    "timezone_info": "name",
    "time_format": "detected_format",
    "list_timezones": "items",
}
