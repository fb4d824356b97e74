"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from baconctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from baconctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "path":
        sep = data.get("separation")
        return "infinity" if sep is None else str(sep)
    if result.op in ("center", "recenter"):
        return str(data.get("center", ""))

    items = data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="bacon.ok")
    op = Text(f"  {result.op}", style="bacon.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="bacon.key")
    v = Text(str(value), style="bacon.actor" if key in ("name", "center") else "")
    console.print(k, v, end="")
    console.print()


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
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {name}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _name_table(
    items: list[dict[str, Any]],
    columns: list[tuple[str, str]],
) -> Table:
    """Build a table whose first column is the actor name.

    *columns* maps item keys to header labels for the remaining columns.
    """
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for key, header in columns:
        if key == "name":
            table.add_column(header, style="bacon.actor")
        else:
            table.add_column(header, style="bacon.score", justify="right")
    for item in items:
        table.add_row(*(Text(str(item.get(key, ""))) for key, _ in columns))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bacon.error")
    op = Text(f"  {result.op}", style="bacon.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Center renderers ──────────────────────────────────────────────────


def _styled(value: Any, style: str = "bacon.actor") -> str:
    """Wrap a data value in a theme style, escaping Rich markup."""
    return f"[{style}]{escape(str(value))}[/{style}]"


def _render_center(result: ServiceResult, console: Console) -> None:
    """Render the center-of-the-universe headline."""
    d = result.data
    avg = d.get("average_separation")
    avg_text = "undefined (no connections)" if avg is None else str(avg)
    center = _styled(d.get("center", "?"), "bacon.center")
    console.print(
        f"{center} is now the center of the acting universe, connected to "
        f"{d.get('reachable', 0)}/{d.get('population', 0)} actors "
        f"with average separation {avg_text}"
    )


def _render_path(result: ServiceResult, console: Console) -> None:
    """Render a Bacon number and the co-star chain behind it."""
    d = result.data
    name = _styled(d.get("name", "?"))
    sep = d.get("separation")
    if sep is None:
        console.print(f"The Bacon Number for {name} is infinity (no connection found).")
        return

    console.print(f"{name}'s number is {sep}")
    for step in d.get("steps", []):
        movies = _styled("[" + ", ".join(step.get("movies", [])) + "]", "bacon.movie")
        actor = _styled(step.get("name"))
        co_star = _styled(step.get("co_star"))
        console.print(f"{actor} appeared in {movies} with {co_star}")


# ── Ranking / filter renderers ────────────────────────────────────────


def _render_rank(result: ServiceResult, console: Console) -> None:
    d = result.data
    items = d.get("items", [])
    if d.get("direction") == "worst":
        console.print(
            f"Here are the bottom {len(items)} actors with the worst Bacon numbers/"
            "highest average separation:"
        )
    else:
        console.print(
            f"Here are the top {len(items)} actors with the best Bacon numbers/"
            "lowest average separation:"
        )
    table = _name_table(
        items,
        [("rank", "#"), ("name", "Actor"), ("average_separation", "Average Separation")],
    )
    console.print(table)


def _render_degree(result: ServiceResult, console: Console) -> None:
    d = result.data
    items = d.get("items", [])
    console.print(f"Actors with {d.get('low')}-{d.get('high')} direct connections:")
    console.print(_name_table(items, [("name", "Actor"), ("degree", "Connections")]))
    console.print(f"\n{d.get('count', len(items))} actors")


def _render_separation(result: ServiceResult, console: Console) -> None:
    d = result.data
    items = d.get("items", [])
    center = _styled(d.get("center"), "bacon.center")
    console.print(f"Actors {d.get('low')}-{d.get('high')} steps from {center}:")
    console.print(_name_table(items, [("name", "Actor"), ("separation", "Separation")]))
    console.print(f"\n{d.get('count', len(items))} actors")


def _render_unreachable(result: ServiceResult, console: Console) -> None:
    d = result.data
    items = d.get("items", [])
    center = _styled(d.get("center"), "bacon.center")
    console.print(f"Here are all actors with no connection/infinite separation from {center}:")
    for item in items:
        console.print(f"  {_styled(item.get('name'))}")
    console.print(f"\n{d.get('count', len(items))} actors")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "center": _render_center,
    "recenter": _render_center,
    "path": _render_path,
    "rank": _render_rank,
    "degree": _render_degree,
    "separation": _render_separation,
    "unreachable": _render_unreachable,
}
