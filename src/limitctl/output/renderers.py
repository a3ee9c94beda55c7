"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from limitctl.output.console import create_console, get_output, style_for_tier

if TYPE_CHECKING:
    from rich.console import Console

    from limitctl.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode: one deadline per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    deadlines = result.data.get("deadlines")
    if deadlines and isinstance(deadlines, list):
        return "\n".join(str(item.get("date", "")) for item in deadlines)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="limit.ok")
    op = Text(f"  {result.op}", style="limit.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="limit.key")
    style = "limit.date" if key.endswith("date") or key.endswith("deadline") else ""
    console.print(k, Text(str(value), style=style), sep="", end="")
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
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"

    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  WARNING ", style="limit.warning"), warning, sep="", end="")
        console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="limit.error")
    op = Text(f"  {result.op}", style="limit.op")
    console.print(label, op, Text(" — "), msg)
    if verbose and err and err.detail:
        for key, value in err.detail.items():
            _field(console, key, value)


# ── Operation renderers ───────────────────────────────────────────────


def _render_compute(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "initial_date", data.get("initial_date", ""))
    if verbose:
        _field(console, "normalized_date", data.get("normalized_date", ""))
        _field(console, "base_deadline", data.get("base_deadline", ""))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Infraction")
    table.add_column("Deadline", style="limit.date", no_wrap=True)
    for item in data.get("deadlines", []):
        tier_style = style_for_tier(str(item.get("tier", "")))
        table.add_row(Text(str(item.get("label", "")), style=tier_style), str(item.get("date", "")))
    console.print(table)

    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_windows(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "grace_period_days", data.get("grace_period_days", ""))
    extension = data.get("extension")
    if extension:
        _field(console, "extension", f"{extension['range']} (+{extension['years']}y)")

    windows = Table(title="Suspension windows", show_header=True, pad_edge=False, expand=False)
    windows.add_column("Name", no_wrap=True)
    windows.add_column("Range")
    windows.add_column("Effect")
    for w in data.get("fixed_windows", []):
        windows.add_row(w["name"], f"{w['start']}..{w['end']}", f"moves to {w['target']}")
    for w in data.get("recurring_windows", []):
        windows.add_row(w["name"], f"{w['range']} yearly", f"skips {w['skip_days']} days")
    console.print(windows)

    tiers = Table(title="Tiers", show_header=True, pad_edge=False, expand=False)
    tiers.add_column("Infraction")
    tiers.add_column("Days", justify="right")
    tiers.add_column("Correction")
    for t in data.get("tiers", []):
        corr = t.get("correction")
        corr_text = f"{corr['days']:+d} days if started {corr['range']}" if corr else ""
        tiers.add_row(
            Text(t["label"], style=style_for_tier(t["tier"])), str(t["days"]), corr_text
        )
    console.print(tiers)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "compute": _render_compute,
    "windows": _render_windows,
}
