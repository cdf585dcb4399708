"""Operation-specific Rich renderers for ServiceResult.

Renderers write to a StringIO-backed Console; :func:`render_result`
dispatches on ``result.op`` and falls back to a key-value listing.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from awlctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from awlctl.services.result import ServiceResult

_RECT_KEYS = ("x", "y", "width", "height")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
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
    if result.op == "get_work_area":
        return " ".join(str(result.data.get(k, 0)) for k in _RECT_KEYS)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="awl.ok"), Text(f"  {result.op}", style="awl.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="awl.key")
    if value is None:
        v = Text("unchanged", style="awl.unset")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value), style="awl.value")
    console.print(k, v)


def _rect_table(title: str, rect: dict[str, Any]) -> Table:
    table = Table(title=title, title_justify="left", show_edge=False, pad_edge=False)
    for key in _RECT_KEYS:
        table.add_column(key, justify="right")
    table.add_row(
        *(
            Text("—", style="awl.unset") if rect.get(k) is None else str(rect[k])
            for k in _RECT_KEYS
        )
    )
    return table


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span (verbose only)."""
    if not result.meta:
        return
    span = result.meta.get("telemetry")
    if not span:
        return
    console.print()
    line = f"  [dim]{span.get('duration_ms', 0.0):>8.2f}ms[/dim]  {span.get('name', '?')}"
    console.print(line)
    for key, value in span.get("annotations", {}).items():
        console.print(Text(f"    {key}: {value}"))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="awl.error"),
        Text(f"  {result.op}", style="awl.op"),
        Text(" — "),
        Text(f"{msg}{code}"),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_work_area(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    monitor = result.data.get("monitor")
    title = "Work area" if monitor is None else f"Work area (monitor {monitor})"
    console.print(_rect_table(title, result.data))
    if verbose:
        _render_meta(console, result)


def _render_plan(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    console.print(_rect_table("Target (x/y relative to work area)", result.data.get("plan", {})))
    if verbose:
        console.print(_rect_table("Work area", result.data.get("work_area", {})))
        _render_meta(console, result)


def _render_monitor(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "monitor", result.data.get("monitor"))
    _field(console, "monitor_count", result.data.get("monitor_count"))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "get_work_area": _render_work_area,
    "resize_in_work_area": _render_plan,
    "move_in_work_area": _render_plan,
    "move_resize_in_work_area": _render_plan,
    "move_resize_semantic": _render_plan,
    "move_to_monitor": _render_monitor,
}
