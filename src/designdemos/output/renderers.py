"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from designdemos.output.console import create_console, get_output, style_for_result

if TYPE_CHECKING:
    from rich.console import Console

    from designdemos.services.result import ServiceResult


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

    d = result.data
    if result.op == "purr_runtime":
        return "\n".join(case["result"] for case in d.get("cases", []))
    if result.op == "purr_compile_time":
        return str(d.get("result", ""))
    if result.op == "gauge_render":
        return "\n".join(r["mood_face"] for r in d.get("readings", []))
    items = d.get("items")
    if items and isinstance(items, list):
        names = [name for name in map(_extract_name, items) if name]
        if names:
            return "\n".join(names)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_name(item: Any) -> str:
    """Pick the identifying value of a row (style name, glyph, pair)."""
    if isinstance(item, dict):
        for key in ("name", "glyph", "mood_face"):
            val = item.get(key)
            if val is not None:
                return str(val)
        if "cat" in item and "owner" in item:
            return f"{item['cat']} {item['owner']}"
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="demo.ok")
    op = Text(f"  {result.op}", style="demo.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="demo.key")
    console.print(k, Text(str(value)), end="")
    console.print()


def _caption(console: Console, text: str) -> None:
    console.print(Text(text, style="demo.caption"))
    console.print()


def _result_text(result: str) -> Text:
    return Text(result, style=style_for_result(result))


def _swatch(hex_color: str) -> Text:
    """Hex code preceded by a block in that color."""
    return Text.assemble(("■ ", hex_color), hex_color)


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
    """Render a hierarchical span tree."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"

    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _table(*columns: str) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for col in columns:
        table.add_column(col)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="demo.error")
    op = Text(f"  {result.op}", style="demo.op")
    console.print(label, op, Text(" — "), msg)

    if err and err.code:
        console.print(Text(f"  code: {err.code}", style="dim"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Dispatch renderers ────────────────────────────────────────────────


def _render_purr_runtime(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Four pairings; every non-purr outcome is highlighted."""
    d = result.data
    _caption(console, d.get("caption", ""))
    table = _table("Cat", "Owner", "Result", "Says")
    for case in d.get("cases", []):
        outcome = case["result"]
        line_style = "" if case["purred"] else "demo.error"
        table.add_row(
            case["cat"],
            case["owner"],
            _result_text(outcome),
            Text(case["line"], style=line_style),
        )
    console.print(table)
    console.print(f"\n{d.get('failures', 0)} of {d.get('count', 0)} pairings did not purr")
    if verbose:
        _render_meta(console, result)


def _render_purr_compile_time(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    _caption(console, d.get("caption", ""))
    _status_line(console, result)
    _field(console, "cat", d.get("cat"))
    _field(console, "owner", d.get("owner"))
    console.print(Text("  result: ", style="demo.key"), _result_text(d.get("result", "")))
    console.print()
    console.print(d.get("line", ""))
    if verbose:
        _render_meta(console, result)


def _render_pairs(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    table = _table("Cat", "Owner")
    for item in d.get("items", []):
        table.add_row(item["cat"], item["owner"])
    console.print(table)
    console.print(f"\n{d.get('count', 0)} constructible pairing(s)")

    rejected = d.get("rejected", [])
    if rejected:
        console.print()
        console.print(Text("Rejected:", style="dim"))
        for item in rejected:
            console.print(f"  {item['cat']} + {item['owner']}: {item['reason']}")
    if verbose:
        _render_meta(console, result)


# ── Gauge renderers ───────────────────────────────────────────────────


def _readings_table(readings: list[dict[str, Any]]) -> Table:
    table = _table("#", "Value", "Normalized", "Needle", "Mood color", "Face")
    for r in readings:
        table.add_row(
            str(r["index"]),
            f"{r['value']:g}",
            f"{r['normalized']:.3f}",
            f"{r['needle_angle']:.1f}°",
            _swatch(r["mood_color"]),
            r["mood_face"],
        )
    return table


def _render_gauge(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Readings panel plus the layer stack, bottom layer first."""
    d = result.data
    rng = d.get("range", {})
    header = (
        f"style: {d.get('style')}   size: {d.get('size'):g}   "
        f"range: [{rng.get('lower'):g}, {rng.get('upper'):g}]"
    )
    console.print(Panel(_readings_table(d.get("readings", [])), title=header, expand=False))

    layers = _table("Layer", "Commands")
    for entry in d.get("layer_counts", []):
        summary = ", ".join(f"{kind}×{n}" for kind, n in sorted(entry["counts"].items()))
        layers.add_row(Text(entry["name"], style="demo.layer"), summary)
    console.print(layers)

    counts = d.get("command_counts", {})
    total = sum(counts.values())
    console.print(f"\n{len(d.get('layers', []))} layers, {total} draw commands")
    if verbose:
        console.print(f"  ticks: {', '.join(f'{t:g}' for t in d.get('tick_values', []))}")
        _render_meta(console, result)


def _render_sweep(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    table = _table("Step", "Requested", "Emitted", "Value", "Needle", "Mood color", "Face")
    for item in d.get("items", []):
        table.add_row(
            str(item["step"]),
            f"{item['requested']:g}",
            "yes" if item["emitted"] else Text("no", style="dim"),
            f"{item['value']:g}",
            f"{item['needle_angle']:.1f}°",
            _swatch(item["mood_color"]),
            item["mood_face"],
        )
    console.print(table)
    console.print(
        f"\n{d.get('emitted', 0)} changes emitted over {d.get('steps', 0)} inputs; "
        f"{d.get('renders', 0)} {d.get('style')} renders"
    )
    if verbose:
        _render_meta(console, result)


def _render_styles(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = _table("Style", "Source", "Composed")
    for item in result.data.get("items", []):
        table.add_row(
            item["name"],
            "built-in" if item["builtin"] else (item.get("plugin") or "plugin"),
            "yes" if item["composed"] else "monolithic",
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_emotions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = _table("#", "Emotion", "Face", "From reading", "Mood color")
    for item in result.data.get("items", []):
        table.add_row(
            str(item["index"]),
            item["name"],
            item["glyph"],
            f"{item['reading']:.1f}",
            _swatch(item["color"]),
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":"), ensure_ascii=False))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "purr_runtime": _render_purr_runtime,
    "purr_compile_time": _render_purr_compile_time,
    "purr_pairs": _render_pairs,
    "gauge_render": _render_gauge,
    "gauge_sweep": _render_sweep,
    "gauge_styles": _render_styles,
    "emotion_scale": _render_emotions,
}
