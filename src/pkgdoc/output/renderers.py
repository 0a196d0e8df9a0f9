"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO. Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pkgdoc.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from pkgdoc.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
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
    """Render minimal output for ``--quiet``: ids for lists, status otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict) and "id" in item)
    if result.op == "show":
        return str(result.data.get("readme", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="pkg.ok"), Text(f"  {result.op}", style="pkg.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pkg.key")
    if key in ("id", "parent"):
        v = Text(str(value), style="pkg.id")
    elif key.endswith("path") or key.endswith("_dir"):
        v = Text(str(value), style="pkg.path")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree collected under --verbose."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = f"{' ' * indent}[{style}]{duration:>8.2f}ms[/{style}]  {span.get('name', '?')}"
    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="pkg.error"), Text(f"  {result.op}", style="pkg.op"), "—", Text(msg)
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_namespaces(result: ServiceResult, console: Console) -> None:
    """Render manifest namespace bindings as a table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Namespace", style="pkg.id", no_wrap=True)
    table.add_column("Paths", style="pkg.path")
    for item in items:
        table.add_row(Text(item["id"]), Text("\n".join(item["paths"])))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} namespaces")


def _render_packages(result: ServiceResult, console: Console) -> None:
    """Render discovered packages, sub-packages indented under their parent."""
    d = result.data
    items = d.get("items", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Package", no_wrap=True)
    table.add_column("Paths", style="pkg.path")
    for item in items:
        if item.get("sub_package"):
            name = Text(f"  └ {item['id']}", style="pkg.sub")
        else:
            name = Text(item["id"], style="pkg.id")
        table.add_row(name, Text("\n".join(item["paths"])))
    console.print(table)
    console.print(
        f"\n{d.get('count', len(items))} packages "
        f"({d.get('root_count', 0)} root, {d.get('sub_package_count', 0)} sub-packages)"
    )


def _render_package(result: ServiceResult, console: Console) -> None:
    """Render a single package with its readme in a panel."""
    d = result.data
    lines = [f"paths: {', '.join(d.get('paths', []))}"]
    if d.get("parent"):
        lines.append(f"parent: {d['parent']}")
    if d.get("sub_packages"):
        lines.append(f"sub-packages: {', '.join(d['sub_packages'])}")
    if d.get("readme_path"):
        lines.append(f"readme: {d['readme_path']}")
    console.print(
        Panel(Text("\n".join(lines)), title=d.get("id", "?"), border_style="dim", expand=False)
    )

    readme = d.get("readme", "")
    if readme:
        console.print(Markdown(readme))
    else:
        console.print(Text("No readme.md", style="dim"))


def _render_export(result: ServiceResult, console: Console) -> None:
    """Render export results with output path and counts."""
    _status_line(console, result)
    for key in ("output_dir", "documented", "undocumented", "count"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)


_OP_RENDERERS: dict[str, Renderer] = {
    "list_namespaces": _render_namespaces,
    "discover": _render_packages,
    "show": _render_package,
    "export_html": _render_export,
}
