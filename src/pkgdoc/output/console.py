"""Rich Console factory and theme for pkgdoc output.

Consoles render to a StringIO buffer so renderers keep the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PKGDOC_THEME = Theme(
    {
        "pkg.ok": "bold green",
        "pkg.error": "bold red",
        "pkg.warning": "bold yellow",
        "pkg.op": "bold cyan",
        "pkg.key": "dim",
        "pkg.id": "bold blue",
        "pkg.sub": "blue",
        "pkg.path": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=PKGDOC_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
