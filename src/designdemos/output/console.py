"""Rich Console factory and theme for designdemos output.

Consoles render into a StringIO buffer so every renderer keeps the
``render_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEMO_THEME = Theme(
    {
        "demo.ok": "bold green",
        "demo.error": "bold red",
        "demo.warning": "bold yellow",
        "demo.op": "bold cyan",
        "demo.key": "dim",
        "demo.caption": "italic",
        "demo.result.purr": "green",
        "demo.result.hiss": "bold red",
        "demo.result.hisspu": "bold red",
        "demo.layer": "bold blue",
        "demo.number": "magenta",
    }
)

_RESULT_STYLES: dict[str, str] = {
    "purr": "demo.result.purr",
    "hiss": "demo.result.hiss",
    "hisspu": "demo.result.hisspu",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=DEMO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_result(result: str) -> str:
    """Rich style name for a purr outcome (empty when unknown)."""
    return _RESULT_STYLES.get(result, "")
