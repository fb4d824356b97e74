"""Rich Console factory and theme for baconctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BACON_THEME = Theme(
    {
        "bacon.ok": "bold green",
        "bacon.error": "bold red",
        "bacon.warning": "bold yellow",
        "bacon.op": "bold cyan",
        "bacon.key": "dim",
        "bacon.actor": "bold blue",
        "bacon.center": "bold magenta",
        "bacon.movie": "italic",
        "bacon.score": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).

    Prose lines are soft-wrapped: a long headline or co-star chain stays on
    one line and the terminal wraps it.  Tables still size to *width*.
    """
    return Console(
        file=StringIO(),
        theme=BACON_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
        soft_wrap=True,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
