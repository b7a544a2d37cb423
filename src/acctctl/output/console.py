"""Rich Console factory and theme for acctctl output.

Consoles render into a StringIO buffer so renderers stay ``-> str``.
Rich drops color codes on its own when output is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ACCT_THEME = Theme(
    {
        "acct.ok": "bold green",
        "acct.error": "bold red",
        "acct.warning": "bold yellow",
        "acct.op": "bold cyan",
        "acct.key": "dim",
        "acct.username": "bold blue",
        "acct.masked": "dim",
        "acct.strong": "green",
        "acct.weak": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Fixed terminal width, for stable test output.
    """
    return Console(
        file=StringIO(),
        theme=ACCT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
