"""
Rich-backed renderer for interactive terminals.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from .base import Renderer

DEWDROP_THEME = {
    "title": "bold magenta",
    "subhead": "bold yellow",
    "success": "green",
    "warning": "yellow",
    "error": "red bold",
    "key": "bold cyan",
    "muted": "dim",
}


def should_use_color(stream=None) -> bool:
    """Determine if color output should be used for a stream."""
    # Respect NO_COLOR environment variable (https://no-color.org/)
    if os.environ.get("NO_COLOR"):
        return False

    # Respect FORCE_COLOR for CI environments that support color
    if os.environ.get("FORCE_COLOR"):
        return True

    stream = stream if stream is not None else sys.stdout
    return bool(getattr(stream, "isatty", lambda: False)())


class ColorRenderer(Renderer):
    """
    Renderer drawing styled output with rich.

    User supplied text is wrapped in rich Text objects so square brackets in
    descriptions are never interpreted as console markup.
    """

    def __init__(self, console: Console | None = None) -> None:
        if console is None:
            console = Console(theme=Theme(DEWDROP_THEME), highlight=False)
        else:
            console.push_theme(Theme(DEWDROP_THEME))
        self._console = console

    @property
    def console(self) -> Console:
        return self._console

    def _line(self, text: str, style: str = "") -> ColorRenderer:
        self._console.print(Text(text, style=style))
        return self

    def title(self, text: str) -> ColorRenderer:
        self._line(text, "title")
        return self._line("=" * len(text), "title")

    def subhead(self, text: str) -> ColorRenderer:
        return self._line(text, "subhead")

    def text(self, text: str) -> ColorRenderer:
        return self._line(text)

    def success(self, text: str) -> ColorRenderer:
        return self._line(f"SUCCESS: {text}", "success")

    def warn(self, text: str) -> ColorRenderer:
        return self._line(f"WARNING: {text}", "warning")

    def error(self, text: str) -> ColorRenderer:
        return self._line(f"ERROR: {text}", "error")

    def newline(self) -> ColorRenderer:
        self._console.print()
        return self

    def table(self, rows: Mapping[str, str]) -> ColorRenderer:
        if not rows:
            return self
        table = Table(box=None, show_header=False, pad_edge=False, padding=(0, 4, 0, 0))
        table.add_column(style="key", no_wrap=True)
        table.add_column()
        for label, value in rows.items():
            table.add_row(Text(label), Text(value))
        self._console.print(table)
        return self

    def unordered_list(self, items: Iterable[str]) -> ColorRenderer:
        for item in items:
            line = Text("  • ", style="muted")
            line.append(item)
            self._console.print(line)
        return self
