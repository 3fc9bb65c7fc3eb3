"""
Plain-text renderer.

Used when colors are unavailable or unwanted (pipes, CI logs, tests).
"""

from collections.abc import Iterable, Mapping

from ..output import ConsoleOutput, OutputWriter
from .base import Renderer

# Gap between the widest table label and the value column
TABLE_GAP = 4


class MonoRenderer(Renderer):
    """
    Renderer writing undecorated text lines to an OutputWriter.

    Example:
        out = BufferedOutput()
        MonoRenderer(out).title("deploy").table({"--env": "Target (Required)"})
        # deploy
        # ======
        # --env    Target (Required)
    """

    def __init__(self, output: OutputWriter | None = None) -> None:
        self._output = output if output is not None else ConsoleOutput()

    @property
    def output(self) -> OutputWriter:
        return self._output

    def _underlined(self, text: str, char: str) -> "MonoRenderer":
        self._output.write(text)
        self._output.write(char * len(text))
        return self

    def title(self, text: str) -> "MonoRenderer":
        return self._underlined(text, "=")

    def subhead(self, text: str) -> "MonoRenderer":
        return self._underlined(text, "-")

    def text(self, text: str) -> "MonoRenderer":
        self._output.write(text)
        return self

    def success(self, text: str) -> "MonoRenderer":
        self._output.write(f"SUCCESS: {text}")
        return self

    def warn(self, text: str) -> "MonoRenderer":
        self._output.write(f"WARNING: {text}")
        return self

    def error(self, text: str) -> "MonoRenderer":
        self._output.write(f"ERROR: {text}")
        return self

    def newline(self) -> "MonoRenderer":
        self._output.write("")
        return self

    def table(self, rows: Mapping[str, str]) -> "MonoRenderer":
        if not rows:
            return self
        width = max(len(label) for label in rows) + TABLE_GAP
        for label, value in rows.items():
            self._output.write(label.ljust(width) + value)
        return self

    def unordered_list(self, items: Iterable[str]) -> "MonoRenderer":
        for item in items:
            self._output.write(f"  * {item}")
        return self
