"""
Line-oriented output targets for the plain-text renderer.

Renderers never print directly; they write whole lines to an OutputWriter so
tests can capture and inspect everything a command displays.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Anything MonoRenderer can send lines to."""

    def write(self, text: str = "") -> None: ...


class ConsoleOutput:
    """
    Writes each line to a stream, stdout by default.

    Example:
        ConsoleOutput(sys.stderr).write("deploy failed")
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def write(self, text: str = "") -> None:
        self._stream.write(text + "\n")

    def flush(self) -> None:
        self._stream.flush()


class BufferedOutput:
    """
    Keeps every line in memory.

    Example:
        out = BufferedOutput()
        MonoRenderer(out).title("deploy")
        assert out.lines == ["deploy", "======"]
    """

    def __init__(self) -> None:
        self._buffer: list[str] = []

    def write(self, text: str = "") -> None:
        # One entry per physical line
        self._buffer.extend(text.split("\n"))

    @property
    def lines(self) -> list[str]:
        return list(self._buffer)

    @property
    def text(self) -> str:
        """Everything written, each line newline-terminated."""
        return "".join(f"{line}\n" for line in self._buffer)

    def clear(self) -> None:
        self._buffer.clear()
