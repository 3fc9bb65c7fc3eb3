"""
Tests for dewdrop/cli/output.py.
"""

from io import StringIO

import pytest

from dewdrop.cli import BufferedOutput, ConsoleOutput


@pytest.mark.unit
class TestConsoleOutput:
    """Test the stream-backed writer."""

    def test_write_appends_newline(self):
        stream = StringIO()
        out = ConsoleOutput(stream)

        out.write("hello")
        out.write()

        assert stream.getvalue() == "hello\n\n"

    def test_defaults_to_stdout(self, capsys):
        out = ConsoleOutput()

        out.write("to stdout")
        out.flush()

        assert capsys.readouterr().out == "to stdout\n"


@pytest.mark.unit
class TestBufferedOutput:
    """Test the in-memory writer."""

    def test_lines_and_text(self):
        out = BufferedOutput()

        out.write("first")
        out.write("")
        out.write("second")

        assert out.lines == ["first", "", "second"]
        assert out.text == "first\n\nsecond\n"

    def test_embedded_newlines_split(self):
        out = BufferedOutput()

        out.write("a\nb")

        assert out.lines == ["a", "b"]

    def test_lines_is_a_copy(self):
        out = BufferedOutput()
        out.write("x")

        out.lines.append("y")

        assert out.lines == ["x"]

    def test_clear(self):
        out = BufferedOutput()
        out.write("x")

        out.clear()

        assert out.lines == []
        assert out.text == ""
