"""
Tests for dewdrop/cli/renderer/mono.py.
"""

import pytest

from dewdrop.cli import BufferedOutput, MonoRenderer


@pytest.mark.unit
class TestMonoRenderer:
    """Test the exact plain-text layout."""

    def test_title_underlined(self, mono_renderer, buffered_output):
        mono_renderer.title("gen-widget")

        assert buffered_output.lines == ["gen-widget", "=========="]

    def test_subhead_underlined(self, mono_renderer, buffered_output):
        mono_renderer.subhead("Examples")

        assert buffered_output.lines == ["Examples", "--------"]

    def test_message_prefixes(self, mono_renderer, buffered_output):
        mono_renderer.success("done").warn("careful").error("failed").text("plain")

        assert buffered_output.lines == [
            "SUCCESS: done",
            "WARNING: careful",
            "ERROR: failed",
            "plain",
        ]

    def test_newline(self, mono_renderer, buffered_output):
        mono_renderer.text("a").newline().text("b")

        assert buffered_output.lines == ["a", "", "b"]

    def test_table_aligns_values(self, mono_renderer, buffered_output):
        mono_renderer.table({"--help": "Show help (Optional)", "--n": "Name (Required)"})

        assert buffered_output.lines == [
            "--help    Show help (Optional)",
            "--n       Name (Required)",
        ]

    def test_empty_table(self, mono_renderer, buffered_output):
        mono_renderer.table({})

        assert buffered_output.lines == []

    def test_unordered_list(self, mono_renderer, buffered_output):
        mono_renderer.unordered_list(["one", "two"])

        assert buffered_output.lines == ["  * one", "  * two"]

    def test_methods_chain(self, mono_renderer):
        assert mono_renderer.title("t").table({}).unordered_list([]) is mono_renderer

    def test_output_property(self):
        out = BufferedOutput()

        assert MonoRenderer(out).output is out

    def test_defaults_to_stdout(self, capsys):
        MonoRenderer().text("hello")

        assert capsys.readouterr().out == "hello\n"
