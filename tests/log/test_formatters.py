"""
Tests for dewdrop/log/formatters.py.
"""

import logging
import re
import sys

import pytest

from dewdrop.log import LogConfig, LogConstants, LogFormatter
from dewdrop.log.logger import EXTRA_ATTR


def _record(msg="message", level=logging.INFO, extra=None, exc_info=None):
    record = logging.LogRecord("/cli", level, __file__, 1, msg, (), exc_info)
    setattr(record, EXTRA_ATTR, extra or {})
    return record


@pytest.mark.unit
class TestLogFormatter:
    """Test the bracketed log line layout."""

    def test_layout(self):
        formatter = LogFormatter(LogConfig.from_params("info", colors=False))

        line = formatter.format(_record(extra={"z": 1, "a": "x"}))

        assert re.fullmatch(
            r"\[\d{2}:\d{2}:\d{2},\d{3}\] \[I\] message \[a:x\] \[z:1\] \[/cli\]", line
        )

    def test_micros(self):
        formatter = LogFormatter(LogConfig.from_params("info", colors=False, micros=True))

        line = formatter.format(_record())

        assert re.match(r"\[\d{2}:\d{2}:\d{2},\d{6}\]", line)

    def test_exception_and_list_values(self):
        formatter = LogFormatter(LogConfig.from_params("info", colors=False))

        line = formatter.format(
            _record(extra={"exception": ValueError("bad"), "names": ["a", "b"]})
        )

        assert "[exception:ValueError: bad] [names:a,b]" in line

    def test_colors(self):
        formatter = LogFormatter(LogConfig.from_params("info", colors=True))

        line = formatter.format(_record(level=logging.ERROR))

        assert line.startswith(LogConstants.LEVEL_COLORS[logging.ERROR])
        assert line.endswith(LogConstants.RESET)

    def test_traceback_after_fields(self):
        formatter = LogFormatter(LogConfig.from_params("info", colors=False))
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            exc_info = sys.exc_info()

        line = formatter.format(_record(extra={"k": "v"}, exc_info=exc_info))

        first, _, rest = line.partition("\n")
        assert first.endswith("message [k:v] [/cli]")
        assert "RuntimeError: boom" in rest
