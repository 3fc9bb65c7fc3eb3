"""
Log formatter for the logging system.

Renders records as:

    [12:34:56,789] [I] command selected [command:help] [/cli]

with optional ANSI colors keyed on the record level.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants
from .logger import EXTRA_ATTR


def _format_value(value: Any) -> str:
    """Format a single extra field value."""
    if isinstance(value, BaseException):
        return value.__class__.__name__ + ": " + str(value)
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def _format_extra(extra: dict[str, Any] | None) -> str:
    """Format extra fields as [key:value] pairs in sorted key order."""
    if not extra:
        return ""
    parts = [f"[{key}:{_format_value(extra[key])}]" for key in sorted(extra)]
    return " " + " ".join(parts)


class LogFormatter(logging.Formatter):
    """
    Formatter producing bracketed, optionally colored log lines.

    Extra fields passed through `extra={...}` are appended after the
    message, followed by the logger name.
    """

    def __init__(self, config: LogConfig) -> None:
        """
        Initialize the formatter.

        Args:
            config: Logging configuration (colors and micros are honoured)
        """
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format timestamp as HH:MM:SS,mmm with optional microseconds."""
        s = self.converter(record.created)
        text = f"{s.tm_hour:02d}:{s.tm_min:02d}:{s.tm_sec:02d},{int(record.msecs):03d}"
        if self._config.micros:
            micros = int((record.created % 1) * 1000000) % 1000
            text += f"{micros:03d}"
        return text

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with extra fields and logger name."""
        line = super().format(record)

        # Tracebacks are appended by the base formatter; keep them after the fields
        head, sep, tail = line.partition("\n")
        extra = _format_extra(getattr(record, EXTRA_ATTR, None))
        head = f"{head}{extra} [{record.name}]"

        if self._config.colors:
            col = LogConstants.LEVEL_COLORS.get(record.levelno, "")
            head = col + head + LogConstants.RESET
        return head + sep + tail
