"""
Errors raised while setting up logging.
"""

from typing import Any

from ..exceptions import LoggingError


class LogError(LoggingError):
    """Root of the dewdrop.log errors."""


class InvalidLogLevelError(LogError):
    """A level name or value that maps to no logging level."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"Invalid log level: {level!r}")
