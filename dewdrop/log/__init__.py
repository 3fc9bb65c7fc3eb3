"""
Logging for dewdrop.

Extends Python's standard logging with:
- A custom TRACE level for detailed debugging
- Colored bracketed output on stderr
- Structured extra fields rendered as [key:value]
- Hierarchical "/"-separated logger names
- Complete logging disable (level=False or level="false")
"""

import logging

from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE"], "TRACE")

__all__ = [
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
]
