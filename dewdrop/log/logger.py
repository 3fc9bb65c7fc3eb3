"""
Logger with a TRACE level and structured extra fields.

Fields passed as extra={...} are not spread over the LogRecord; they are kept
together under one attribute so LogFormatter can print them as [key:value].
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants

EXTRA_ATTR = "__dewdrop__extra"

TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]


class Logger(logging.Logger):
    """
    Logger created through LoggerFactory.

    A LogConfig with level=False silences the logger entirely.
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        """
        Args:
            name: "/"-separated logger name
            config: Settings, info level when omitted
            extra: Fields added to every record of this logger
        """
        self._config = config if config is not None else LogConfig()
        self._logging_disabled = self._config.level is False
        level = logging.CRITICAL + 1 if self._logging_disabled else self._config.level
        super().__init__(name, level)
        self._extra = dict(extra or {})

    @property
    def config(self) -> LogConfig:
        return self._config

    @property
    def logging_disabled(self) -> bool:
        return self._logging_disabled

    def get_level(self) -> int | bool:
        """Configured level, False when disabled."""
        return self._config.level

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log below DEBUG, for per-argument parser detail."""
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    def makeRecord(
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: Any,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func, None, sinfo
        )
        setattr(record, EXTRA_ATTR, {**self._extra, **(extra or {})})
        return record
