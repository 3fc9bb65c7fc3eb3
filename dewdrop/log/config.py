"""
Logging settings.

LogConfig is frozen; a root logger keeps the settings it was created with.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


def parse_level(value: Any) -> int | bool:
    """
    Turn a level given in config or code into a logging level.

    Accepts level names ("debug", "TRACE"), numeric strings ("15"), ints,
    and False or "false" to silence the logger completely.

    Raises:
        InvalidLogLevelError: If the value names no known level
    """
    if isinstance(value, bool):
        return logging.INFO if value else False
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key.isdigit():
            return int(key)
        if key in LogConstants.LEVEL_NAMES:
            return LogConstants.LEVEL_NAMES[key]
    raise InvalidLogLevelError(value)


def _section(data: Mapping, dotted: str) -> Mapping:
    node: Any = data
    for key in dotted.split("."):
        node = node.get(key) if isinstance(node, Mapping) else None
    return node if isinstance(node, Mapping) else {}


@dataclass(frozen=True)
class LogConfig:
    """Settings for a root logger; derived loggers share their root's."""

    # False disables the logger entirely
    level: int | bool = logging.INFO
    colors: bool = True
    micros: bool = False

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        colors: bool = True,
        micros: bool = False,
    ) -> LogConfig:
        """
        Build settings from plain values.

        Args:
            level: Level name, number, or False
            colors: Color log lines by level
            micros: Add microseconds to timestamps

        Raises:
            InvalidLogLevelError: If level cannot be resolved
        """
        return cls(level=parse_level(level), colors=colors, micros=micros)

    @classmethod
    def from_config(cls, data: Mapping, section: str = "logging") -> LogConfig:
        """
        Build settings from a configuration mapping.

        Missing keys fall back to level "info", colors on, micros off:

            logging:
              level: debug
              colors: false

        Example:
            LogConfig.from_config(Config("dewdrop.yaml").dict())
        """
        values = _section(data, section)
        return cls.from_params(
            level=values.get("level", "info"),
            colors=bool(values.get("colors", True)),
            micros=bool(values.get("micros", False)),
        )
