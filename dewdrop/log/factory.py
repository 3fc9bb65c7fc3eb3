"""
Factory for creating and configuring loggers.

Root loggers own a stderr handler; derived loggers have no handlers of
their own and propagate records to their parent.
"""

import logging
import sys
from typing import Any, TextIO

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Creates root loggers and derives named children from them."""

    @staticmethod
    def create_root(config: LogConfig, stream: TextIO | None = None) -> Logger:
        """
        Create the "/" logger that owns the stderr handler.

        Args:
            config: Level, colors and timestamp settings
            stream: Output stream for the handler (default: sys.stderr)

        Returns:
            Configured root logger

        Example:
            >>> config = LogConfig.from_params(level="info", colors=False)
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.info("started", extra={"command": "help"})
            [12:34:56,789] [I] started [command:help] [/]
        """
        return LoggerFactory.create("/", config, stream=stream)

    @staticmethod
    def _check_existing_logger(name: str) -> Logger | None:
        """Return an already registered dewdrop logger with this name."""
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            return existing
        return None

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        extra: dict[str, Any] | None = None,
        stream: TextIO | None = None,
    ) -> Logger:
        """
        Create a logger with its own handler.

        Args:
            name: Logger name
            config: Level, colors and timestamp settings
            extra: Fields added to every record
            stream: Output stream for the handler (default: sys.stderr)

        Returns:
            The new logger, or the registered one of the same name
        """
        existing = LoggerFactory._check_existing_logger(name)
        if existing is not None:
            return existing

        lg = Logger(name, config, extra)

        # Log output goes to stderr so it never mixes with renderer output
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        lg.parent = logging.root

        logging.root.manager.loggerDict[name] = lg

        lg.trace(
            "created logger",
            extra={"level": logging.getLevelName(lg.level)},
        )
        return lg

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Create a logger below parent that shares its handler and level.

        Examples:
            >>> root = LoggerFactory.create_root(config)  # name: "/"
            >>> LoggerFactory.derive(root, "cli").name
            '/cli'
            >>> LoggerFactory.derive(root, ["cli", "help"]).name
            '/cli/help'

        Args:
            parent: Logger whose handlers and level the child uses
            tags: Single tag or list of tags joined with "/"

        Returns:
            Derived logger instance
        """
        if isinstance(tags, str):
            tags = [tags]
        suffix = "/".join(tags)
        name = f"/{suffix}" if parent.name == "/" else f"{parent.name}/{suffix}"

        existing = LoggerFactory._check_existing_logger(name)
        if existing is not None:
            return existing

        lg = Logger(name, parent.config)
        lg.setLevel(logging.NOTSET)
        lg.parent = parent
        lg.propagate = True

        logging.root.manager.loggerDict[name] = lg
        return lg
