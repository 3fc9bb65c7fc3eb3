"""
Unified exception hierarchy for dewdrop.

All framework errors derive from DewdropError so callers can catch every
framework failure with a single except clause. User input problems on the
command line are never raised; they are reported through the renderer.
"""

from typing import Any


class DewdropError(Exception):
    """
    Base exception for all dewdrop errors.

    Example:
        try:
            Run().run(["my-command"])
        except DewdropError as e:
            lg.error("framework error", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(DewdropError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found
        - Invalid YAML syntax
        - Config file too large
        - Unresolvable ${variable} reference
    """

    pass


class LoggingError(DewdropError):
    """
    Logging-related errors.

    Examples:
        - Invalid log level
        - Invalid logging section in config
    """

    pass


class CommandError(DewdropError):
    """
    Command-related errors.

    Raised for programming or configuration defects in commands, never for
    bad user input on the command line.

    Examples:
        - Command defines no name or description
        - Duplicate command registration
        - Invalid command name or alias
    """

    pass
