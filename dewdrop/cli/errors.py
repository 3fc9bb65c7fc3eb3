"""
Error classes for dewdrop.cli.

These signal defects in how commands are written or registered. Problems
with user input are reported through the renderer instead.
"""

from typing import Any

from ..exceptions import CommandError


class MisconfiguredCommandError(CommandError):
    """Raised when a command finishes init() without a name or description."""

    def __init__(self, cls: Any) -> None:
        self.cls = cls
        super().__init__(
            f"Command class {cls.__name__} must set the name and description "
            "in its init() method"
        )


class CommandRegistrationError(CommandError):
    """Raised when command registration fails."""

    def __init__(self, command_name: str, reason: str) -> None:
        self.command_name = command_name
        self.reason = reason
        super().__init__(f"Failed to register command '{command_name}': {reason}")


class DuplicateCommandError(CommandRegistrationError):
    """Raised when attempting to register a command name twice."""

    def __init__(self, command_name: str) -> None:
        super().__init__(command_name, "command is already registered")


class ReservedArgumentError(CommandError):
    """Raised when an argument's default setter is a definition API method."""

    def __init__(self, arg_name: str, method: str) -> None:
        self.arg_name = arg_name
        self.method = method
        super().__init__(
            f"Argument '{arg_name}' would be delivered to {method}(); "
            "pass an explicit setter"
        )
