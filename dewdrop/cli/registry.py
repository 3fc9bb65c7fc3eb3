"""
Command registration and lookup.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .constants import MAX_ALIAS_COUNT, MAX_COMMAND_COUNT, MAX_COMMAND_NAME_LENGTH
from .errors import CommandRegistrationError, DuplicateCommandError

if TYPE_CHECKING:
    from .command import Command

_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$")

# Helper functions for CommandRegistry.register()


def _validate_command_name(name: str) -> None:
    """Validate command name format."""
    if not name:
        raise CommandRegistrationError("", "Command must have a name")

    if len(name) > MAX_COMMAND_NAME_LENGTH:
        raise CommandRegistrationError(
            name,
            f"Command name exceeds maximum length of {MAX_COMMAND_NAME_LENGTH} characters",
        )

    if not _NAME_PATTERN.match(name):
        raise CommandRegistrationError(
            name,
            "Command name must start with a lowercase letter and contain only "
            "lowercase letters, numbers, underscores, and hyphens (e.g., 'gen-admin', 'db_seed')",
        )


def _check_command_count_limit(commands: dict, name: str) -> None:
    """Check maximum command count limit."""
    if len(commands) >= MAX_COMMAND_COUNT:
        raise CommandRegistrationError(
            name,
            f"Cannot register command: maximum command count ({MAX_COMMAND_COUNT}) exceeded",
        )


def _validate_aliases(name: str, aliases: list[str], taken: dict[str, str]) -> None:
    """Validate aliases against the format rules and names already in use."""
    if len(aliases) > MAX_ALIAS_COUNT:
        raise CommandRegistrationError(
            name,
            f"Command has {len(aliases)} aliases, exceeding maximum of {MAX_ALIAS_COUNT}",
        )

    for alias in aliases:
        if not _NAME_PATTERN.match(alias):
            raise CommandRegistrationError(
                name,
                f"Alias '{alias}' must start with a lowercase letter and contain "
                f"only lowercase letters, numbers, underscores, and hyphens",
            )

        if alias in taken:
            raise CommandRegistrationError(
                name, f"Alias '{alias}' already used by command '{taken[alias]}'"
            )


class CommandRegistry:
    """Registered commands, kept in registration order."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        # name or alias -> owning command name
        self._names: dict[str, str] = {}

    def register(self, command: Command) -> Command:
        """
        Register a command instance.

        Args:
            command: Initialized command

        Returns:
            The registered command

        Raises:
            CommandRegistrationError: If the name or an alias is invalid or taken,
                or resource limits are exceeded
            DuplicateCommandError: If the command name is already registered
        """
        name = command.command
        _check_command_count_limit(self._commands, name)
        _validate_command_name(name)

        if name in self._commands:
            raise DuplicateCommandError(name)
        if name in self._names:
            raise CommandRegistrationError(
                name, f"Name already used as alias of command '{self._names[name]}'"
            )

        _validate_aliases(name, command.aliases, self._names)

        self._commands[name] = command
        self._names[name] = name
        for alias in command.aliases:
            self._names[alias] = name
        return command

    def select(self, input_command: str) -> Command | None:
        """Return the first command selected by the input name or alias."""
        for command in self._commands.values():
            if command.is_selected(input_command):
                return command
        return None

    def get(self, name: str) -> Command | None:
        """Get a command by exact registered name."""
        return self._commands.get(name)

    def list_commands(self) -> list[Command]:
        """List commands in registration order."""
        return list(self._commands.values())

    def list_names(self) -> list[str]:
        """List registered command names."""
        return list(self._commands.keys())

    def is_registered(self, name: str) -> bool:
        """Check if a command name or alias is registered."""
        return name.lower() in self._names

    def clear(self) -> None:
        """Remove all registered commands."""
        self._commands.clear()
        self._names.clear()

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self):
        return iter(self._commands.values())
