"""
Value types describing a command's arguments and usage examples.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any


def setter_name(arg_name: str) -> str:
    """
    Inflect an argument name into the name of its setter method.

    Examples:
        >>> setter_name("name")
        'set_name'
        >>> setter_name("my-argument")
        'set_my_argument'
    """
    words = arg_name.lower().split("-")
    return "set_" + "_".join(words)


@dataclass(frozen=True)
class Argument:
    """A single argument accepted by a command."""

    name: str
    description: str
    required: bool
    aliases: tuple[str, ...] = ()
    setter: Callable[[str], Any] | None = field(default=None, compare=False)

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        required: bool,
        aliases: Iterable[str] = (),
        setter: Callable[[str], Any] | None = None,
    ) -> Argument:
        """Create an argument with its name and aliases lower-cased."""
        return cls(
            name=name.lower(),
            description=description,
            required=bool(required),
            aliases=tuple(alias.lower() for alias in aliases),
            setter=setter,
        )

    def matches(self, name: str) -> bool:
        """Check whether a lower-cased input name selects this argument."""
        return name == self.name or name in self.aliases

    @property
    def flag(self) -> str:
        """Flag form shown in help output."""
        return "--" + self.name

    @property
    def summary(self) -> str:
        """Description followed by the requirement, as shown in help output."""
        return f"{self.description} ({'Required' if self.required else 'Optional'})"


@dataclass(frozen=True)
class Example:
    """A documented usage example for a command."""

    description: str
    command: str
