"""
Command-line framework for dewdrop.

This module provides:
- Command: base class with argument parsing and help output
- Run: dispatcher selecting and executing one command
- CommandRegistry: command registration and lookup
- Renderers and output writers for testable CLI output
"""

from .args import Argument, Example, setter_name
from .command import Command
from .commands import DEFAULT_COMMANDS, HelpCommand
from .constants import ARG_OPTIONAL, ARG_REQUIRED
from .errors import (
    CommandRegistrationError,
    DuplicateCommandError,
    MisconfiguredCommandError,
    ReservedArgumentError,
)
from .output import BufferedOutput, ConsoleOutput, OutputWriter
from .registry import CommandRegistry
from .renderer import ColorRenderer, MonoRenderer, Renderer
from .run import Run, main

__all__ = [
    "ARG_OPTIONAL",
    "ARG_REQUIRED",
    "Argument",
    "BufferedOutput",
    "ColorRenderer",
    "Command",
    "CommandRegistrationError",
    "CommandRegistry",
    "ConsoleOutput",
    "DEFAULT_COMMANDS",
    "DuplicateCommandError",
    "Example",
    "HelpCommand",
    "MisconfiguredCommandError",
    "MonoRenderer",
    "OutputWriter",
    "Renderer",
    "ReservedArgumentError",
    "Run",
    "main",
    "setter_name",
]
