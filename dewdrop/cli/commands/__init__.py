"""
Built-in commands registered by every runner.
"""

from .help import HelpCommand

DEFAULT_COMMANDS = [HelpCommand]

__all__ = ["DEFAULT_COMMANDS", "HelpCommand"]
