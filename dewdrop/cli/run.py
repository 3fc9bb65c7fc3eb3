"""
Command dispatcher for the dewdrop CLI.

Run builds every command once, selects the one named by the first token,
offers it the remaining tokens and executes it if parsing succeeded:

    ./dewdrop <command> [--arg=value ...] [primary-value]
"""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterable, Sequence

from ..config import Config
from ..exceptions import ConfigError
from ..log import LogConfig, Logger, LoggerFactory
from .command import Command
from .commands import DEFAULT_COMMANDS, HelpCommand
from .constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_SUCCESS
from .registry import CommandRegistry
from .renderer import ColorRenderer, MonoRenderer, Renderer, should_use_color

RENDERERS = {"color": ColorRenderer, "mono": MonoRenderer}


def _exit_status(result: bool | int | None) -> int:
    """Map an execute() result to a process exit status."""
    if result is None or result is True:
        return EXIT_SUCCESS
    if result is False:
        return EXIT_FAILURE
    return int(result)


def _command_paths(value: object) -> list[str]:
    """Read cli.commands, which may hold a single path or a list of them."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(path) for path in value]
    raise ConfigError(
        "cli.commands must be a command path or a list of them", value=value
    )


def _import_command(path: str) -> type[Command]:
    """Import a command class from a "package.module:ClassName" path."""
    module_name, sep, class_name = path.partition(":")
    if not sep or not module_name or not class_name:
        raise ConfigError("Command path must look like 'package.module:Class'", path=path)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import command module: {e}", path=path) from e

    command_cls = getattr(module, class_name, None)
    if not isinstance(command_cls, type) or not issubclass(command_cls, Command):
        raise ConfigError("Not a Command subclass", path=path)
    return command_cls


class Run:
    """
    Selects, parses and executes one command per process invocation.

    Example:
        runner = Run(Config.default(), commands=[HelpCommand, DeployCommand])
        sys.exit(runner.run(sys.argv[1:]))
    """

    def __init__(
        self,
        config: Config | None = None,
        renderer: Renderer | None = None,
        commands: Iterable[type[Command]] | None = None,
        logger: Logger | None = None,
    ) -> None:
        """
        Initialize the runner and instantiate its commands.

        Args:
            config: Configuration (defaults to an empty config)
            renderer: Renderer shared by all commands (built from config if None)
            commands: Command classes to register (defaults to the built-ins);
                classes listed under cli.commands in config are added after them
            logger: Parent logger (a root logger is built from config if None)

        Raises:
            ConfigError: If the renderer or a configured command is invalid
            CommandError: If a command is misconfigured or its name is taken
        """
        self._config = config if config is not None else Config.empty()
        self._lg = logger if logger is not None else self._create_logger()
        self._renderer = renderer if renderer is not None else self._create_renderer()
        self._registry = CommandRegistry()

        command_classes = list(commands if commands is not None else DEFAULT_COMMANDS)
        for path in _command_paths(self._config.get("cli.commands")):
            command_classes.append(_import_command(path))

        for command_cls in command_classes:
            self.register(command_cls)

    def _create_logger(self) -> Logger:
        root = LoggerFactory.create_root(LogConfig.from_config(self._config.dict()))
        return LoggerFactory.derive(root, "cli")

    def _create_renderer(self) -> Renderer:
        name = self._config.get("cli.renderer", None)
        if name is None:
            name = "color" if should_use_color() else "mono"
        if name not in RENDERERS:
            raise ConfigError(
                "Unknown renderer", renderer=name, choices=",".join(sorted(RENDERERS))
            )
        return RENDERERS[name]()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def lg(self) -> Logger:
        return self._lg

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def register(self, command_cls: type[Command]) -> Command:
        """Instantiate a command class and register the instance."""
        command = command_cls(self, self._renderer)
        self._registry.register(command)
        self._lg.trace("registered command", extra={"command": command.command})
        return command

    def run(self, argv: Sequence[str]) -> int:
        """
        Run the command selected by argv[0] with the remaining tokens.

        With no tokens at all the help command runs and lists the commands.

        Returns:
            int: Process exit status

        Raises:
            Exception: Anything raised by a command's execute() is logged and re-raised
        """
        argv = list(argv)
        name, tokens = (argv[0], argv[1:]) if argv else ("help", [])

        command = self._registry.select(name)
        if command is None:
            return self._unknown_command(name)

        self._lg.debug("command selected", extra={"command": command.command})
        try:
            if not command.parse_args(tokens):
                return EXIT_FAILURE
            status = _exit_status(command.execute())
        except KeyboardInterrupt:
            self._lg.info("... interrupted by user")
            return EXIT_INTERRUPTED
        except Exception as e:
            self._lg.error(
                "command exception", extra={"command": command.command, "exception": e}
            )
            raise

        self._lg.debug("command finished", extra={"command": command.command, "status": status})
        return status

    def _unknown_command(self, name: str) -> int:
        self._lg.debug("unknown command", extra={"command": name})
        self._renderer.error(f'Unknown command "{name}"')

        help_command = self._registry.get("help")
        if isinstance(help_command, HelpCommand):
            self._renderer.newline()
            help_command.list_commands()
        return EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the dewdrop console script."""
    config = Config.default()
    return Run(config).run(sys.argv[1:] if argv is None else argv)
