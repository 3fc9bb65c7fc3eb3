"""
Base class for dewdrop CLI commands.

A command declares its shape in init():

    class DeployCommand(Command):
        def init(self):
            self.set_command("deploy")
            self.set_description("Deploy the site to an environment")
            self.add_alias("dep")
            self.add_primary_arg("env", "Target environment", ARG_REQUIRED, ["e"])
            self.add_example("Deploy to staging", "./dewdrop deploy staging")

        def set_env(self, value):
            self._env = value

        def execute(self):
            ...

The runner then offers the raw tokens to parse_args() once and calls
execute() only if parsing succeeded. Bad user input is reported through the
renderer and a False return; it is never raised.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Any, NoReturn

from ..log import LogConfig, Logger, LoggerFactory
from .args import Argument, Example, setter_name
from .constants import ARG_OPTIONAL, HELP_ARG
from .errors import MisconfiguredCommandError, ReservedArgumentError
from .renderer import Renderer

if TYPE_CHECKING:
    from .run import Run

# Definition API methods a derived argument setter must not resolve to
RESERVED_SETTERS = frozenset({"set_command", "set_description"})


class _Abort(Exception):
    """Internal signal unwinding parse_args() after an abort was rendered."""


class Command(ABC):
    """
    Abstract base for all CLI commands.

    Supplies argument parsing, help display, alias support and a few
    helpers for running external programs.
    """

    def __init__(self, runner: Run | None, renderer: Renderer) -> None:
        """
        Initialize the command and let the subclass declare itself.

        Args:
            runner: The runner dispatching this command (None in isolation)
            renderer: Renderer receiving all command output

        Raises:
            MisconfiguredCommandError: If init() leaves name or description unset
        """
        self._runner = runner
        self._renderer = renderer
        self._command: str | None = None
        self._description: str | None = None
        self._aliases: list[str] = []
        self._primary_arg: str | None = None
        self._args: list[Argument] = []
        self._examples: list[Example] = []
        self._logger: Logger | None = None

        # All commands support the --help argument
        self.add_arg(HELP_ARG, "Display the help message for this command", ARG_OPTIONAL)

        self.init()

        if not self._command or not self._description:
            raise MisconfiguredCommandError(self.__class__)

    @abstractmethod
    def init(self) -> None:
        """
        Declare the command's name, description, aliases, args and examples.

        Implementations typically call set_command(), set_description(),
        add_alias(), add_arg(), add_primary_arg() and add_example().
        """
        pass

    @abstractmethod
    def execute(self) -> bool | int | None:
        """
        Run the command. Only called after parse_args() returned True.

        Returns:
            None or True for success, False for failure, or an exit status
        """
        pass

    # -- definition API -------------------------------------------------------

    def set_command(self, name: str) -> Command:
        self._command = name.lower()
        return self

    def set_description(self, description: str) -> Command:
        self._description = description
        return self

    def add_alias(self, alias: str) -> Command:
        """Register another name that selects this command."""
        self._aliases.append(alias.lower())
        return self

    def add_arg(
        self,
        name: str,
        description: str,
        required: bool,
        aliases: Iterable[str] = (),
        setter: Callable[[str], Any] | None = None,
    ) -> Command:
        """
        Register an argument.

        Args:
            name: Argument name, used as --name on the command line
            description: Text shown in the help table
            required: ARG_REQUIRED or ARG_OPTIONAL
            aliases: Alternate names accepted in place of name
            setter: Callable receiving the value; defaults to the set_<name>
                method of the command

        Raises:
            ReservedArgumentError: If the default setter would be a
                definition API method (arguments named command or description)
        """
        if setter is None and setter_name(name) in RESERVED_SETTERS:
            raise ReservedArgumentError(name, setter_name(name))
        self._args.append(Argument.create(name, description, required, aliases, setter))
        return self

    def add_primary_arg(
        self,
        name: str,
        description: str,
        required: bool,
        aliases: Iterable[str] = (),
        setter: Callable[[str], Any] | None = None,
    ) -> Command:
        """
        Register an argument that may also be given without its name.

        With a primary argument of "path", both of these set the path:

            ./dewdrop my-command --folder=example /some/path
            ./dewdrop my-command --folder=example --path=/some/path

        Only one argument is primary; a later call replaces the earlier one.
        """
        self.add_arg(name, description, required, aliases, setter)
        self._primary_arg = name.lower()
        return self

    def add_example(self, description: str, command: str) -> Command:
        """Add a usage example shown in the help content."""
        self._examples.append(Example(description, command))
        return self

    # -- accessors ----------------------------------------------------------

    @property
    def command(self) -> str:
        return self._command or ""

    @property
    def description(self) -> str:
        return self._description or ""

    @property
    def aliases(self) -> list[str]:
        return list(self._aliases)

    @property
    def args(self) -> list[Argument]:
        return list(self._args)

    @property
    def examples(self) -> list[Example]:
        return list(self._examples)

    @property
    def primary_arg(self) -> str | None:
        return self._primary_arg

    @property
    def runner(self) -> Run | None:
        return self._runner

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def lg(self) -> Logger:
        """
        Logger for this command, derived from the runner's logger.

        Until set_command() has run the command has no name to log under, so
        the runner's logger is used and nothing is cached.
        """
        if self._logger is not None:
            return self._logger

        parent = getattr(self._runner, "lg", None)
        if isinstance(parent, Logger):
            if not self._command:
                return parent
            self._logger = LoggerFactory.derive(parent, self._command)
        else:
            name = self._command or self.__class__.__name__.lower()
            lg = LoggerFactory.create(f"/detached/{name}", LogConfig.from_params(False))
            if not self._command:
                return lg
            self._logger = lg
        return self._logger

    # -- selection & parsing ------------------------------------------------

    def is_selected(self, input_command: str) -> bool:
        """Check whether the input names this command or one of its aliases."""
        name = input_command.lower()
        return name == self._command or name in self._aliases

    def parse_args(self, tokens: Sequence[str]) -> bool:
        """
        Parse the raw arguments given to this command.

        If "--help" appears anywhere in the input, parsing stops and the help
        content is displayed. These inputs are equivalent:

            ./dewdrop my-command --argument-name=value
            ./dewdrop my-command --argument-name value
            ./dewdrop my-command -argument-alias=value
            ./dewdrop my-command -argument-alias value

        Each value is delivered to the argument's setter. A single token left
        over after named arguments are consumed goes to the primary argument.

        Args:
            tokens: Raw command-line tokens following the command name

        Returns:
            bool: Whether arguments were fully parsed and the command can run
        """
        try:
            self._parse(list(tokens))
        except _Abort:
            return False
        return True

    def _parse(self, tokens: list[str]) -> None:
        """Parse tokens, raising _Abort once an error has been rendered."""
        # --help anywhere wins before any value reaches a setter
        if any(t.lower().startswith("--" + HELP_ARG) for t in tokens):
            self.lg.debug("help requested")
            self.help()
            raise _Abort()

        args_set: set[str] = set()
        consumed: set[int] = set()

        for index, segment in enumerate(tokens):
            if not segment.startswith("-"):
                continue

            segment = segment.lstrip("-")

            if "=" in segment:
                name, value = segment.split("=", 1)
                consumed.add(index)
            else:
                name = segment
                following = index + 1
                if following >= len(tokens) or tokens[following].startswith("-"):
                    self._abort(f'No value given for argument "{name}"')
                value = tokens[following]
                consumed.update((index, following))

            name = name.lower()
            arg = self._find_arg(name)
            if arg is None:
                self._abort(f'Attempting to set unknown argument "{name}"')

            self._set_arg_value(arg, value)
            args_set.add(arg.name)

        leftover = [t for i, t in enumerate(tokens) if i not in consumed]
        primary = next((a for a in self._args if a.name == self._primary_arg), None)
        if primary is not None and primary.name not in args_set and len(leftover) == 1:
            self._set_arg_value(primary, leftover[0])
            args_set.add(primary.name)

        for arg in self._args:
            if arg.required and arg.name not in args_set:
                self._abort(f'Required argument "{arg.name}" not set.')

    def _find_arg(self, name: str) -> Argument | None:
        """Return the first registered argument matching name or alias."""
        for arg in self._args:
            if arg.matches(name):
                return arg
        return None

    def _set_arg_value(self, arg: Argument, value: str) -> None:
        """Deliver a value to the argument's setter."""
        setter = arg.setter
        if setter is None:
            setter = getattr(self, setter_name(arg.name), None)
            if not callable(setter):
                self._abort(f'No setter method available for argument "{arg.name}"')

        self.lg.trace("argument set", extra={"arg": arg.name})
        setter(value)

    # -- help & errors ------------------------------------------------------

    def help(self) -> Command:
        """
        Display help content for this command.

        Available as "./dewdrop my-command --help" or through the built-in
        help command, "./dewdrop help my-command".
        """
        self._renderer.title(self.command).text(self.description)

        if self._aliases:
            self._renderer.text("Aliases: " + ", ".join(self._aliases))

        self._renderer.newline()

        if self._examples:
            self._renderer.subhead("Examples")
            for example in self._examples:
                (
                    self._renderer.text(example.description.rstrip(":") + ":")
                    .text("    " + example.command)
                    .newline()
                )

        if self._args:
            self._renderer.subhead("Arguments")
            self._renderer.table({arg.flag: arg.summary for arg in self._args})

        return self

    def abort(self, error_message: str) -> Command:
        """Render an error message followed by the command's help content."""
        self.lg.debug("aborted", extra={"reason": error_message})
        self._renderer.error(error_message)
        self.help()
        return self

    def _abort(self, error_message: str) -> NoReturn:
        self.abort(error_message)
        raise _Abort(error_message)

    # -- process helpers ----------------------------------------------------

    def passthru(self, command: str) -> int:
        """
        Run an external shell command with inherited stdio.

        Kept as a separate method so tests can replace it.

        Returns:
            int: The command's exit status
        """
        self.lg.debug("running external command", extra={"cmd": command})
        return subprocess.call(command, shell=True)

    def eval_path_argument(self, path: str) -> str:
        """
        Expand a leading "~" to the user's home folder.

        Shells do not expand "~" inside --path=~/x style arguments.
        """
        home = os.environ.get("HOME")
        if path.startswith("~") and home:
            return home + path[1:]
        return path

    def auto_detect_executable(self, name: str) -> str:
        """
        Locate an executable.

        A path configured under executables.<name> wins, then the PATH lookup.
        Falls back to the bare name.
        """
        if self._runner is not None:
            configured = self._runner.config.get(f"executables.{name}")
            if configured:
                return str(configured)
        return shutil.which(name) or name
