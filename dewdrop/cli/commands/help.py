"""Built-in help command."""

from __future__ import annotations

from ..command import Command
from ..constants import ARG_OPTIONAL


class HelpCommand(Command):
    """
    List the available commands, or show the help content of one command.

        ./dewdrop help
        ./dewdrop help gen-admin
    """

    def init(self) -> None:
        self._subject: str | None = None

        self.set_command("help")
        self.set_description("Display a list of available commands or help for one of them")
        # set_command() is taken by the definition API, so use an explicit setter
        self.add_primary_arg(
            "command",
            "The command to display help for",
            ARG_OPTIONAL,
            setter=self.select_subject,
        )
        self.add_example("List all available commands", "./dewdrop help")
        self.add_example("Show help for the gen-admin command", "./dewdrop help gen-admin")

    def select_subject(self, value: str) -> None:
        self._subject = value

    @property
    def subject(self) -> str | None:
        return self._subject

    def execute(self) -> bool:
        if self.runner is None:
            self.renderer.error("The help command needs a runner to list commands")
            return False

        if self._subject is None:
            self.list_commands()
            return True

        command = self.runner.registry.select(self._subject)
        if command is None:
            self.lg.debug("help for unknown command", extra={"command": self._subject})
            self.renderer.error(f'Unknown command "{self._subject}"')
            return False

        command.help()
        return True

    def list_commands(self) -> HelpCommand:
        """Render the table of registered commands."""
        rows = {}
        for command in self.runner.registry.list_commands():
            text = command.description
            if command.aliases:
                text += " (aliases: " + ", ".join(command.aliases) + ")"
            rows[command.command] = text

        (
            self.renderer.title("Dewdrop")
            .text("Available commands:")
            .newline()
            .table(rows)
            .newline()
            .text('Run "./dewdrop help <command>" for details about a single command.')
        )
        return self
