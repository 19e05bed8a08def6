"""Interactive todo shell.

Reads one command word per line and dispatches it to a TodoManager until the
user types ``exit``. Unknown commands are ignored and the prompt repeats.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum, StrEnum

from rich.console import Console

from todoapp.todos.manager import INVALID_NUMBER_MESSAGE, TodoManager

logger = logging.getLogger(__name__)

INVALID_TITLE_MESSAGE = "Invalid title, please try again."
COMMAND_PROMPT = "\nWhat would you like to do? (add, list, toggle, delete, exit): "
TITLE_PROMPT = "\nEnter todo title: "
NUMBER_PROMPT = "\nEnter the number of the todo: "


class Command(StrEnum):
    """Commands understood by the shell."""

    ADD = "add"
    LIST = "list"
    TOGGLE = "toggle"
    DELETE = "delete"
    EXIT = "exit"

    @classmethod
    def parse(cls, text: str) -> Command | None:
        try:
            return cls(text.strip())
        except ValueError:
            return None


class ShellState(Enum):
    """Result of dispatching one command."""

    RUNNING = "running"
    EXITED = "exited"


class TodoShell:
    """Read-dispatch-print loop over a TodoManager."""

    def __init__(
        self,
        manager: TodoManager,
        *,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self._manager = manager
        self._console = console or Console()
        self._read_line = read_line or self._console.input

    def run(self) -> None:
        """Run until ``exit`` or end of input."""
        self._console.print("[bold]Welcome to the Todo CLI![/bold]")

        state = ShellState.RUNNING
        while state is ShellState.RUNNING:
            try:
                line = self._read_line(COMMAND_PROMPT)
            except EOFError:
                line = Command.EXIT.value
            except KeyboardInterrupt:
                self._console.print("\n[dim]Cancelled[/dim]")
                continue

            command = Command.parse(line)
            if command is None:
                continue
            state = self.dispatch(command)

    def dispatch(self, command: Command) -> ShellState:
        logger.debug("shell_command", extra={"shell.command": command.value})
        match command:
            case Command.ADD:
                self._add()
            case Command.LIST:
                self._manager.list_todos()
            case Command.TOGGLE:
                if (number := self._select_todo()) is not None:
                    self._manager.toggle_completion(number)
            case Command.DELETE:
                if (number := self._select_todo()) is not None:
                    self._manager.delete_todo(number - 1)
            case Command.EXIT:
                self._console.print("\n[dim]Goodbye![/dim]")
                return ShellState.EXITED
        return ShellState.RUNNING

    def _add(self) -> None:
        title = self._prompt(TITLE_PROMPT)
        if not title:
            self._console.print(f"\n[yellow]{INVALID_TITLE_MESSAGE}[/yellow]")
            return
        self._manager.add_todo(title)

    def _select_todo(self) -> int | None:
        """List todos, then ask for a 1-based todo number.

        Returns None when there is nothing to select or the input is not a
        number.
        """
        if not self._manager.list_todos():
            return None

        raw = self._prompt(NUMBER_PROMPT)
        try:
            return int(raw)
        except (TypeError, ValueError):
            self._console.print(f"\n[yellow]{INVALID_NUMBER_MESSAGE}[/yellow]")
            return None

    def _prompt(self, prompt: str) -> str | None:
        try:
            return self._read_line(prompt)
        except EOFError:
            return None
