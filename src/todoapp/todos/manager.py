"""Todo manager facade.

Every operation loads the whole collection, mutates it and saves it back.
Failures (unreadable storage, out-of-range numbers, failed writes) are
reported on the console and leave the stored collection untouched; the
mutating operations return False for them.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from todoapp.todos.cache import TodoCache
from todoapp.todos.types import Todo

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Something went wrong, we're unable to load todos."
SAVE_FAILED_MESSAGE = "Something went wrong, we're unable to save todos."
EMPTY_MESSAGE = "No todos yet, add some!"
INVALID_NUMBER_MESSAGE = "Invalid todo number, please try again."


class TodoManager:
    """Synchronous facade for todo lifecycle operations."""

    def __init__(self, cache: TodoCache, *, console: Console | None = None) -> None:
        self._cache = cache
        self._console = console or Console()

    @property
    def cache(self) -> TodoCache:
        return self._cache

    def list_todos(self) -> bool:
        """Print the todos numbered from 1.

        Returns True only when at least one todo was listed, which is what
        callers check before asking for a todo number.
        """
        todos = self._load()
        if todos is None:
            return False

        self._console.print("\n[bold]Your todos:[/bold]")
        if not todos:
            self._console.print(f"  [dim]{EMPTY_MESSAGE}[/dim]")
            return False

        for number, todo in enumerate(todos, 1):
            self._console.print(f"  {number}. {escape(str(todo))}")
        return True

    def add_todo(self, title: str) -> bool:
        """Append a new open todo. Returns True once it has been saved."""
        todos = self._load()
        if todos is None:
            return False

        todo = Todo(title=title)
        todos.append(todo)
        if not self._save(todos):
            return False

        logger.info("todo_added", extra={"todo.id": todo.id})
        self._console.print("\n[green]Todo added![/green]")
        return True

    def toggle_completion(self, number: int) -> bool:
        """Flip the completion flag of the todo at 1-based ``number``."""
        todos = self._load()
        if todos is None:
            return False

        index = number - 1
        if not _in_bounds(index, todos):
            self._invalid_number(number)
            return False

        todo = todos[index]
        todo.toggle()
        if not self._save(todos):
            return False

        logger.info(
            "todo_toggled",
            extra={"todo.id": todo.id, "todo.is_completed": todo.is_completed},
        )
        self._console.print("\n[green]Todo completion status toggled![/green]")
        return True

    def delete_todo(self, index: int) -> bool:
        """Remove the todo at 0-based ``index``."""
        todos = self._load()
        if todos is None:
            return False

        if not _in_bounds(index, todos):
            self._invalid_number(index + 1)
            return False

        todo = todos.pop(index)
        if not self._save(todos):
            return False

        logger.info("todo_deleted", extra={"todo.id": todo.id})
        self._console.print("\n[green]Todo deleted![/green]")
        return True

    def _load(self) -> list[Todo] | None:
        todos = self._cache.load()
        if todos is None:
            self._console.print(f"\n[red]{LOAD_FAILED_MESSAGE}[/red]")
        return todos

    def _save(self, todos: list[Todo]) -> bool:
        try:
            self._cache.save(todos)
        except (OSError, UnicodeEncodeError):
            logger.exception("todos_save_failed")
            self._console.print(f"\n[red]{SAVE_FAILED_MESSAGE}[/red]")
            return False
        return True

    def _invalid_number(self, number: int) -> None:
        logger.debug("todo_number_out_of_range", extra={"todo.number": number})
        self._console.print(f"\n[yellow]{INVALID_NUMBER_MESSAGE}[/yellow]")


def _in_bounds(index: int, todos: list[Todo]) -> bool:
    return 0 <= index < len(todos)
