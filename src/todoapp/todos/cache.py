"""Storage backends for the todo list.

Every backend reads and writes the whole collection at once. ``load`` returns
``None`` only when stored data exists but cannot be read; a backend that has
never been written to loads as an empty list.

File writes are atomic via tempfile + fsync + os.replace().
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from todoapp.config.models import StorageBackend, TodoAppConfig
from todoapp.todos.types import Todo

logger = logging.getLogger(__name__)


@runtime_checkable
class TodoCache(Protocol):
    """Protocol for whole-collection todo persistence."""

    def save(self, todos: Sequence[Todo]) -> None:
        """Replace the stored collection with ``todos``."""
        ...

    def load(self) -> list[Todo] | None:
        """Return the stored collection, or None if it could not be read."""
        ...


class InMemoryCache:
    """Keeps todos for the lifetime of the process only."""

    def __init__(self) -> None:
        self._todos: list[Todo] = []

    def save(self, todos: Sequence[Todo]) -> None:
        self._todos = [_copy(todo) for todo in todos]

    def load(self) -> list[Todo] | None:
        return [_copy(todo) for todo in self._todos]


class JSONFileCache:
    """Persists todos as a JSON array in a single file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def save(self, todos: Sequence[Todo]) -> None:
        _write_json_atomic(self._path, [todo.to_dict() for todo in todos])
        logger.debug(
            "todos_saved",
            extra={"file.path": str(self._path), "todo.count": len(todos)},
        )

    def load(self) -> list[Todo] | None:
        if not self._path.exists():
            return []
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError):
            logger.warning(
                "todos_read_failed",
                extra={"file.path": str(self._path)},
                exc_info=True,
            )
            return None
        return _hydrate(raw, self._path)


def create_cache(config: TodoAppConfig) -> TodoCache:
    """Build the cache selected by ``config.storage``."""
    if config.storage is StorageBackend.MEMORY:
        return InMemoryCache()
    return JSONFileCache(config.resolved_todos_file)


def _copy(todo: Todo) -> Todo:
    return Todo(id=todo.id, title=todo.title, is_completed=todo.is_completed)


def _hydrate(raw: Any, path: Path) -> list[Todo] | None:
    if not isinstance(raw, list):
        logger.warning("todos_file_not_a_list", extra={"file.path": str(path)})
        return None
    todos: list[Todo] = []
    for position, item in enumerate(raw):
        try:
            todos.append(Todo.from_dict(item))
        except (KeyError, TypeError):
            logger.warning(
                "todo_parse_failed",
                extra={"file.path": str(path), "todo.position": position},
            )
            return None
    return todos


def _write_json_atomic(path: Path, data: list[dict[str, Any]]) -> None:
    """Write JSON atomically via tempfile + fsync + os.replace()."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(data, indent=2, ensure_ascii=False))
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        Path(tmp).replace(path)
    except BaseException:
        try:
            Path(tmp).unlink()
        except OSError:
            pass
        raise
