"""Todo subsystem public types."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

COMPLETED_MARK = "✅"
OPEN_MARK = "❌"


@dataclass
class Todo:
    """A single todo item.

    ``id`` is assigned once at creation and only used for identity; todos are
    addressed by their position in the collection.
    """

    title: str
    is_completed: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __str__(self) -> str:
        mark = COMPLETED_MARK if self.is_completed else OPEN_MARK
        return f"{mark} {self.title}"

    def toggle(self) -> None:
        self.is_completed = not self.is_completed

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "isCompleted": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Todo:
        """Build a todo from its persisted form.

        Raises:
            KeyError: If a required field is missing.
            TypeError: If a field has the wrong type.
        """
        todo_id = data["id"]
        title = data["title"]
        is_completed = data["isCompleted"]
        if not isinstance(todo_id, str):
            raise TypeError("id must be a string")
        if not isinstance(title, str):
            raise TypeError("title must be a string")
        if not isinstance(is_completed, bool):
            raise TypeError("isCompleted must be a boolean")
        return cls(
            id=todo_id,
            title=title,
            is_completed=is_completed,
        )
