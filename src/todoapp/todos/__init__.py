"""Todo subsystem public API.

Public API:
- TodoManager: CRUD orchestration over a cache
- create_cache: Factory selecting a cache from config

Caches:
- TodoCache (protocol), InMemoryCache, JSONFileCache

Types:
- Todo
"""

from todoapp.todos.cache import (
    InMemoryCache,
    JSONFileCache,
    TodoCache,
    create_cache,
)
from todoapp.todos.manager import TodoManager
from todoapp.todos.types import Todo

__all__ = [
    "InMemoryCache",
    "JSONFileCache",
    "Todo",
    "TodoCache",
    "TodoManager",
    "create_cache",
]
