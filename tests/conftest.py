"""Shared test fixtures and factories."""

import io
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from rich.console import Console

from todoapp.config.paths import ENV_VAR, get_todoapp_home
from todoapp.todos import InMemoryCache, Todo, TodoManager


@pytest.fixture(autouse=True)
def todoapp_home(monkeypatch, tmp_path: Path) -> Path:
    """Point TODOAPP_HOME at a temp dir and run from there."""
    home = tmp_path / "home"
    monkeypatch.setenv(ENV_VAR, str(home))
    monkeypatch.delenv("TODOAPP_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    get_todoapp_home.cache_clear()
    yield get_todoapp_home()
    get_todoapp_home.cache_clear()


@pytest.fixture
def console() -> Console:
    """Console that records output in memory."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def output(console: Console) -> Callable[[], str]:
    """Return everything printed to the test console so far."""

    def _read() -> str:
        return console.file.getvalue()

    return _read


@pytest.fixture
def memory_cache() -> InMemoryCache:
    return InMemoryCache()


@pytest.fixture
def manager(memory_cache: InMemoryCache, console: Console) -> TodoManager:
    return TodoManager(memory_cache, console=console)


@pytest.fixture
def seed(memory_cache: InMemoryCache) -> Callable[..., list[Todo]]:
    """Save todos with the given titles (prefix '+' marks them completed)."""

    def _seed(*titles: str) -> list[Todo]:
        todos = [
            Todo(title=t.removeprefix("+"), is_completed=t.startswith("+"))
            for t in titles
        ]
        memory_cache.save(todos)
        return todos

    return _seed


@pytest.fixture
def make_reader() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Build a line reader that replays scripted input, then raises EOFError."""

    def _make(lines: Iterable[str]) -> Callable[[str], str]:
        remaining = iter(lines)

        def _read(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return _read

    return _make


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})
