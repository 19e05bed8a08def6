"""Tests for logging configuration and utilities."""

import json
import logging
import os
import time

import pytest

from todoapp.logging import (
    ComponentFormatter,
    JSONLHandler,
    configure_logging,
    prune_old_logs,
    resolve_log_level,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestResolveLogLevel:
    """Tests for resolve_log_level()."""

    def test_default_is_warning(self):
        assert resolve_log_level() == "WARNING"

    def test_explicit_level(self):
        assert resolve_log_level("debug") == "DEBUG"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("TODOAPP_LOG_LEVEL", "info")
        assert resolve_log_level() == "INFO"

    def test_unknown_falls_back(self):
        assert resolve_log_level("verbose") == "WARNING"


class TestComponentFormatter:
    """Tests for ComponentFormatter."""

    @pytest.mark.parametrize(
        ("name", "component"),
        [
            ("todoapp.todos.cache", "todos"),
            ("todoapp.cli.shell", "cli"),
            ("rich", "rich"),
        ],
    )
    def test_component(self, name, component):
        record = logging.LogRecord(name, logging.INFO, "", 0, "hello", None, None)
        formatted = ComponentFormatter("%(component)s | %(message)s").format(record)
        assert formatted == f"{component} | hello"


class TestJSONLHandler:
    """Tests for JSONLHandler."""

    def test_writes_structured_entries(self, tmp_path):
        handler = JSONLHandler(tmp_path)
        logger = logging.getLogger("todoapp.todos.test_jsonl")
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        try:
            logger.info("todo_added", extra={"todo.id": "abc"})
        finally:
            logger.removeHandler(handler)
            handler.close()

        files = list(tmp_path.glob("*.jsonl"))
        assert len(files) == 1
        entry = json.loads(files[0].read_text().strip())
        assert entry["level"] == "INFO"
        assert entry["component"] == "todos"
        assert entry["message"] == "todo_added"
        assert entry["extra"] == {"todo.id": "abc"}


class TestPruneOldLogs:
    """Tests for prune_old_logs()."""

    def test_missing_dir(self, tmp_path):
        assert prune_old_logs(tmp_path / "nope") == 0

    def test_deletes_only_old_jsonl(self, tmp_path):
        old = tmp_path / "2000-01-01.jsonl"
        new = tmp_path / "today.jsonl"
        other = tmp_path / "notes.txt"
        for path in (old, new, other):
            path.write_text("{}\n")
        stale = time.time() - 30 * 24 * 3600
        os.utime(old, (stale, stale))
        os.utime(other, (stale, stale))

        assert prune_old_logs(tmp_path, retention_days=7) == 1
        assert not old.exists()
        assert new.exists()
        assert other.exists()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_sets_root_level(self, restore_root_logger):
        configure_logging(level="DEBUG")
        assert restore_root_logger.level == logging.DEBUG

    def test_log_to_file(self, restore_root_logger, todoapp_home):
        configure_logging(level="INFO", log_to_file=True)

        assert any(isinstance(h, JSONLHandler) for h in restore_root_logger.handlers)
        assert (todoapp_home / "logs").is_dir()
