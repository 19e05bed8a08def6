"""Tests for path management."""

from pathlib import Path

from todoapp.config.paths import (
    ENV_VAR,
    get_all_paths,
    get_config_path,
    get_data_dir,
    get_logs_path,
    get_todoapp_home,
    get_todos_path,
)


class TestGetTodoappHome:
    """Tests for get_todoapp_home()."""

    def test_default_is_home_dot_todoapp(self, monkeypatch):
        monkeypatch.delenv(ENV_VAR, raising=False)
        get_todoapp_home.cache_clear()

        assert get_todoapp_home() == Path.home() / ".todoapp"

    def test_respects_env_var(self, monkeypatch, tmp_path):
        custom_path = tmp_path / "custom-todoapp"
        monkeypatch.setenv(ENV_VAR, str(custom_path))
        get_todoapp_home.cache_clear()

        assert get_todoapp_home() == custom_path.resolve()

    def test_expands_tilde_in_env_var(self, monkeypatch):
        monkeypatch.setenv(ENV_VAR, "~/my-todoapp")
        get_todoapp_home.cache_clear()

        assert get_todoapp_home() == (Path.home() / "my-todoapp").resolve()


class TestDerivedPaths:
    """Tests for derived path functions."""

    def test_config_path(self, todoapp_home):
        assert get_config_path() == todoapp_home / "config.toml"

    def test_data_dir(self, todoapp_home):
        assert get_data_dir() == todoapp_home / "data"

    def test_todos_path(self, todoapp_home):
        assert get_todos_path() == todoapp_home / "data" / "todos.json"

    def test_logs_path(self, todoapp_home):
        assert get_logs_path() == todoapp_home / "logs"

    def test_get_all_paths(self, todoapp_home):
        paths = get_all_paths()
        assert set(paths) == {"home", "config", "data", "todos", "logs"}
        assert paths["home"] == todoapp_home
