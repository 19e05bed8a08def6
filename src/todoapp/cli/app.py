"""Main CLI application."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from todoapp.cli.console import console, error, info
from todoapp.config import ConfigError, StorageBackend, TodoAppConfig, load_config
from todoapp.todos import TodoManager, create_cache

app = typer.Typer(
    name="todoapp",
    help="Manage a simple todo list.",
    invoke_without_command=True,
)


def _load_settings(
    config_path: Path | None,
    storage: StorageBackend | None,
    todos_file: Path | None,
) -> TodoAppConfig:
    """Load config and apply command-line overrides."""
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ConfigError) as e:
        error(escape(str(e)))
        raise typer.Exit(1) from None

    updates: dict[str, object] = {}
    if storage is not None:
        updates["storage"] = storage
    if todos_file is not None:
        updates["todos_file"] = todos_file
    if updates:
        config = config.model_copy(update=updates)
    return config


def _create_manager(ctx: typer.Context) -> TodoManager:
    config: TodoAppConfig = ctx.obj
    return TodoManager(create_cache(config), console=console)


@app.callback()
def _default(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to configuration file"),
    ] = None,
    storage: Annotated[
        StorageBackend | None,
        typer.Option("--storage", "-s", help="Where to keep todos (default: file)"),
    ] = None,
    todos_file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Path to the todos JSON file"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Manage todos. Run without a subcommand to start the interactive shell."""
    from todoapp.cli.shell import TodoShell
    from todoapp.logging import configure_logging

    config = _load_settings(config_path, storage, todos_file)
    configure_logging(
        level=log_level or config.logging.level,
        log_to_file=config.logging.log_to_file,
    )
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        TodoShell(_create_manager(ctx), console=console).run()


@app.command("list")
def list_cmd(ctx: typer.Context) -> None:
    """List todos."""
    _create_manager(ctx).list_todos()


@app.command("add")
def add_cmd(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Todo title")],
) -> None:
    """Add a new todo."""
    if not title:
        error("Invalid title, please try again.")
        raise typer.Exit(1)
    if not _create_manager(ctx).add_todo(title):
        raise typer.Exit(1)


@app.command("toggle")
def toggle_cmd(
    ctx: typer.Context,
    number: Annotated[int, typer.Argument(help="Todo number, as shown by list")],
) -> None:
    """Toggle a todo between done and not done."""
    if not _create_manager(ctx).toggle_completion(number):
        raise typer.Exit(1)


@app.command("delete")
def delete_cmd(
    ctx: typer.Context,
    number: Annotated[int, typer.Argument(help="Todo number, as shown by list")],
) -> None:
    """Delete a todo."""
    if not _create_manager(ctx).delete_todo(number - 1):
        raise typer.Exit(1)


@app.command("path")
def path_cmd(ctx: typer.Context) -> None:
    """Show where todos are stored."""
    config: TodoAppConfig = ctx.obj
    if config.storage is StorageBackend.MEMORY:
        info("Todos are kept in memory and discarded on exit")
        return
    console.print(str(config.resolved_todos_file), soft_wrap=True)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
