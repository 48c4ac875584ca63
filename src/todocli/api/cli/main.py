"""todocli CLI entry point."""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from todocli.api.cli.commands import store, todos
from todocli.api.cli.context import CliState
from todocli.api.cli.output_formatter import TodoConsole
from todocli.core.domain.errors import ConfigError
from todocli.core.utils.paths import get_db_path
from todocli.infrastructure.config.config_loader import load_config

app = typer.Typer(
    name="todo",
    help="todo - Manage a todo list stored in a local JSON file",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register commands
app.command("init")(store.init_store)
app.command("add")(todos.add_todo)
app.command("list")(todos.list_todos)
app.command("search")(todos.search_todos)
app.command("toggle")(todos.toggle_todo)
app.command("modify")(todos.modify_todo)
# lets "delete -1" reach the id check instead of failing as an unknown option
app.command("delete", context_settings={"ignore_unknown_options": True})(todos.delete_todo)
app.command("clean")(todos.clean_todos)
app.command("reorder")(todos.reorder_todos)
app.command("swap")(todos.swap_todos)


def _stderr_logger(*args) -> structlog.PrintLogger:
    # resolved per call so a swapped sys.stderr is honoured
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level_name: str) -> None:
    """Route structlog output to stderr at the given level."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
    )


@app.callback()
def main(
    ctx: typer.Context,
    db: Optional[Path] = typer.Option(None, "--db", help="Path to the todo store file"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a YAML config file"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """todo CLI."""
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        console.print(f"[bold red]Error: {escape(exc.message)}[/bold red]")
        raise typer.Exit(1) from exc

    configure_logging("DEBUG" if debug else config.log_level)

    db_path = db.expanduser().resolve() if db else get_db_path(config)
    ctx.obj = CliState(
        db_path=db_path,
        config=config,
        console=TodoConsole(show_modified=config.show_modified),
        debug=debug,
    )


@app.command()
def version():
    """Show todocli version."""
    from todocli import __version__

    console.print(f"[bold blue]Version:[/bold blue] [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
