"""Per-invocation CLI state shared by all commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import structlog
import typer

from todocli.api.cli.output_formatter import TodoConsole
from todocli.core.domain.config_schema import TodoConfig
from todocli.core.domain.errors import TodoError, error_payload
from todocli.infrastructure.persistence.file_todo_store import FileTodoStore

logger = structlog.get_logger(__name__)


@dataclass
class CliState:
    """Options resolved once by the root callback."""

    db_path: Path
    config: TodoConfig
    console: TodoConsole
    debug: bool = False


def get_state(ctx: typer.Context) -> CliState:
    state = ctx.obj
    if not isinstance(state, CliState):
        raise RuntimeError("CLI state not initialized")
    return state


@contextmanager
def todo_errors(state: CliState) -> Iterator[None]:
    """Turn domain errors into a printed message and exit code 1."""
    try:
        yield
    except TodoError as exc:
        logger.debug("cli.command_failed", **error_payload(exc))
        state.console.print_error(exc.message)
        raise typer.Exit(1) from exc


def open_store(state: CliState) -> FileTodoStore:
    """Create a store for the resolved path and load it."""
    if not state.db_path.exists():
        state.console.print_error(f"Run 'todo init' first, no todo store at {state.db_path}")
        raise typer.Exit(1)

    store = FileTodoStore(state.db_path)
    with todo_errors(state):
        store.retrieve_todos()
    return store
