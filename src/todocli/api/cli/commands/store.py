"""Store command - Initialize the todo store file."""

import typer

from todocli.api.cli.context import get_state, todo_errors
from todocli.core.domain.errors import StoreAlreadyExistsError
from todocli.infrastructure.persistence.file_todo_store import create_store_file_if_needed


def init_store(ctx: typer.Context):
    """Create the todo store file if it doesn't exist yet."""
    state = get_state(ctx)

    with todo_errors(state):
        try:
            create_store_file_if_needed(state.db_path)
        except StoreAlreadyExistsError:
            state.console.print_info(f"Todo store already initialized at {state.db_path}")
            return

    state.console.print_success(f"Todo store created at {state.db_path}")
