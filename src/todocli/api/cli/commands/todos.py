"""Todo commands - Create, list, and change todos."""

import typer
from rich.markup import escape

from todocli.api.cli.context import get_state, open_store, todo_errors


def add_todo(
    ctx: typer.Context,
    description: list[str] = typer.Argument(..., help="Todo description"),
):
    """Add a new todo."""
    state = get_state(ctx)
    store = open_store(state)

    with todo_errors(state):
        todo_id = store.create_todo(" ".join(description))

    state.console.print_success(f"Todo {todo_id} added")


def list_todos(
    ctx: typer.Context,
    pending: bool = typer.Option(False, "--pending", "-p", help="Only pending todos"),
    done: bool = typer.Option(False, "--done", "-d", help="Only done todos"),
):
    """List todos."""
    if pending and done:
        raise typer.BadParameter("--pending and --done are mutually exclusive")

    state = get_state(ctx)
    store = open_store(state)

    if pending:
        todos, title = store.list_pending_todos(), "Pending Todos"
    elif done:
        todos, title = store.list_done_todos(), "Done Todos"
    else:
        todos, title = store.todos, "Todos"

    state.console.print_todos(todos, title=title)
    state.console.print_summary(store.summary())


def search_todos(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to look for (case-insensitive)"),
):
    """Search todo descriptions."""
    state = get_state(ctx)
    store = open_store(state)

    state.console.print_todos(store.search(text), title=f"Todos matching '{escape(text)}'")


def toggle_todo(
    ctx: typer.Context,
    todo_id: int = typer.Argument(..., help="Todo ID"),
):
    """Toggle a todo between pending and done."""
    state = get_state(ctx)
    store = open_store(state)

    with todo_errors(state):
        todo = store.toggle(todo_id)

    state.console.print_success(f"Todo {todo.id} marked as {todo.status.value}")


def modify_todo(
    ctx: typer.Context,
    todo_id: int = typer.Argument(..., help="Todo ID"),
    description: list[str] = typer.Argument(..., help="New description"),
):
    """Change the description of a todo."""
    state = get_state(ctx)
    store = open_store(state)

    with todo_errors(state):
        todo = store.modify(todo_id, " ".join(description))

    state.console.print_success(f"Todo {todo.id} updated")


def delete_todo(
    ctx: typer.Context,
    todo_id: int = typer.Argument(..., help="Todo ID"),
):
    """Delete a todo."""
    state = get_state(ctx)
    store = open_store(state)

    with todo_errors(state):
        store.delete_todo(todo_id)

    state.console.print_success(f"Todo {todo_id} deleted")


def clean_todos(ctx: typer.Context):
    """Remove all done todos."""
    state = get_state(ctx)
    store = open_store(state)

    with todo_errors(state):
        removed = store.remove_finished_todos()

    state.console.print_success(f"Removed {removed} finished todos")


def reorder_todos(ctx: typer.Context):
    """Renumber todo IDs to match their order."""
    state = get_state(ctx)
    store = open_store(state)

    with todo_errors(state):
        store.reorder()

    state.console.print_success("Todos reordered")


def swap_todos(
    ctx: typer.Context,
    id_a: int = typer.Argument(..., help="First todo ID"),
    id_b: int = typer.Argument(..., help="Second todo ID"),
):
    """Swap the IDs and positions of two todos."""
    state = get_state(ctx)
    store = open_store(state)

    with todo_errors(state):
        store.swap(id_a, id_b)

    state.console.print_success(f"Todos {id_a} and {id_b} swapped")
