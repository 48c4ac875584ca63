"""Rich output formatting for the todo CLI."""

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from todocli.core.domain.todo import Todo, TodoStatus
from todocli.core.utils.time import parse_timestamp

TODO_THEME = Theme(
    {
        "id": "bold cyan",
        "pending": "yellow",
        "done": "green",
        "modified": "dim white",
        "error": "bold red",
        "warning": "bold yellow",
        "success": "bold green",
        "info": "white",
    }
)

STATUS_MARKS = {
    TodoStatus.PENDING: "[pending]\\[ ] pending[/pending]",
    TodoStatus.DONE: "[done]\\[x] done[/done]",
}


def format_modified(raw: str) -> str:
    """Shorten a stored timestamp to minutes for display."""
    parsed = parse_timestamp(raw)
    if parsed is None:
        return raw
    return parsed.strftime("%Y-%m-%d %H:%M")


class TodoConsole:
    """Console wrapper rendering todos and status messages."""

    def __init__(self, show_modified: bool = True):
        """Initialize console.

        Args:
            show_modified: Include the modified column in todo tables
        """
        self.console = Console(theme=TODO_THEME, highlight=False)
        self.show_modified = show_modified

    def print_todos(self, todos: Iterable[Todo], title: Optional[str] = None):
        """Print todos as a table, or a hint when there are none."""
        todos = list(todos)
        if not todos:
            self.console.print("[info]No todos found[/info]")
            return

        table = Table(title=title)
        table.add_column("ID", style="id", justify="right")
        table.add_column("Status")
        table.add_column("Description", style="info")
        if self.show_modified:
            table.add_column("Modified", style="modified")

        for todo in todos:
            row = [str(todo.id), STATUS_MARKS[todo.status], escape(todo.description)]
            if self.show_modified:
                row.append(format_modified(todo.modified))
            table.add_row(*row)

        self.console.print(table)

    def print_summary(self, summary: dict[str, int]):
        """Print the per-status counts below a listing."""
        total = sum(summary.values())
        pending = summary.get(TodoStatus.PENDING.value, 0)
        done = summary.get(TodoStatus.DONE.value, 0)
        self.console.print(
            f"[info]{total} todos: [pending]{pending} pending[/pending], "
            f"[done]{done} done[/done][/info]"
        )

    def print_success(self, message: str):
        self.console.print(f"[success]{escape(message)}[/success]")

    def print_info(self, message: str):
        self.console.print(f"[info]{escape(message)}[/info]")

    def print_error(self, message: str):
        self.console.print(f"[error]Error: {escape(message)}[/error]")
