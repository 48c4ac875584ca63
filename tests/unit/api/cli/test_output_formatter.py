"""Tests for the rich todo renderer."""

from rich.console import Console

from todocli.api.cli.output_formatter import TODO_THEME, TodoConsole, format_modified
from todocli.core.domain.todo import Todo, TodoStatus


def render(tf_console: TodoConsole, *calls) -> str:
    tf_console.console = Console(theme=TODO_THEME, record=True, width=120)
    for method, *args in calls:
        getattr(tf_console, method)(*args)
    return tf_console.console.export_text()


def test_format_modified_shortens_timestamps() -> None:
    assert format_modified("2026-10-19T09:12:44.120391+02:00") == "2026-10-19 09:12"


def test_format_modified_keeps_unknown_values() -> None:
    assert format_modified("yesterday") == "yesterday"


def test_print_todos_renders_rows() -> None:
    todos = [
        Todo(id=1, description="buy milk", modified="2026-10-19T09:12:44+02:00"),
        Todo(id=2, description="walk dog", status=TodoStatus.DONE, modified="x"),
    ]

    output = render(TodoConsole(), ("print_todos", todos))

    assert "buy milk" in output
    assert "[x] done" in output
    assert "2026-10-19 09:12" in output


def test_markup_in_descriptions_is_escaped() -> None:
    output = render(TodoConsole(), ("print_todos", [Todo(id=1, description="[bold]raw[/bold]")]))

    assert "[bold]raw[/bold]" in output


def test_modified_column_can_be_hidden() -> None:
    output = render(
        TodoConsole(show_modified=False),
        ("print_todos", [Todo(id=1, description="a", modified="2026-10-19T09:12:44+02:00")]),
    )

    assert "Modified" not in output


def test_empty_listing() -> None:
    assert "No todos found" in render(TodoConsole(), ("print_todos", []))


def test_summary_line() -> None:
    output = render(TodoConsole(), ("print_summary", {"pending": 3, "done": 1}))

    assert "4 todos: 3 pending, 1 done" in output
