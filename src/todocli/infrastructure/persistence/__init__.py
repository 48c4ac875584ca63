"""Todo store persistence implementations."""

from todocli.infrastructure.persistence.file_todo_store import (
    FileTodoStore,
    create_store_file_if_needed,
)

__all__ = ["FileTodoStore", "create_store_file_if_needed"]
