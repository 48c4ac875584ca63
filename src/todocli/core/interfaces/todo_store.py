"""
Todo Store Protocol

This module defines the protocol interface for the Collection Store: the
component owning the full lifecycle of the todo list (load from persistent
storage, query, mutate, save back).

Implementations receive the location of their backing storage explicitly and
never resolve it themselves.

Error Handling:
    - retrieve_todos: raises StoreIOError / TodoDecodeError
    - write_todos: raises StoreIOError / TodoEncodeError
    - find, toggle, modify, delete_todo, swap: raise NotFoundError for unknown ids
    - toggle, modify: wrap persistence failures in SaveError
    - delete_todo: raises InvalidArgumentError for ids lower than 1
"""

from typing import Protocol, runtime_checkable

from todocli.core.domain.todo import Todo


@runtime_checkable
class TodoStoreProtocol(Protocol):
    """Protocol defining the contract for a persistent todo collection."""

    @property
    def todos(self) -> list[Todo]:
        """Current in-memory todos, in display order."""
        ...

    def retrieve_todos(self) -> list[Todo]:
        """Load the backing storage, replacing the in-memory state."""
        ...

    def write_todos(self) -> None:
        """Persist the full in-memory state."""
        ...

    def replace_todos(self, todos: list[Todo]) -> None:
        """Replace the in-memory state without persisting it."""
        ...

    def list_pending_todos(self) -> list[Todo]:
        """Return pending todos without modifying the collection."""
        ...

    def list_done_todos(self) -> list[Todo]:
        """Return done todos without modifying the collection."""
        ...

    def search(self, text: str) -> list[Todo]:
        """Return todos whose description contains ``text`` (case-insensitive, literal)."""
        ...

    def summary(self) -> dict[str, int]:
        """Return todo counts per status."""
        ...

    def create_todo(self, description: str) -> int:
        """Append a new todo, persist, and return its id."""
        ...

    def find(self, todo_id: int) -> Todo:
        """Return the todo with ``todo_id``."""
        ...

    def toggle(self, todo_id: int) -> Todo:
        """Flip a todo between pending and done, then persist."""
        ...

    def modify(self, todo_id: int, description: str) -> Todo:
        """Replace a todo's description, then persist."""
        ...

    def remove_finished_todos(self) -> int:
        """Drop done todos, persist, and return how many were removed."""
        ...

    def delete_todo(self, todo_id: int) -> None:
        """Delete a todo by id, then persist."""
        ...

    def reorder(self) -> None:
        """Renumber ids to match positions, then persist."""
        ...

    def swap(self, id_a: int, id_b: int) -> None:
        """Exchange two todos' ids and positions, then persist."""
        ...
