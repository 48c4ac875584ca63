"""
In-memory todo collection.

Holds the ordered todo sequence (insertion order is display order) and
implements every query and mutation on it. This module does no I/O; the
file-backed store in ``todocli.infrastructure.persistence`` loads a
collection, delegates to it, and persists after each mutation.

Queries (``pending``, ``done``, ``search``) are read-only and return new
lists. Mutations validate their arguments before touching the sequence, so a
failing call leaves the collection unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from todocli.core.domain.errors import InvalidArgumentError, NotFoundError
from todocli.core.domain.todo import Todo, TodoStatus


class TodoCollection:
    """Ordered sequence of todos with id-based operations."""

    def __init__(self, todos: Iterable[Todo] | None = None) -> None:
        self._todos: list[Todo] = list(todos or [])

    def __len__(self) -> int:
        return len(self._todos)

    def __iter__(self):
        return iter(self._todos)

    @property
    def todos(self) -> list[Todo]:
        """Shallow copy of the current sequence."""
        return list(self._todos)

    def replace(self, todos: Iterable[Todo]) -> None:
        """Replace the whole sequence."""
        self._todos = list(todos)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def pending(self) -> list[Todo]:
        return [todo for todo in self._todos if todo.status is TodoStatus.PENDING]

    def done(self) -> list[Todo]:
        return [todo for todo in self._todos if todo.status is TodoStatus.DONE]

    def search(self, text: str) -> list[Todo]:
        """Return todos whose description contains ``text``, ignoring case.

        ``text`` is matched literally; regex metacharacters have no effect.
        """
        pattern = re.compile(re.escape(text), re.IGNORECASE)
        return [todo for todo in self._todos if pattern.search(todo.description)]

    def summary(self) -> dict[str, int]:
        """Count todos per status."""
        counts = {status.value: 0 for status in TodoStatus}
        for todo in self._todos:
            counts[todo.status.value] += 1
        return counts

    def find(self, todo_id: int) -> Todo:
        """Return the todo with ``todo_id``; the last one wins on duplicates.

        Raises:
            NotFoundError: If no todo has that id.
        """
        return self._todos[self._index_of(todo_id)]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, description: str) -> Todo:
        """Append a new pending todo with the next free id."""
        highest_id = max((todo.id for todo in self._todos), default=0)
        todo = Todo(id=highest_id + 1, description=description)
        self._todos.append(todo)
        return todo

    def toggle(self, todo_id: int) -> Todo:
        todo = self.find(todo_id)
        todo.status = todo.status.toggled()
        todo.touch()
        return todo

    def modify(self, todo_id: int, description: str) -> Todo:
        todo = self.find(todo_id)
        todo.description = description
        todo.touch()
        return todo

    def remove_finished(self) -> int:
        """Drop every done todo and return how many were removed."""
        remaining = self.pending()
        removed = len(self._todos) - len(remaining)
        self._todos = remaining
        return removed

    def delete(self, todo_id: int) -> Todo:
        """Remove the todo whose id field equals ``todo_id``.

        Raises:
            InvalidArgumentError: If ``todo_id`` is lower than 1.
            NotFoundError: If no todo has that id.
        """
        if todo_id < 1:
            raise InvalidArgumentError(
                "id can not be less than 1", details={"todo_id": todo_id}
            )
        return self._todos.pop(self._index_of(todo_id))

    def reorder(self) -> None:
        """Renumber ids to match the 1-based position of each todo."""
        for position, todo in enumerate(self._todos, start=1):
            todo.id = position

    def swap(self, id_a: int, id_b: int) -> None:
        """Exchange both the ids and the positions of two todos.

        Both ids are resolved before anything changes.

        Raises:
            NotFoundError: If either id is absent.
        """
        position_a = self._index_of(id_a)
        position_b = self._index_of(id_b)
        if position_a == position_b:
            return

        todo_a = self._todos[position_a]
        todo_b = self._todos[position_b]
        todo_a.id, todo_b.id = id_b, id_a
        self._todos[position_a], self._todos[position_b] = todo_b, todo_a

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _index_of(self, todo_id: int) -> int:
        for position in range(len(self._todos) - 1, -1, -1):
            if self._todos[position].id == todo_id:
                return position
        raise NotFoundError(
            f"The todo with the id {todo_id} was not found.", todo_id=todo_id
        )
