"""
File-Based Todo Store

This module provides the file-based implementation of TodoStoreProtocol,
combining the TodoCollection (domain logic) with JSON file persistence.

The whole list lives in one JSON file holding a top-level array::

    [
      {
        "id": 1,
        "desc": "buy milk",
        "status": "pending",
        "modified": "2026-10-19T09:12:44.120391+02:00"
      }
    ]

Every mutation rewrites the full file using the atomic write pattern (write
to a temp file next to the target, then rename over it), so a crash never
leaves a half-written store behind.
"""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path

import structlog

from todocli.core.domain.collection import TodoCollection
from todocli.core.domain.errors import (
    SaveError,
    StoreAlreadyExistsError,
    StoreIOError,
    TodoDecodeError,
    TodoEncodeError,
    TodoError,
)
from todocli.core.domain.todo import Todo

logger = structlog.get_logger(__name__)

EMPTY_STORE = "[]"


def create_store_file_if_needed(path: str | os.PathLike[str]) -> None:
    """
    Make sure a usable store file exists at ``path``.

    A missing or zero-length file is (re)written as an empty JSON array.

    Args:
        path: Location of the store file

    Raises:
        StoreAlreadyExistsError: If a non-empty file is already present
        StoreIOError: If the file can't be stat'ed or written
    """
    store_path = Path(path)

    try:
        size = store_path.stat().st_size
    except FileNotFoundError:
        size = 0
    except OSError as exc:
        raise StoreIOError(
            f"Couldn't inspect store file: {exc}", path=str(store_path)
        ) from exc

    if store_path.is_dir():
        raise StoreIOError("Store path is a directory", path=str(store_path))

    if size != 0:
        raise StoreAlreadyExistsError(
            "Store file already exists and is not empty", path=str(store_path)
        )

    try:
        store_path.parent.mkdir(parents=True, exist_ok=True)
        with open(store_path, "w", encoding="utf-8") as f:
            f.write(EMPTY_STORE)
    except OSError as exc:
        raise StoreIOError(
            f"Couldn't create store file: {exc}", path=str(store_path)
        ) from exc

    logger.info("todo_store.initialized", path=str(store_path))


class FileTodoStore:
    """
    File-based todo persistence implementing TodoStoreProtocol.

    The store starts empty; call ``retrieve_todos()`` to load the backing
    file. Queries never modify the in-memory list, mutations persist
    immediately.

    Example:
        >>> store = FileTodoStore("/tmp/todos.json")
        >>> create_store_file_if_needed(store.path)
        >>> store.retrieve_todos()
        []
        >>> store.create_todo("buy milk")
        1
    """

    def __init__(self, path: str | os.PathLike[str]):
        """
        Initialize FileTodoStore.

        Args:
            path: Location of the JSON store file
        """
        self.path = Path(path)
        self._collection = TodoCollection()
        self.logger = structlog.get_logger().bind(
            component="file_todo_store", path=str(self.path)
        )

    @property
    def todos(self) -> list[Todo]:
        return self._collection.todos

    def replace_todos(self, todos: list[Todo]) -> None:
        self._collection.replace(todos)

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    def retrieve_todos(self) -> list[Todo]:
        """
        Load the store file into memory, replacing any previous state.

        Decoding is all-or-nothing: on failure the in-memory list is kept.

        Returns:
            The loaded todos

        Raises:
            StoreIOError: If the file can't be opened
            TodoDecodeError: If the content isn't a valid todo array
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise TodoDecodeError(
                f"Store file is not valid JSON: {exc.msg}",
                details={"path": str(self.path), "line": exc.lineno, "column": exc.colno},
            ) from exc
        except UnicodeDecodeError as exc:
            raise TodoDecodeError(
                "Store file is not valid UTF-8", details={"path": str(self.path)}
            ) from exc
        except OSError as exc:
            raise StoreIOError(
                f"Couldn't open store file: {exc}", path=str(self.path)
            ) from exc

        if not isinstance(raw, list):
            raise TodoDecodeError(
                "Store file must contain a JSON array",
                details={"path": str(self.path), "type": type(raw).__name__},
            )

        todos = [Todo.from_dict(entry) for entry in raw]
        self._collection.replace(todos)

        self.logger.debug("todo_store.loaded", count=len(todos))
        return self._collection.todos

    def write_todos(self) -> None:
        """
        Persist the full in-memory list as 2-space indented JSON.

        Raises:
            TodoEncodeError: If the list can't be serialized
            StoreIOError: If the file can't be written
        """
        try:
            content = json.dumps(
                [todo.to_dict() for todo in self._collection],
                indent=2,
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as exc:
            raise TodoEncodeError(f"Todos couldn't be encoded: {exc}") from exc

        # Write through symlinks; the temp file must sit next to the real target
        target = self.path.resolve()
        temp_path: Path | None = None
        try:
            fd, temp_name = tempfile.mkstemp(
                dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
            )
            temp_path = Path(temp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            if target.exists():
                shutil.copymode(target, temp_path)
            os.replace(temp_path, target)
        except OSError as exc:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise StoreIOError(
                f"Couldn't write store file: {exc}", path=str(self.path)
            ) from exc

        self.logger.debug("todo_store.saved", count=len(self._collection))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_pending_todos(self) -> list[Todo]:
        return self._collection.pending()

    def list_done_todos(self) -> list[Todo]:
        return self._collection.done()

    def search(self, text: str) -> list[Todo]:
        return self._collection.search(text)

    def summary(self) -> dict[str, int]:
        return self._collection.summary()

    def find(self, todo_id: int) -> Todo:
        return self._collection.find(todo_id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_todo(self, description: str) -> int:
        """
        Append a new pending todo and persist.

        Returns:
            The id assigned to the new todo
        """
        todo = self._collection.create(description)
        self.write_todos()

        self.logger.info("todo_store.created", todo_id=todo.id)
        return todo.id

    def toggle(self, todo_id: int) -> Todo:
        """
        Flip a todo between pending and done and persist.

        Raises:
            NotFoundError: If no todo has that id
            SaveError: If the change couldn't be persisted
        """
        todo = self._collection.toggle(todo_id)
        self._save_or_raise()

        self.logger.info("todo_store.toggled", todo_id=todo_id, status=todo.status.value)
        return todo

    def modify(self, todo_id: int, description: str) -> Todo:
        """
        Replace a todo's description and persist.

        Raises:
            NotFoundError: If no todo has that id
            SaveError: If the change couldn't be persisted
        """
        todo = self._collection.modify(todo_id, description)
        self._save_or_raise()

        self.logger.info("todo_store.modified", todo_id=todo_id)
        return todo

    def remove_finished_todos(self) -> int:
        removed = self._collection.remove_finished()
        self.write_todos()

        self.logger.info("todo_store.cleaned", removed=removed)
        return removed

    def delete_todo(self, todo_id: int) -> None:
        """
        Delete the todo whose id equals ``todo_id`` and persist.

        Raises:
            InvalidArgumentError: If ``todo_id`` is lower than 1
            NotFoundError: If no todo has that id
        """
        self._collection.delete(todo_id)
        self.write_todos()

        self.logger.info("todo_store.deleted", todo_id=todo_id)

    def reorder(self) -> None:
        self._collection.reorder()
        self.write_todos()

        self.logger.info("todo_store.reordered", count=len(self._collection))

    def swap(self, id_a: int, id_b: int) -> None:
        """
        Exchange two todos' ids and positions and persist.

        Raises:
            NotFoundError: If either id is absent (nothing is changed)
        """
        self._collection.swap(id_a, id_b)
        self.write_todos()

        self.logger.info("todo_store.swapped", id_a=id_a, id_b=id_b)

    def _save_or_raise(self) -> None:
        try:
            self.write_todos()
        except TodoError as exc:
            self.logger.error("todo_store.save_failed", error=str(exc))
            raise SaveError(details=exc.details) from exc
