"""Todo entity.

A todo is the only record type of the store. It serializes to the JSON object
layout of the store file::

    {"id": 1, "desc": "buy milk", "status": "pending", "modified": "..."}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from todocli.core.domain.errors import TodoDecodeError
from todocli.core.utils.time import next_timestamp


class TodoStatus(str, Enum):
    """Status of a todo."""

    PENDING = "pending"
    DONE = "done"

    def toggled(self) -> TodoStatus:
        """Return the opposite status."""
        return TodoStatus.PENDING if self is TodoStatus.DONE else TodoStatus.DONE


@dataclass
class Todo:
    """A single todo item.

    Attributes:
        id: 1-based identifier, unique within a stable collection.
        description: Free text describing what needs to be done.
        status: PENDING or DONE.
        modified: Local timestamp of the last change (ISO-8601 with offset).
    """

    id: int
    description: str
    status: TodoStatus = TodoStatus.PENDING
    modified: str = field(default_factory=next_timestamp)

    def touch(self) -> None:
        """Refresh ``modified`` to a timestamp later than the current one."""
        self.modified = next_timestamp(self.modified)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for storage."""
        return {
            "id": self.id,
            "desc": self.description,
            "status": self.status.value,
            "modified": self.modified,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Todo:
        """Deserialize from a stored dict.

        Accepts both ``desc`` and ``description`` for the text field.

        Raises:
            TodoDecodeError: If the entry is not a well-formed todo object.
        """
        if not isinstance(data, dict):
            raise TodoDecodeError(
                "Todo entry must be a JSON object",
                details={"entry": repr(data)},
            )

        todo_id = data.get("id")
        # bool is an int subclass but never a valid id
        if isinstance(todo_id, bool) or not isinstance(todo_id, int):
            raise TodoDecodeError(
                "Todo entry has a missing or non-integer id",
                details={"id": repr(todo_id)},
            )

        description = data.get("desc", data.get("description"))
        if not isinstance(description, str):
            raise TodoDecodeError(
                f"Todo {todo_id} has a missing or non-string description",
                details={"id": todo_id},
            )

        raw_status = data.get("status", TodoStatus.PENDING.value)
        try:
            status = TodoStatus(raw_status)
        except ValueError as exc:
            raise TodoDecodeError(
                f"Todo {todo_id} has an unknown status: {raw_status!r}",
                details={"id": todo_id, "status": repr(raw_status)},
            ) from exc

        modified = data.get("modified", "")
        if not isinstance(modified, str):
            modified = str(modified)

        return cls(id=todo_id, description=description, status=status, modified=modified)
