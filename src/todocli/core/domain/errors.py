"""Domain-specific exception types for todocli."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class TodoError(Exception):
    """Base exception for todocli domain errors."""

    message: str
    code: str = "todo_error"
    details: Dict[str, Any] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}


class StoreIOError(TodoError):
    """Error raised when the backing file cannot be opened, created or stat'ed."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if path:
            details.setdefault("path", path)
        self.path = path
        super().__init__(message=message, code="io_error", details=details)


class TodoDecodeError(TodoError):
    """Error raised when the backing file does not hold a valid todo array."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="decode_error", details=details)


class TodoEncodeError(TodoError):
    """Error raised when the collection cannot be serialized to JSON."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="encode_error", details=details)


class NotFoundError(TodoError):
    """Error raised when no todo carries the requested id."""

    def __init__(
        self,
        message: str,
        *,
        todo_id: int | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if todo_id is not None:
            details.setdefault("todo_id", todo_id)
        self.todo_id = todo_id
        super().__init__(message=message, code="not_found", details=details)


class InvalidArgumentError(TodoError):
    """Error raised for arguments that can never be valid (e.g. id < 1)."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="invalid_argument", details=details)


class StoreAlreadyExistsError(TodoError):
    """Raised by store initialization when a non-empty store is already present.

    Informational: callers usually treat it as "already initialized".
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if path:
            details.setdefault("path", path)
        self.path = path
        super().__init__(message=message, code="store_already_exists", details=details)


class SaveError(TodoError):
    """Error raised when a toggled or modified todo couldn't be persisted."""

    def __init__(
        self,
        message: str = "Todos couldn't be saved",
        *,
        details: Dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code="save_error", details=details)


class ConfigError(TodoError):
    """Error raised for configuration failures."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="config_error", details=details)


def error_payload(error: TodoError, extra: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Convert a TodoError into a plain dict suitable for JSON output."""
    payload = {
        "success": False,
        "error": str(error),
        "error_type": type(error).__name__,
        "code": error.code,
        "details": error.details or {},
    }
    if extra:
        payload.update(extra)
    return payload
