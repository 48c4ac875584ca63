"""Tests for the todocli error taxonomy."""

import pytest

from todocli.core.domain.errors import (
    ConfigError,
    InvalidArgumentError,
    NotFoundError,
    SaveError,
    StoreAlreadyExistsError,
    StoreIOError,
    TodoDecodeError,
    TodoEncodeError,
    TodoError,
    error_payload,
)


@pytest.mark.parametrize(
    "error,code",
    [
        (StoreIOError("boom"), "io_error"),
        (TodoDecodeError("boom"), "decode_error"),
        (TodoEncodeError("boom"), "encode_error"),
        (NotFoundError("boom"), "not_found"),
        (InvalidArgumentError("boom"), "invalid_argument"),
        (StoreAlreadyExistsError("boom"), "store_already_exists"),
        (SaveError("boom"), "save_error"),
        (ConfigError("boom"), "config_error"),
    ],
)
def test_error_codes(error, code) -> None:
    assert isinstance(error, TodoError)
    assert error.code == code
    assert str(error) == "boom"
    assert error.details == {}


def test_save_error_default_message() -> None:
    assert SaveError().message == "Todos couldn't be saved"


def test_not_found_records_todo_id() -> None:
    error = NotFoundError("missing", todo_id=7)

    assert error.todo_id == 7
    assert error.details == {"todo_id": 7}


def test_store_io_error_records_path() -> None:
    error = StoreIOError("missing", path="/tmp/todos.json", details={"op": "open"})

    assert error.path == "/tmp/todos.json"
    assert error.details == {"op": "open", "path": "/tmp/todos.json"}


def test_error_payload() -> None:
    payload = error_payload(NotFoundError("missing", todo_id=3), extra={"command": "toggle"})

    assert payload == {
        "success": False,
        "error": "missing",
        "error_type": "NotFoundError",
        "code": "not_found",
        "details": {"todo_id": 3},
        "command": "toggle",
    }
