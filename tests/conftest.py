"""Test configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
import structlog

from todocli.infrastructure.persistence.file_todo_store import FileTodoStore


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI invocations reconfigure structlog globally; undo that per test."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep the user's config and store out of the tests."""
    monkeypatch.delenv("TODOCLI_DB_PATH", raising=False)
    monkeypatch.delenv("TODOCLI_CONFIG", raising=False)
    monkeypatch.delenv("LOGLEVEL", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def store_path(tmp_path) -> Path:
    """An initialized, empty store file."""
    path = tmp_path / "todos.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture
def store(store_path) -> FileTodoStore:
    """A loaded store backed by an empty file."""
    todo_store = FileTodoStore(store_path)
    todo_store.retrieve_todos()
    return todo_store
