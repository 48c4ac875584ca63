"""
Unit tests for core protocol interfaces.

Tests verify that:
- Protocols can be imported without errors
- Structural implementations satisfy the runtime check
"""

from todocli.core.domain.collection import TodoCollection
from todocli.core.interfaces import TodoStoreProtocol


class TestProtocolImports:
    def test_import_todo_store_protocol(self):
        assert TodoStoreProtocol is not None


class TestProtocolConformance:
    def test_plain_collection_is_not_a_store(self):
        """The in-memory collection has no persistence methods."""
        assert not isinstance(TodoCollection(), TodoStoreProtocol)
