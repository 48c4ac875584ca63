"""
Core Protocol Interfaces

Available Protocols:
    - TodoStoreProtocol: Persistent todo collection (load, query, mutate, save)

Usage:
    from todocli.core.interfaces import TodoStoreProtocol

    def print_pending(store: TodoStoreProtocol) -> None:
        for todo in store.list_pending_todos():
            print(todo.description)
"""

from todocli.core.interfaces.todo_store import TodoStoreProtocol

__all__ = ["TodoStoreProtocol"]
