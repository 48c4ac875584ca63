"""
Domain Models and Business Logic

This package contains the core domain of todocli:
- The Todo entity and its status
- The in-memory TodoCollection
- The error taxonomy
- The configuration schema
"""

from todocli.core.domain.collection import TodoCollection
from todocli.core.domain.todo import Todo, TodoStatus

__all__ = [
    "Todo",
    "TodoCollection",
    "TodoStatus",
]
