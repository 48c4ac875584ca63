"""
Core utilities module.

Provides shared utility functions used across all layers.
"""

from todocli.core.utils.paths import get_db_path
from todocli.core.utils.time import local_now, next_timestamp

__all__ = ["get_db_path", "local_now", "next_timestamp"]
