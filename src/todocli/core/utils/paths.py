"""
Store file path resolution.

The store itself never decides where its file lives; the CLI asks
``get_db_path`` and hands the result to the store constructor.
"""

from __future__ import annotations

import os
from pathlib import Path

from todocli.core.domain.config_schema import TodoConfig

DB_PATH_ENV_VAR = "TODOCLI_DB_PATH"
DEFAULT_DB_FILENAME = ".todos.json"


def get_db_path(config: TodoConfig | None = None) -> Path:
    """
    Return the absolute path of the todo store file.

    Precedence: ``TODOCLI_DB_PATH`` environment variable, then ``db_path``
    from the configuration, then ``~/.todos.json``.

    Args:
        config: Loaded configuration, if any

    Returns:
        Absolute path to the store file.
    """
    raw = os.getenv(DB_PATH_ENV_VAR)
    if not raw and config is not None:
        raw = config.db_path
    if not raw:
        return (Path.home() / DEFAULT_DB_FILENAME).resolve()
    return Path(raw).expanduser().resolve()
