"""
Configuration Schema Validation

Pydantic model for the user configuration file
(``~/.config/todocli/config.yaml`` by default).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TodoConfig(BaseModel):
    """Schema for the todocli configuration file."""

    model_config = ConfigDict(extra="forbid")

    db_path: Optional[str] = Field(
        None,
        description="Location of the JSON store file (supports ~)",
    )
    log_level: str = Field(
        "WARNING",
        description="Minimum level for structured log output",
    )
    show_modified: bool = Field(
        True,
        description="Show the modified column when listing todos",
    )

    @field_validator("db_path")
    @classmethod
    def validate_db_path(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("db_path cannot be empty")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: object) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
