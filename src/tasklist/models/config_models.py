"""Configuration models.

The configuration selects the storage backend for the task collection and
tunes logging and output. It is persisted as JSON by ``ConfigService``.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Where and how the task collection is persisted."""

    backend: Literal["sqlite", "json", "memory"] = Field(
        default="sqlite", description="Key-value storage backend"
    )
    path: str | None = Field(
        default=None,
        description="Database file (sqlite) or directory (json); "
        "defaults to the user data directory",
    )
    key: str = Field(default="tasks", description="Key holding the collection")
    write_mode: Literal["immediate", "deferred"] = Field(
        default="immediate",
        description="Save after every change, or only on flush",
    )

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("key cannot be empty")
        return v.strip()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = Field(default=True)
    date_format: Literal["long", "iso"] = Field(default="long")


class AppConfig(BaseModel):
    """Main tasklist configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
