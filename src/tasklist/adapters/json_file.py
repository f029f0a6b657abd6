"""JSON file implementation of KeyValueStorage.

Each key is stored in its own ``<key>.json`` file inside one directory. Writes
go to a temporary file first and are moved into place, so a crash mid-write
never leaves a half-written value behind.
"""

from __future__ import annotations

import asyncio
import os
import re
import tempfile
from pathlib import Path

from platformdirs import user_data_dir

from tasklist.models import PersistenceError
from tasklist.repositories import KeyValueStorage

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class JsonFileStorage(KeyValueStorage):
    """Key-value storage backed by plain files."""

    def __init__(self, directory: str | Path | None = None):
        self.directory = Path(directory or Path(user_data_dir("tasklist")) / "store")

    @property
    def storage_type(self) -> str:
        return "json"

    def path_for(self, key: str) -> Path:
        """File holding the value for *key*."""
        return self.directory / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    def _read(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, self.path_for(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def get_item(self, key: str) -> str | None:
        try:
            return await asyncio.to_thread(self._read, key)
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Failed to read '{key}': {e}") from e

    async def set_item(self, key: str, value: str) -> None:
        try:
            await asyncio.to_thread(self._write, key, value)
        except OSError as e:
            raise PersistenceError(f"Failed to write '{key}': {e}") from e
