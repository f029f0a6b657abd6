"""In-memory implementation of KeyValueStorage."""

from __future__ import annotations

from tasklist.repositories import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage; nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.items: dict[str, str] = dict(initial or {})

    @property
    def storage_type(self) -> str:
        return "memory"

    async def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
