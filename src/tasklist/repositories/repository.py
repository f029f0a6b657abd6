"""Storage abstraction layer for tasklist.

This module defines the abstract base class (interface) for key-value storage,
following the hexagonal architecture (Ports & Adapters) pattern.

The task collection is persisted as a single serialized blob under one key, so
the port only needs whole-value reads and writes. Concrete adapters live in
``tasklist.adapters``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """Abstract base class for asynchronous key-value storage.

    Adapters must raise ``PersistenceError`` for backend failures so callers
    can handle every backend the same way.
    """

    @abstractmethod
    async def get_item(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key is absent

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            PersistenceError: If the backend read fails
        """
        raise NotImplementedError(
            "KeyValueStorage.get_item() must be implemented by adapter"
        )

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any prior value.

        Args:
            key: Storage key
            value: Serialized value

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            PersistenceError: If the backend write fails
        """
        raise NotImplementedError(
            "KeyValueStorage.set_item() must be implemented by adapter"
        )

    @property
    @abstractmethod
    def storage_type(self) -> str:
        """Storage type identifier (for logging/debugging)."""
