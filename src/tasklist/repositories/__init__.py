"""Storage interfaces for tasklist.

This package contains the abstract base class that defines the contract for
persisting the task collection. This is the "Port" in the Hexagonal Architecture.

Implementations (Adapters) are in:
- tasklist.adapters.sqlite (local SQLite file, default)
- tasklist.adapters.json_file (one JSON file per key)
- tasklist.adapters.memory (process memory)
"""

from .repository import KeyValueStorage

__all__ = [
    "KeyValueStorage",
]
