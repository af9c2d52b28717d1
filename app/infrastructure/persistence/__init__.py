"""Persistence layer for client-side state.

Provides the key-value storage backends used to persist each surface's
locale between sessions.
"""

from infrastructure.persistence.storage import (
    InMemoryStorage,
    JSONFileStorage,
    KeyValueStorage,
)

__all__ = ["KeyValueStorage", "InMemoryStorage", "JSONFileStorage"]
