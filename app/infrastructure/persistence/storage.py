"""Client key-value storage.

The locale state of each UI surface is persisted through this interface.
Values are plain strings; callers own serialization.
"""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Union

from core.logging import get_module_logger

logger = get_module_logger()


class KeyValueStorage(ABC):
    """Abstract string key-value store."""

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None if absent."""

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``; the write is complete on return."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored."""

    @abstractmethod
    def keys(self) -> List[str]:
        """List stored keys."""


class InMemoryStorage(KeyValueStorage):
    """Process-local storage backed by a dict."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data.keys())


class JSONFileStorage(KeyValueStorage):
    """Durable storage kept in a single JSON object on disk.

    Every read goes to the file, so separate instances sharing a path see
    each other's writes on their next read. Writes replace the file
    atomically. A missing, unreadable or non-object file reads as empty.

    Attributes:
        path: Location of the JSON document.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(
                "storage_file_unreadable", path=str(self.path), error=str(e)
            )
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "storage_file_invalid_format", path=str(self.path), expected="object"
            )
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _dump(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2, sort_keys=True)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def read(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def write(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)
        logger.debug("storage_written", path=str(self.path), key=key)

    def remove(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._dump(data)

    def keys(self) -> List[str]:
        return list(self._load().keys())
