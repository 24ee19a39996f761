"""Key-value backends for the record collections.

Both backends hold the same shape: one key per collection, each value a JSON
list of records in insertion order. ``InMemoryStore`` serves a single process;
``JsonFileStore`` keeps the whole key space in one JSON file, the way a browser
client keeps it in local storage.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def update(self, key: str, fn: Callable[[Optional[Any]], Any]) -> Any:
        """Atomic read-modify-write: store ``fn(current)`` under ``key``.

        If reading or ``fn`` raises, nothing is written.
        """
        raise NotImplementedError

    def keys(self) -> List[str]:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class InMemoryStore(KeyValueStore):
    """Values are deep-copied in and out so callers never share state with the store."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            if key not in self._data:
                return None
            return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)

    def update(self, key: str, fn: Callable[[Optional[Any]], Any]) -> Any:
        with self._lock:
            value = fn(copy.deepcopy(self._data.get(key)))
            self._data[key] = copy.deepcopy(value)
            return value

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._data)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()


class JsonFileStore(KeyValueStore):
    """Whole key space persisted as one JSON object.

    Writes go to a temp file in the same directory followed by ``os.replace``,
    so readers see either the old or the new file, never a partial one. A
    missing file or one that is not a JSON object reads as empty; any other
    I/O error propagates, so a failed read never turns into a write.
    """

    def __init__(self, path: str | os.PathLike):
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, Any]:
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return {}
        except ValueError:
            logger.error("Store file %s is not valid JSON; treating it as empty", self._path)
            return {}
        if not isinstance(data, dict):
            logger.error("Store file %s does not hold an object; treating it as empty", self._path)
            return {}
        return data

    def _save(self, data: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=".store-", suffix=".json", dir=str(self._path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self._path)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)

    def update(self, key: str, fn: Callable[[Optional[Any]], Any]) -> Any:
        with self._lock:
            data = self._load()
            value = fn(data.get(key))
            data[key] = value
            self._save(data)
            return value

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._load())

    def clear(self) -> None:
        with self._lock:
            self._save({})
