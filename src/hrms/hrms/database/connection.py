from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .store import InMemoryStore, JsonFileStore, KeyValueStore


@dataclass
class StoreConfig:
    backend: str = "memory"
    path: Optional[str] = None


def open_store(config: StoreConfig) -> KeyValueStore:
    """Store factory.

    Note: Each app builds its own store; nothing here is process-wide, so tests
    can create and tear down as many as they like.
    """
    backend = (config.backend or "memory").lower()
    if backend == "memory":
        return InMemoryStore()
    if backend == "json":
        if not config.path:
            raise ValueError("STORE_PATH is required for the json store backend")
        return JsonFileStore(config.path)
    raise ValueError(f"Unknown store backend: {config.backend!r}")
