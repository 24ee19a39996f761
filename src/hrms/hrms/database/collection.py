from __future__ import annotations

import threading
from dataclasses import replace
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from ..common.records import from_wire, to_wire
from ..core.exceptions import NotFoundError
from .store import KeyValueStore

R = TypeVar("R")
T = TypeVar("T")

Rows = List[Dict[str, Any]]


class Collection(Generic[R]):
    """Ordered record container stored under one key of a ``KeyValueStore``.

    Records are kept in insertion order. Every mutation is a single
    ``store.update`` call: if the read or the change raises, nothing is written.
    """

    def __init__(self, store: KeyValueStore, key: str, record_type: Type[R], *, label: str):
        self._store = store
        self._key = key
        self._type = record_type
        self._label = label
        self._lock = threading.RLock()

    @property
    def key(self) -> str:
        return self._key

    def _rows(self) -> Rows:
        return list(self._store.get(self._key) or [])

    def _mutate(self, change: Callable[[Rows], T]) -> T:
        result: List[T] = []

        def apply(current: Optional[Rows]) -> Rows:
            rows = list(current or [])
            result.append(change(rows))
            return rows

        with self._lock:
            self._store.update(self._key, apply)
        return result[0]

    def _index_of(self, rows: Rows, record_id: str) -> int:
        for i, row in enumerate(rows):
            if row.get("id") == record_id:
                return i
        raise NotFoundError(f"{self._label} not found")

    def is_initialized(self) -> bool:
        return self._store.get(self._key) is not None

    def list(self, predicate: Optional[Callable[[R], bool]] = None) -> List[R]:
        records = [from_wire(self._type, r) for r in self._rows()]
        if predicate is None:
            return records
        return [r for r in records if predicate(r)]

    def get(self, record_id: str) -> Optional[R]:
        for row in self._rows():
            if row.get("id") == record_id:
                return from_wire(self._type, row)
        return None

    def find_one(self, predicate: Callable[[R], bool]) -> Optional[R]:
        for record in self.list():
            if predicate(record):
                return record
        return None

    def count(self, predicate: Optional[Callable[[R], bool]] = None) -> int:
        return len(self.list(predicate))

    def create(self, record: R) -> R:
        row = to_wire(record)
        self._mutate(lambda rows: rows.append(row))
        return record

    def update(self, record_id: str, changes: Dict[str, Any]) -> R:
        """Shallow merge: attributes in ``changes`` overwrite, the rest are kept."""

        def change(rows: Rows) -> R:
            i = self._index_of(rows, record_id)
            updated = replace(from_wire(self._type, rows[i]), **changes)
            rows[i] = to_wire(updated)
            return updated

        return self._mutate(change)

    def delete(self, record_id: str) -> None:
        def change(rows: Rows) -> None:
            del rows[self._index_of(rows, record_id)]

        self._mutate(change)

    def replace_all(self, records: List[R]) -> None:
        new_rows = [to_wire(r) for r in records]

        def change(rows: Rows) -> None:
            rows[:] = new_rows

        self._mutate(change)
