from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def get(self, record_id: str) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def list(self, predicate: Optional[Callable[[PayrollRecord], bool]] = None) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def count(self, predicate: Optional[Callable[[PayrollRecord], bool]] = None) -> int:
        raise NotImplementedError

    def create(self, record: PayrollRecord) -> PayrollRecord:
        raise NotImplementedError

    def update(self, record_id: str, changes: Dict[str, Any]) -> PayrollRecord:
        raise NotImplementedError
