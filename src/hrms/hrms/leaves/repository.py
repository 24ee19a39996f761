from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from .model import LeaveRequest


class LeaveRepository(Protocol):
    def get(self, record_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list(self, predicate: Optional[Callable[[LeaveRequest], bool]] = None) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def count(self, predicate: Optional[Callable[[LeaveRequest], bool]] = None) -> int:
        raise NotImplementedError

    def create(self, record: LeaveRequest) -> LeaveRequest:
        raise NotImplementedError

    def update(self, record_id: str, changes: Dict[str, Any]) -> LeaveRequest:
        raise NotImplementedError
