from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list(self, predicate: Optional[Callable[[AttendanceRecord], bool]] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count(self, predicate: Optional[Callable[[AttendanceRecord], bool]] = None) -> int:
        raise NotImplementedError

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, record_id: str, changes: Dict[str, Any]) -> AttendanceRecord:
        raise NotImplementedError
