from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day.

    ``check_in``/``check_out`` are ``HH:MM`` strings, empty until set.
    """

    id: str
    employee_id: str
    date: str
    status: AttendanceStatus
    check_in: str = ""
    check_out: str = ""
    hours_worked: float = 0

    @property
    def is_checked_out(self) -> bool:
        return bool(self.check_out)
