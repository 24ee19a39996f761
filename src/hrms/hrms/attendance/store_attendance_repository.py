from __future__ import annotations

from typing import Optional

from ..core.constants import ATTENDANCE_KEY
from ..database.collection import Collection
from ..database.store import KeyValueStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class StoreAttendanceRepository(Collection[AttendanceRecord], AttendanceRepository):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, ATTENDANCE_KEY, AttendanceRecord, label="Attendance record")

    def get_for_employee_and_date(self, employee_id: str, work_date: str) -> Optional[AttendanceRecord]:
        return self.find_one(lambda r: r.employee_id == employee_id and r.date == work_date)
