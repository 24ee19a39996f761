from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    id: str
    employee_id: str
    leave_type: LeaveType = field(metadata={"wire": "type"})
    start_date: str
    end_date: str
    reason: str
    status: LeaveStatus
    applied_on: str

    @property
    def is_terminal(self) -> bool:
        return self.status != LeaveStatus.PENDING
