from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import format_clock, now_local, parse_clock
from ..common.ids import generate_id
from ..common.records import from_wire, require_known_fields
from ..common.validators import require_fields, require_iso_date, require_non_negative
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, InvalidTransitionError, NotFoundError, ValidationError
from ..users.repository import UserRepository
from .factory import AttendanceStrategyFactory
from .hours import worked_hours
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._users = users
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def _require_employee(self, employee_id: str) -> None:
        if not self._users.get(employee_id):
            raise ValidationError(f"Unknown employee: {employee_id}")

    @staticmethod
    def _check_owner(*, current_role: Role, current_user_id: str, employee_id: str) -> None:
        if current_role != Role.ADMIN and current_user_id != employee_id:
            raise AuthorizationError("You can only record your own attendance")

    def list_records(self, *, employee_id: Optional[str] = None, date: Optional[str] = None) -> Sequence[AttendanceRecord]:
        def keep(r: AttendanceRecord) -> bool:
            if employee_id and r.employee_id != employee_id:
                return False
            if date and r.date != date:
                return False
            return True

        return self._attendance.list(keep)

    def derive(self, *, check_in: str, check_out: str) -> dict:
        """Status and hours implied by a pair of clock strings (either may be empty)."""
        if not check_in:
            return {"status": AttendanceStatus.ABSENT.value, "hoursWorked": 0}

        in_t = parse_clock(check_in)
        status = self._factory.for_checkin(check_in=in_t).decide_checkin(check_in=in_t).status
        if not check_out:
            return {"status": status.value, "hoursWorked": 0}

        hours = worked_hours(in_t, parse_clock(check_out))
        status = self._factory.for_checkout(hours_worked=hours).decide_checkout(current=status, hours_worked=hours).status
        return {"status": status.value, "hoursWorked": hours}

    def create_record(self, *, current_role: Role, current_user_id: str, payload: Mapping[str, Any]) -> AttendanceRecord:
        """Generic create: fields the caller leaves out are derived from the clock times."""
        require_known_fields(AttendanceRecord, payload)
        require_fields(payload, ("employeeId", "date"))
        require_iso_date(payload["date"], "date")
        self._check_owner(current_role=current_role, current_user_id=current_user_id, employee_id=payload["employeeId"])
        self._require_employee(payload["employeeId"])

        check_in = payload.get("checkIn") or ""
        check_out = payload.get("checkOut") or ""
        if check_out and not check_in:
            raise ValidationError("checkOut requires checkIn")
        if "hoursWorked" in payload:
            require_non_negative(payload["hoursWorked"], "hoursWorked")

        defaults = {"id": generate_id(), "checkIn": "", "checkOut": "", **self.derive(check_in=check_in, check_out=check_out)}
        data = {**defaults, **payload}
        if not data.get("id"):
            data["id"] = defaults["id"]

        record = self._attendance.create(from_wire(AttendanceRecord, data))
        logger.info("Attendance %s created for %s on %s", record.id, record.employee_id, record.date)
        return record

    def check_in(
        self,
        *,
        current_role: Role,
        current_user_id: str,
        employee_id: Optional[str] = None,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = now or now_local()
        today = now.date().isoformat()
        employee_id = employee_id or current_user_id

        self._check_owner(current_role=current_role, current_user_id=current_user_id, employee_id=employee_id)
        self._require_employee(employee_id)

        if self._attendance.get_for_employee_and_date(employee_id, today):
            raise InvalidTransitionError("Already checked in today")

        clock = now.time()
        decision = self._factory.for_checkin(check_in=clock).decide_checkin(check_in=clock)
        record = self._attendance.create(
            AttendanceRecord(
                id=generate_id(),
                employee_id=employee_id,
                date=today,
                status=decision.status,
                check_in=format_clock(now),
                check_out="",
                hours_worked=0,
            )
        )
        logger.info("Employee %s checked in at %s (%s)", employee_id, record.check_in, record.status.value)
        return record

    def check_out(
        self,
        *,
        current_role: Role,
        current_user_id: str,
        record_id: str,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = now or now_local()

        record = self._attendance.get(record_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        self._check_owner(current_role=current_role, current_user_id=current_user_id, employee_id=record.employee_id)
        if record.is_checked_out:
            raise InvalidTransitionError("Already checked out")
        if not record.check_in:
            raise InvalidTransitionError("Cannot check out without a check-in")

        check_out = format_clock(now)
        hours = worked_hours(parse_clock(record.check_in), parse_clock(check_out))
        decision = self._factory.for_checkout(hours_worked=hours).decide_checkout(current=record.status, hours_worked=hours)

        updated = self._attendance.update(
            record.id,
            {"check_out": check_out, "hours_worked": hours, "status": decision.status},
        )
        logger.info("Employee %s checked out at %s (%.1fh, %s)", record.employee_id, check_out, hours, updated.status.value)
        return updated
