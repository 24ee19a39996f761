from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import today_iso
from ..common.ids import generate_id
from ..common.records import from_wire, require_known_fields
from ..common.validators import require_choice, require_fields, require_non_empty, require_non_negative
from ..core.enums import PayrollStatus, Role
from ..core.exceptions import AuthorizationError, InvalidTransitionError, NotFoundError, ValidationError
from ..users.repository import UserRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRecord
from .repository import PayrollRepository

logger = logging.getLogger(__name__)

# Allowed forward step for each status; paid is terminal.
NEXT_STATUS = {
    PayrollStatus.PENDING: PayrollStatus.PROCESSED,
    PayrollStatus.PROCESSED: PayrollStatus.PAID,
}


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        users: UserRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._users = users
        self._calculator = calculator or StandardPayrollCalculator()

    @property
    def calculator(self) -> PayrollCalculator:
        return self._calculator

    def list_records(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Sequence[PayrollRecord]:
        wanted = require_choice(status, PayrollStatus, "status") if status else None

        def keep(r: PayrollRecord) -> bool:
            if employee_id and r.employee_id != employee_id:
                return False
            if wanted and r.status != wanted:
                return False
            return True

        return self._payroll.list(keep)

    def create_record(self, *, current_role: Role, payload: Mapping[str, Any]) -> PayrollRecord:
        """Add a pending payroll record; net salary is computed here and never again."""
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can create payroll records")

        require_known_fields(PayrollRecord, payload)
        require_fields(payload, ("employeeId", "month", "year", "basicSalary"))
        require_non_empty(payload["month"], "month")
        if isinstance(payload["year"], bool) or not isinstance(payload["year"], int):
            raise ValidationError("year must be an integer")
        for name in ("netSalary", "status", "paidOn"):
            if name in payload:
                raise ValidationError(f"{name} is set by the system")
        if not self._users.get(payload["employeeId"]):
            raise ValidationError(f"Unknown employee: {payload['employeeId']}")

        amounts = {
            name: require_non_negative(payload.get(name, 0), name)
            for name in ("basicSalary", "bonus", "deductions", "tax")
        }
        net = self._calculator.net_salary(
            basic_salary=amounts["basicSalary"],
            bonus=amounts["bonus"],
            deductions=amounts["deductions"],
            tax=amounts["tax"],
        )

        data = {
            **payload,
            **amounts,
            "id": payload.get("id") or generate_id(),
            "netSalary": net,
            "status": PayrollStatus.PENDING.value,
            "paidOn": "",
        }
        record = self._payroll.create(from_wire(PayrollRecord, data))
        logger.info("Payroll %s created for %s (%s %s)", record.id, record.employee_id, record.month, record.year)
        return record

    def patch_status(
        self,
        *,
        current_role: Role,
        record_id: str,
        status: Any,
        now: datetime | None = None,
    ) -> PayrollRecord:
        """Advance a record exactly one step: pending -> processed -> paid."""
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can change payroll status")

        new_status = require_choice(status, PayrollStatus, "status")
        record = self._payroll.get(record_id)
        if not record:
            raise NotFoundError("Payroll record not found")

        if NEXT_STATUS.get(record.status) != new_status:
            raise InvalidTransitionError(
                f"Cannot move payroll from {record.status.value} to {new_status.value}"
            )

        changes: dict = {"status": new_status}
        if new_status == PayrollStatus.PAID:
            changes["paid_on"] = today_iso(now)

        updated = self._payroll.update(record_id, changes)
        logger.info("Payroll %s moved to %s", record_id, new_status.value)
        return updated
