from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date, today_iso
from ..common.ids import generate_id
from ..common.records import from_wire, require_known_fields
from ..common.validators import require_choice, require_fields, require_iso_date, require_non_empty
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AuthorizationError, InvalidTransitionError, NotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    """Leave requests: employees apply, admins decide once."""

    def __init__(self, leaves: LeaveRepository, users: UserRepository):
        self._leaves = leaves
        self._users = users

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Sequence[LeaveRequest]:
        wanted = require_choice(status, LeaveStatus, "status") if status else None

        def keep(r: LeaveRequest) -> bool:
            if employee_id and r.employee_id != employee_id:
                return False
            if wanted and r.status != wanted:
                return False
            return True

        return self._leaves.list(keep)

    def create_leave(self, *, current_role: Role, current_user_id: str, payload: Mapping[str, Any]) -> LeaveRequest:
        require_known_fields(LeaveRequest, payload)
        require_fields(payload, ("type", "startDate", "endDate", "reason"))
        require_iso_date(payload["startDate"], "startDate")
        require_iso_date(payload["endDate"], "endDate")
        require_non_empty(payload["reason"], "reason")
        if "appliedOn" in payload:
            require_iso_date(payload["appliedOn"], "appliedOn")

        if parse_iso_date(payload["endDate"]) < parse_iso_date(payload["startDate"]):
            raise ValidationError("endDate must be on or after startDate")
        # A new request always starts pending.
        if payload.get("status") not in (None, LeaveStatus.PENDING.value):
            raise ValidationError("A new leave request must be pending")

        employee_id = payload.get("employeeId") or current_user_id
        if current_role != Role.ADMIN and employee_id != current_user_id:
            raise AuthorizationError("You can only apply for your own leave")
        if not self._users.get(employee_id):
            raise ValidationError(f"Unknown employee: {employee_id}")

        defaults = {
            "id": generate_id(),
            "employeeId": employee_id,
            "status": LeaveStatus.PENDING.value,
            "appliedOn": today_iso(),
        }
        data = {**defaults, **payload, "employeeId": employee_id}
        if not data.get("id"):
            data["id"] = defaults["id"]

        leave = self._leaves.create(from_wire(LeaveRequest, data))
        logger.info("Leave %s (%s) applied by %s", leave.id, leave.leave_type.value, leave.employee_id)
        return leave

    def patch_status(self, *, current_role: Role, request_id: str, status: Any) -> LeaveRequest:
        """Move a pending request to approved or rejected.

        Approved and rejected are terminal: patching them again always raises
        ``InvalidTransitionError``, as does patching back to pending.
        """
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can approve or reject leave")

        new_status = require_choice(status, LeaveStatus, "status")
        leave = self._leaves.get(request_id)
        if not leave:
            raise NotFoundError("Leave request not found")

        if leave.is_terminal:
            raise InvalidTransitionError(f"Leave request is already {leave.status.value}")
        if new_status == LeaveStatus.PENDING:
            raise InvalidTransitionError("Leave request is already pending")

        updated = self._leaves.update(request_id, {"status": new_status})
        logger.info("Leave %s %s", request_id, new_status.value)
        return updated
