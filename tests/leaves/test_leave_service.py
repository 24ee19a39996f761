from datetime import date

import pytest

from src.hrms.hrms.core.enums import LeaveStatus, LeaveType, Role
from src.hrms.hrms.core.exceptions import (
    AuthorizationError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from src.hrms.hrms.database.store import InMemoryStore
from src.hrms.hrms.leaves.service import LeaveService
from src.hrms.hrms.leaves.store_leave_repository import StoreLeaveRepository
from src.hrms.hrms.users.model import User
from src.hrms.hrms.users.store_user_repository import StoreUserRepository


@pytest.fixture
def service():
    store = InMemoryStore()
    users = StoreUserRepository(store)
    users.create(User(id="emp-1", name="James", email="james@hrms.com", password="x"))
    users.create(User(id="emp-2", name="Emily", email="emily@hrms.com", password="x"))
    return LeaveService(StoreLeaveRepository(store), users)


def _apply(service, employee="emp-1", **overrides):
    payload = {
        "type": "annual",
        "startDate": "2025-04-01",
        "endDate": "2025-04-03",
        "reason": "Family trip",
        **overrides,
    }
    return service.create_leave(current_role=Role.EMPLOYEE, current_user_id=employee, payload=payload)


def test_new_leave_is_pending_and_dated_today(service):
    leave = _apply(service)

    assert leave.status == LeaveStatus.PENDING
    assert leave.applied_on == date.today().isoformat()
    assert leave.employee_id == "emp-1"
    assert leave.leave_type == LeaveType.ANNUAL


def test_caller_supplied_applied_on_wins(service):
    assert _apply(service, appliedOn="2025-03-20").applied_on == "2025-03-20"


def test_new_leave_cannot_skip_pending(service):
    with pytest.raises(ValidationError):
        _apply(service, status="approved")


@pytest.mark.parametrize(
    "overrides",
    [
        {"endDate": "2025-03-30"},
        {"reason": "  "},
        {"type": "holiday"},
        {"startDate": "tomorrow"},
    ],
)
def test_invalid_leave_requests(service, overrides):
    with pytest.raises(ValidationError):
        _apply(service, **overrides)


def test_single_day_leave_is_allowed(service):
    leave = _apply(service, startDate="2025-04-01", endDate="2025-04-01")

    assert leave.start_date == leave.end_date


def test_employee_cannot_apply_for_someone_else(service):
    with pytest.raises(AuthorizationError):
        _apply(service, employeeId="emp-2")


@pytest.mark.parametrize("decision", ["approved", "rejected"])
def test_decided_leave_is_terminal(service, decision):
    leave = _apply(service)

    decided = service.patch_status(current_role=Role.ADMIN, request_id=leave.id, status=decision)
    assert decided.status == LeaveStatus(decision)

    for again in ("approved", "rejected", "pending"):
        with pytest.raises(InvalidTransitionError):
            service.patch_status(current_role=Role.ADMIN, request_id=leave.id, status=again)


def test_patch_keeps_other_fields(service):
    leave = _apply(service)

    decided = service.patch_status(current_role=Role.ADMIN, request_id=leave.id, status="approved")

    assert decided.reason == leave.reason
    assert decided.start_date == leave.start_date
    assert decided.applied_on == leave.applied_on


def test_patch_rules(service):
    leave = _apply(service)

    with pytest.raises(AuthorizationError):
        service.patch_status(current_role=Role.EMPLOYEE, request_id=leave.id, status="approved")
    with pytest.raises(ValidationError):
        service.patch_status(current_role=Role.ADMIN, request_id=leave.id, status="maybe")
    with pytest.raises(InvalidTransitionError):
        service.patch_status(current_role=Role.ADMIN, request_id=leave.id, status="pending")
    with pytest.raises(NotFoundError):
        service.patch_status(current_role=Role.ADMIN, request_id="ghost", status="approved")


def test_list_filters(service):
    first = _apply(service)
    _apply(service, employee="emp-2")
    service.patch_status(current_role=Role.ADMIN, request_id=first.id, status="approved")

    assert [l.id for l in service.list_requests(status="approved")] == [first.id]
    assert [l.employee_id for l in service.list_requests(employee_id="emp-2")] == ["emp-2"]
