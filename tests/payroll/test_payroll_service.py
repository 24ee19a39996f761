from datetime import datetime

import pytest

from src.hrms.hrms.core.enums import PayrollStatus, Role
from src.hrms.hrms.core.exceptions import (
    AuthorizationError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from src.hrms.hrms.database.store import InMemoryStore
from src.hrms.hrms.payroll.service import PayrollService
from src.hrms.hrms.payroll.store_payroll_repository import StorePayrollRepository
from src.hrms.hrms.users.model import User
from src.hrms.hrms.users.store_user_repository import StoreUserRepository


@pytest.fixture
def service():
    store = InMemoryStore()
    users = StoreUserRepository(store)
    users.create(User(id="emp-1", name="James", email="james@hrms.com", password="x"))
    return PayrollService(StorePayrollRepository(store), users)


def _create(service, **overrides):
    payload = {
        "employeeId": "emp-1",
        "month": "March",
        "year": 2025,
        "basicSalary": 6000,
        "bonus": 500,
        "deductions": 300,
        "tax": 900,
        **overrides,
    }
    return service.create_record(current_role=Role.ADMIN, payload=payload)


def test_create_computes_net_and_starts_pending(service):
    record = _create(service)

    assert record.net_salary == 5300
    assert record.status == PayrollStatus.PENDING
    assert record.paid_on == ""


def test_optional_amounts_default_to_zero(service):
    record = service.create_record(
        current_role=Role.ADMIN,
        payload={"employeeId": "emp-1", "month": "March", "year": 2025, "basicSalary": 6000},
    )

    assert record.net_salary == 6000


@pytest.mark.parametrize(
    "overrides",
    [
        {"netSalary": 1},
        {"status": "paid"},
        {"basicSalary": -1},
        {"year": "2025"},
        {"employeeId": "ghost"},
        {"month": ""},
    ],
)
def test_create_validation(service, overrides):
    with pytest.raises(ValidationError):
        _create(service, **overrides)


def test_create_requires_admin(service):
    with pytest.raises(AuthorizationError):
        service.create_record(current_role=Role.EMPLOYEE, payload={})


def test_status_advances_one_step_and_stamps_paid_on(service):
    record = _create(service)
    now = datetime(2025, 3, 28, 12, 0)

    processed = service.patch_status(current_role=Role.ADMIN, record_id=record.id, status="processed", now=now)
    assert processed.status == PayrollStatus.PROCESSED
    assert processed.paid_on == ""

    paid = service.patch_status(current_role=Role.ADMIN, record_id=record.id, status="paid", now=now)
    assert paid.status == PayrollStatus.PAID
    assert paid.paid_on == "2025-03-28"
    assert paid.net_salary == record.net_salary


def test_status_cannot_skip_or_go_back(service):
    record = _create(service)

    with pytest.raises(InvalidTransitionError):
        service.patch_status(current_role=Role.ADMIN, record_id=record.id, status="paid")

    service.patch_status(current_role=Role.ADMIN, record_id=record.id, status="processed")
    service.patch_status(current_role=Role.ADMIN, record_id=record.id, status="paid")

    for status in ("pending", "processed", "paid"):
        with pytest.raises(InvalidTransitionError):
            service.patch_status(current_role=Role.ADMIN, record_id=record.id, status=status)


def test_patch_rules(service):
    record = _create(service)

    with pytest.raises(AuthorizationError):
        service.patch_status(current_role=Role.EMPLOYEE, record_id=record.id, status="processed")
    with pytest.raises(ValidationError):
        service.patch_status(current_role=Role.ADMIN, record_id=record.id, status="lost")
    with pytest.raises(NotFoundError):
        service.patch_status(current_role=Role.ADMIN, record_id="ghost", status="processed")


def test_list_filters_by_status(service):
    first = _create(service)
    _create(service, month="April")
    service.patch_status(current_role=Role.ADMIN, record_id=first.id, status="processed")

    assert [r.id for r in service.list_records(status="processed")] == [first.id]
    assert len(service.list_records(employee_id="emp-1")) == 2
