import logging
from datetime import date

import pytest
from werkzeug.security import check_password_hash

from src.hrms.hrms.attendance.model import AttendanceRecord
from src.hrms.hrms.attendance.store_attendance_repository import StoreAttendanceRepository
from src.hrms.hrms.core.enums import AttendanceStatus, Role, UserStatus
from src.hrms.hrms.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.hrms.hrms.database.store import InMemoryStore
from src.hrms.hrms.users.service import UserService
from src.hrms.hrms.users.store_user_repository import StoreUserRepository


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def service(store):
    return UserService(
        StoreUserRepository(store),
        dependents=(StoreAttendanceRepository(store),),
        password_hash_method="pbkdf2:sha256:1000",
    )


def _add(service, **overrides):
    payload = {"name": "James", "email": "james@hrms.com", "password": "emp123", **overrides}
    return service.create_user(current_role=Role.ADMIN, payload=payload)


def test_create_applies_defaults_and_hashes_password(service):
    user = _add(service)

    assert user.id.startswith("id-")
    assert user.role == Role.EMPLOYEE
    assert user.status == UserStatus.ACTIVE
    assert user.join_date == date.today().isoformat()
    assert user.salary == 0
    assert user.avatar
    assert user.password != "emp123"
    assert check_password_hash(user.password, "emp123")
    assert "password" not in user.to_public()


def test_caller_values_override_defaults(service):
    user = _add(service, role="admin", salary=90000, joinDate="2020-01-01", department="HR")

    assert user.role == Role.ADMIN
    assert user.salary == 90000
    assert user.join_date == "2020-01-01"
    assert user.department == "HR"


def test_create_requires_admin(service):
    with pytest.raises(AuthorizationError):
        service.create_user(
            current_role=Role.EMPLOYEE,
            payload={"name": "X", "email": "x@hrms.com", "password": "pass"},
        )


def test_duplicate_email_is_a_conflict_whatever_else_differs(service):
    _add(service)

    with pytest.raises(ConflictError):
        _add(service, name="Someone Else", role="admin", department="Ops")


@pytest.mark.parametrize("missing", ["name", "email", "password"])
def test_create_requires_core_fields(service, missing):
    payload = {"name": "James", "email": "james@hrms.com", "password": "emp123"}
    del payload[missing]

    with pytest.raises(ValidationError):
        service.create_user(current_role=Role.ADMIN, payload=payload)


def test_create_rejects_short_password_and_unknown_fields(service):
    with pytest.raises(ValidationError):
        _add(service, password="abc")
    with pytest.raises(ValidationError):
        _add(service, favouriteColour="blue")


def test_update_merges_and_rehashes_password(service):
    user = _add(service, department="Engineering", phone="+1 555")

    updated = service.update_user(
        current_role=Role.ADMIN,
        current_user_id="admin-1",
        user_id=user.id,
        payload={"position": "Lead", "password": "newpass"},
    )

    assert updated.position == "Lead"
    assert updated.department == "Engineering"
    assert updated.phone == "+1 555"
    assert check_password_hash(updated.password, "newpass")
    assert not check_password_hash(updated.password, "emp123")


def test_update_missing_user_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_user(current_role=Role.ADMIN, current_user_id="admin-1", user_id="ghost", payload={"name": "X"})


def test_update_to_taken_email_is_a_conflict(service):
    _add(service)
    other = _add(service, email="emily@hrms.com")

    with pytest.raises(ConflictError):
        service.update_user(
            current_role=Role.ADMIN,
            current_user_id="admin-1",
            user_id=other.id,
            payload={"email": "james@hrms.com"},
        )


def test_employee_edits_own_profile_but_not_admin_fields(service):
    user = _add(service)

    updated = service.update_user(
        current_role=Role.EMPLOYEE,
        current_user_id=user.id,
        user_id=user.id,
        payload={"phone": "123", "role": "employee"},
    )
    assert updated.phone == "123"

    with pytest.raises(AuthorizationError):
        service.update_user(
            current_role=Role.EMPLOYEE,
            current_user_id=user.id,
            user_id=user.id,
            payload={"role": "admin"},
        )


def test_employee_cannot_edit_someone_else(service):
    user = _add(service)

    with pytest.raises(AuthorizationError):
        service.update_user(current_role=Role.EMPLOYEE, current_user_id="emp-2", user_id=user.id, payload={"name": "X"})


def test_change_password_checks_current_password(service):
    user = _add(service)

    with pytest.raises(ValidationError):
        service.change_password(current_user_id=user.id, user_id=user.id, current_password="bad", new_password="fresh1")

    service.change_password(current_user_id=user.id, user_id=user.id, current_password="emp123", new_password="fresh1")
    assert check_password_hash(service.get_user(user.id).password, "fresh1")


def test_delete_missing_user_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.delete_user(current_role=Role.ADMIN, current_user_id="admin-1", user_id="ghost")


def test_admin_cannot_delete_self(service):
    admin = _add(service, role="admin")

    with pytest.raises(ValidationError):
        service.delete_user(current_role=Role.ADMIN, current_user_id=admin.id, user_id=admin.id)


def test_delete_leaves_dependent_records_and_warns(service, store, caplog):
    user = _add(service)
    attendance = StoreAttendanceRepository(store)
    attendance.create(
        AttendanceRecord(id="att-1", employee_id=user.id, date="2025-01-02", status=AttendanceStatus.PRESENT)
    )

    with caplog.at_level(logging.WARNING):
        service.delete_user(current_role=Role.ADMIN, current_user_id="admin-1", user_id=user.id)

    assert service.list_users() == []
    assert [r.employee_id for r in attendance.list()] == [user.id]
    assert "orphaned" in caplog.text


def test_change_password_rejects_non_string_values(service):
    user = _add(service)

    with pytest.raises(ValidationError):
        service.change_password(current_user_id=user.id, user_id=user.id, current_password=123456, new_password="fresh1")
    with pytest.raises(ValidationError):
        service.change_password(current_user_id=user.id, user_id=user.id, current_password="emp123", new_password=None)


def test_update_rejects_wrong_types_and_bad_join_date(service):
    user = _add(service)

    for payload in ({"department": ["Eng"]}, {"salary": "100"}, {"joinDate": "yesterday"}):
        with pytest.raises(ValidationError):
            service.update_user(current_role=Role.ADMIN, current_user_id="admin-1", user_id=user.id, payload=payload)

    assert service.get_user(user.id).department == ""
