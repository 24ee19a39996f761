from datetime import date

import pytest

from src.hrms.hrms.announcements.service import AnnouncementService
from src.hrms.hrms.announcements.store_announcement_repository import StoreAnnouncementRepository
from src.hrms.hrms.core.enums import AnnouncementPriority, FileCategory, Role
from src.hrms.hrms.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.hrms.hrms.database.store import InMemoryStore
from src.hrms.hrms.files.service import FileService, describe_size
from src.hrms.hrms.files.store_file_repository import StoreFileRepository
from src.hrms.hrms.users.model import User
from src.hrms.hrms.users.store_user_repository import StoreUserRepository


@pytest.fixture
def store():
    store = InMemoryStore()
    users = StoreUserRepository(store)
    users.create(User(id="emp-1", name="James", email="james@hrms.com", password="x"))
    users.create(User(id="emp-2", name="Emily", email="emily@hrms.com", password="x"))
    return store


@pytest.fixture
def files(store):
    return FileService(StoreFileRepository(store), StoreUserRepository(store))


def _upload(files, employee="emp-1", **overrides):
    payload = {"name": "resume.pdf", "type": "application/pdf", **overrides}
    return files.upload(current_role=Role.EMPLOYEE, current_user_id=employee, payload=payload)


@pytest.mark.parametrize(
    "num_bytes,label",
    [(512, "0.5 KB"), (250 * 1024, "250.0 KB"), (3 * 1024 * 1024 + 200 * 1024, "3.2 MB")],
)
def test_describe_size(num_bytes, label):
    assert describe_size(num_bytes) == label


def test_upload_defaults(files):
    uploaded = _upload(files, sizeBytes=2048)

    assert uploaded.employee_id == "emp-1"
    assert uploaded.category == FileCategory.OTHER
    assert uploaded.uploaded_on == date.today().isoformat()
    assert uploaded.size == "2.0 KB"
    assert uploaded.mime_type == "application/pdf"
    assert uploaded.data_url is None


def test_upload_keeps_given_size_label_and_category(files):
    uploaded = _upload(files, size="1.1 MB", category="resume", dataUrl="data:application/pdf;base64,AAAA")

    assert uploaded.size == "1.1 MB"
    assert uploaded.category == FileCategory.RESUME
    assert uploaded.data_url.startswith("data:")


@pytest.mark.parametrize(
    "overrides",
    [{"name": ""}, {"type": None}, {"category": "photo"}, {"owner": "emp-1"}, {"employeeId": "ghost"}],
)
def test_upload_validation(files, overrides):
    with pytest.raises((ValidationError, AuthorizationError)):
        _upload(files, **overrides)


def test_only_owner_or_admin_deletes(files):
    uploaded = _upload(files)

    with pytest.raises(AuthorizationError):
        files.delete_file(current_role=Role.EMPLOYEE, current_user_id="emp-2", file_id=uploaded.id)

    files.delete_file(current_role=Role.EMPLOYEE, current_user_id="emp-1", file_id=uploaded.id)
    assert files.list_files() == []

    with pytest.raises(NotFoundError):
        files.delete_file(current_role=Role.ADMIN, current_user_id="admin-1", file_id=uploaded.id)


def test_list_filters_by_category(files):
    _upload(files, category="contract")
    _upload(files, category="resume")

    assert [f.category for f in files.list_files(category="contract")] == [FileCategory.CONTRACT]
    with pytest.raises(ValidationError):
        files.list_files(category="photo")


def test_announcements_publish_and_delete(store):
    svc = AnnouncementService(StoreAnnouncementRepository(store))

    with pytest.raises(AuthorizationError):
        svc.publish(current_role=Role.EMPLOYEE, payload={"title": "t", "message": "m"})

    a = svc.publish(current_role=Role.ADMIN, payload={"title": "Office closed", "message": "Friday"})
    assert a.priority == AnnouncementPriority.MEDIUM
    assert a.published_on == date.today().isoformat()

    with pytest.raises(ValidationError):
        svc.publish(current_role=Role.ADMIN, payload={"title": "x", "message": "y", "priority": "urgent"})

    svc.delete(current_role=Role.ADMIN, announcement_id=a.id)
    assert svc.list_announcements() == []
    with pytest.raises(NotFoundError):
        svc.delete(current_role=Role.ADMIN, announcement_id=a.id)
