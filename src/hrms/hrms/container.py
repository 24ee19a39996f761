from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .announcements.service import AnnouncementService
from .announcements.store_announcement_repository import StoreAnnouncementRepository
from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceService
from .attendance.store_attendance_repository import StoreAttendanceRepository
from .auth.tokens import TokenDenylist, TokenService
from .core.constants import DEFAULT_PASSWORD_MIN_LENGTH, DEFAULT_TOKEN_TTL_SECONDS
from .database.store import KeyValueStore
from .files.service import FileService
from .files.store_file_repository import StoreFileRepository
from .leaves.service import LeaveService
from .leaves.store_leave_repository import StoreLeaveRepository
from .payroll.service import PayrollService
from .payroll.store_payroll_repository import StorePayrollRepository
from .users.service import AuthService, UserService
from .users.store_user_repository import StoreUserRepository


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    users_repo: StoreUserRepository
    attendance_repo: StoreAttendanceRepository
    leaves_repo: StoreLeaveRepository
    payroll_repo: StorePayrollRepository
    files_repo: StoreFileRepository
    announcements_repo: StoreAnnouncementRepository

    token_service: TokenService
    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    leave_service: LeaveService
    payroll_service: PayrollService
    file_service: FileService
    announcement_service: AnnouncementService


def build_container(
    *,
    store: KeyValueStore,
    secret_key: str,
    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
    password_hash_method: Optional[str] = None,
    password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH,
) -> Container:
    users_repo = StoreUserRepository(store)
    attendance_repo = StoreAttendanceRepository(store)
    leaves_repo = StoreLeaveRepository(store)
    payroll_repo = StorePayrollRepository(store)
    files_repo = StoreFileRepository(store)
    announcements_repo = StoreAnnouncementRepository(store)

    token_service = TokenService(secret_key, ttl_seconds=token_ttl_seconds, denylist=TokenDenylist())
    auth_service = AuthService(users_repo, token_service)
    user_service = UserService(
        users_repo,
        dependents=(attendance_repo, leaves_repo, payroll_repo, files_repo),
        password_hash_method=password_hash_method,
        password_min_length=password_min_length,
    )
    attendance_service = AttendanceService(
        attendance_repo,
        users_repo,
        strategy_factory=AttendanceStrategyFactory(),
    )
    leave_service = LeaveService(leaves_repo, users_repo)
    payroll_service = PayrollService(payroll_repo, users_repo)
    file_service = FileService(files_repo, users_repo)
    announcement_service = AnnouncementService(announcements_repo)

    return Container(
        store=store,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        payroll_repo=payroll_repo,
        files_repo=files_repo,
        announcements_repo=announcements_repo,
        token_service=token_service,
        auth_service=auth_service,
        user_service=user_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
        payroll_service=payroll_service,
        file_service=file_service,
        announcement_service=announcement_service,
    )
