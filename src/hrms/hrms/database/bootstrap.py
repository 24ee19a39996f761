"""Demo data for a fresh store.

Seeding writes straight to the repositories (no permission checks) and only
touches keys that have never been written, so re-running it is harmless.
"""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta
from typing import Dict, List, Optional

from ..announcements.model import Announcement
from ..attendance.hours import worked_hours
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_clock
from ..container import Container
from ..core.enums import (
    AnnouncementPriority,
    AttendanceStatus,
    FileCategory,
    LeaveStatus,
    LeaveType,
    PayrollStatus,
    Role,
    UserStatus,
)
from ..files.model import UploadedFile
from ..leaves.model import LeaveRequest
from ..payroll.model import PayrollRecord
from ..users.model import User

logger = logging.getLogger(__name__)

ADMIN_PASSWORD = "admin123"
EMPLOYEE_PASSWORD = "emp123"

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

DEMO_USERS: List[Dict] = [
    dict(id="admin-1", name="Sarah Johnson", email="admin@hrms.com", role=Role.ADMIN,
         department="Management", position="HR Director", phone="+1 (555) 100-0001",
         avatar="👩‍💼", join_date="2020-01-15", salary=95000),
    dict(id="emp-1", name="James Wilson", email="james@hrms.com", role=Role.EMPLOYEE,
         department="Engineering", position="Senior Developer", phone="+1 (555) 200-0001",
         avatar="👨‍💻", join_date="2021-03-10", salary=78000),
    dict(id="emp-2", name="Emily Chen", email="emily@hrms.com", role=Role.EMPLOYEE,
         department="Design", position="UI/UX Designer", phone="+1 (555) 200-0002",
         avatar="👩‍🎨", join_date="2021-06-22", salary=72000),
    dict(id="emp-3", name="Michael Brown", email="michael@hrms.com", role=Role.EMPLOYEE,
         department="Marketing", position="Marketing Manager", phone="+1 (555) 200-0003",
         avatar="👨‍💼", join_date="2020-09-01", salary=68000),
    dict(id="emp-4", name="Sophia Martinez", email="sophia@hrms.com", role=Role.EMPLOYEE,
         department="Finance", position="Financial Analyst", phone="+1 (555) 200-0004",
         avatar="👩‍💻", join_date="2022-01-12", salary=65000),
    dict(id="emp-5", name="David Lee", email="david@hrms.com", role=Role.EMPLOYEE,
         department="Engineering", position="DevOps Engineer", phone="+1 (555) 200-0005",
         avatar="🧑‍💻", join_date="2022-04-18", salary=82000),
    dict(id="emp-6", name="Olivia Taylor", email="olivia@hrms.com", role=Role.EMPLOYEE,
         department="Human Resources", position="HR Specialist", phone="+1 (555) 200-0006",
         avatar="👩", join_date="2021-11-05", salary=58000, status=UserStatus.INACTIVE),
]

DEMO_LEAVES = [
    ("lv-1", "emp-1", LeaveType.SICK, "2024-12-20", "2024-12-22", "Flu and fever", LeaveStatus.APPROVED, "2024-12-18"),
    ("lv-2", "emp-2", LeaveType.ANNUAL, "2025-01-05", "2025-01-10", "Family vacation", LeaveStatus.PENDING, "2024-12-28"),
    ("lv-3", "emp-3", LeaveType.CASUAL, "2024-12-15", "2024-12-15", "Personal work", LeaveStatus.APPROVED, "2024-12-12"),
    ("lv-4", "emp-4", LeaveType.SICK, "2025-01-02", "2025-01-03", "Dental surgery", LeaveStatus.PENDING, "2024-12-30"),
    ("lv-5", "emp-5", LeaveType.ANNUAL, "2025-02-01", "2025-02-07", "International travel", LeaveStatus.PENDING, "2025-01-10"),
    ("lv-6", "emp-1", LeaveType.CASUAL, "2025-01-15", "2025-01-15", "Moving to new apartment", LeaveStatus.REJECTED, "2025-01-10"),
]

DEMO_FILES = [
    ("file-1", "emp-1", "resume_james.pdf", "application/pdf", "245 KB", FileCategory.RESUME, "2021-03-10"),
    ("file-2", "emp-1", "id_proof_james.jpg", "image/jpeg", "1.2 MB", FileCategory.ID_PROOF, "2021-03-10"),
    ("file-3", "emp-2", "resume_emily.pdf", "application/pdf", "198 KB", FileCategory.RESUME, "2021-06-22"),
    ("file-4", "emp-3", "contract_michael.pdf", "application/pdf", "512 KB", FileCategory.CONTRACT, "2020-09-01"),
    ("file-5", "emp-4", "certificate_sophia.pdf", "application/pdf", "389 KB", FileCategory.CERTIFICATE, "2022-01-12"),
]

DEMO_ANNOUNCEMENTS = [
    ("ann-1", "Holiday Notice",
     "Office will remain closed on Dec 25th and Jan 1st for Christmas and New Year celebrations. Enjoy the holidays!",
     "2024-12-20", AnnouncementPriority.HIGH),
    ("ann-2", "Annual Performance Review",
     "Annual performance reviews will begin from January 15th. Please prepare your self-assessment forms.",
     "2025-01-05", AnnouncementPriority.MEDIUM),
    ("ann-3", "New Health Insurance Plan",
     "We have partnered with a new health insurance provider. Check your email for enrollment details.",
     "2025-01-02", AnnouncementPriority.MEDIUM),
    ("ann-4", "Team Building Event",
     "Join us for the quarterly team building event on Feb 10th at Central Park. Lunch will be provided.",
     "2025-01-20", AnnouncementPriority.LOW),
]


def ensure_demo_users(container: Container) -> int:
    """Create demo users whose email is not taken yet. Returns how many were added."""
    added = 0
    for demo in DEMO_USERS:
        if container.users_repo.get_by_email(demo["email"]) or container.users_repo.get(demo["id"]):
            continue
        password = ADMIN_PASSWORD if demo["role"] == Role.ADMIN else EMPLOYEE_PASSWORD
        container.users_repo.create(User(password=container.user_service.hash_password(password), **demo))
        added += 1
    return added


def _demo_attendance(employee_ids: List[str], today: date, rng: random.Random) -> List[AttendanceRecord]:
    records: List[AttendanceRecord] = []
    weights = ("present", "present", "present", "late", "present", "half-day")
    for offset in range(15):
        day = today - timedelta(days=offset)
        if day.weekday() >= 5:
            continue
        for emp_id in employee_ids:
            kind = "absent" if offset == 0 and emp_id == employee_ids[-1] else rng.choice(weights)
            if kind == "absent":
                records.append(AttendanceRecord(
                    id=f"att-{emp_id}-{day.isoformat()}", employee_id=emp_id, date=day.isoformat(),
                    status=AttendanceStatus.ABSENT,
                ))
                continue

            in_hour = 10 if kind == "late" else 9
            check_in = f"{in_hour:02d}:{rng.randrange(30):02d}"
            span = 4 if kind == "half-day" else 8
            check_out = f"{in_hour + span:02d}:{rng.randrange(60):02d}"
            records.append(AttendanceRecord(
                id=f"att-{emp_id}-{day.isoformat()}",
                employee_id=emp_id,
                date=day.isoformat(),
                status=AttendanceStatus(kind),
                check_in=check_in,
                check_out=check_out,
                hours_worked=worked_hours(parse_clock(check_in), parse_clock(check_out)),
            ))
    return records


def _demo_payroll(container: Container, employees: List[User], today: date, rng: random.Random) -> List[PayrollRecord]:
    calculator = container.payroll_service.calculator
    records: List[PayrollRecord] = []
    for emp in employees:
        for back in range(3):
            month_index = (today.month - 1 - back) % 12
            year = today.year - 1 if today.month - 1 - back < 0 else today.year
            pay = calculator.monthly_breakdown(annual_salary=emp.salary, bonus=rng.randrange(500))
            records.append(PayrollRecord(
                id=f"pay-{emp.id}-{year}-{month_index}",
                employee_id=emp.id,
                month=MONTHS[month_index],
                year=year,
                basic_salary=pay.basic_salary,
                bonus=pay.bonus,
                deductions=pay.deductions,
                tax=pay.tax,
                net_salary=pay.net_salary,
                status=PayrollStatus.PENDING if back == 0 else PayrollStatus.PAID,
                paid_on="" if back == 0 else f"{year}-{month_index + 1:02d}-28",
            ))
    return records


def seed_demo_data(container: Container, *, today: Optional[date] = None, rng: Optional[random.Random] = None) -> None:
    today = today or date.today()
    rng = rng or random.Random()

    if not container.users_repo.is_initialized():
        ensure_demo_users(container)

    employees = [u for u in container.users_repo.list() if u.role == Role.EMPLOYEE]
    employee_ids = [u.id for u in employees]

    if not container.attendance_repo.is_initialized():
        container.attendance_repo.replace_all(_demo_attendance(employee_ids, today, rng) if employee_ids else [])
    if not container.leaves_repo.is_initialized():
        container.leaves_repo.replace_all([
            LeaveRequest(id=i, employee_id=e, leave_type=t, start_date=s, end_date=en, reason=r, status=st, applied_on=a)
            for i, e, t, s, en, r, st, a in DEMO_LEAVES
        ])
    if not container.payroll_repo.is_initialized():
        container.payroll_repo.replace_all(_demo_payroll(container, employees, today, rng))
    if not container.files_repo.is_initialized():
        container.files_repo.replace_all([
            UploadedFile(id=i, employee_id=e, name=n, mime_type=t, size=s, category=c, uploaded_on=u)
            for i, e, n, t, s, c, u in DEMO_FILES
        ])
    if not container.announcements_repo.is_initialized():
        container.announcements_repo.replace_all([
            Announcement(id=i, title=t, message=m, published_on=d, priority=p)
            for i, t, m, d, p in DEMO_ANNOUNCEMENTS
        ])

    logger.info("Demo data ready (%d users)", len(container.users_repo.list()))
