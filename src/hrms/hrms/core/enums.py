from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for permission checks."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    """Attendance status as stored and served."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half-day"


class LeaveType(str, Enum):
    SICK = "sick"
    CASUAL = "casual"
    ANNUAL = "annual"
    MATERNITY = "maternity"
    OTHER = "other"


class LeaveStatus(str, Enum):
    """Leave approval flow: pending is initial, approved/rejected are terminal."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PayrollStatus(str, Enum):
    """Payroll flow, strictly forward: pending -> processed -> paid."""

    PENDING = "pending"
    PROCESSED = "processed"
    PAID = "paid"


class FileCategory(str, Enum):
    RESUME = "resume"
    ID_PROOF = "id-proof"
    CERTIFICATE = "certificate"
    CONTRACT = "contract"
    OTHER = "other"


class AnnouncementPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
