from __future__ import annotations

from datetime import time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class HalfDayStrategy(AttendanceStrategy):
    """Short day: checkout downgrades to half-day whatever the check-in status was."""

    def decide_checkin(self, *, check_in: time) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_checkout(self, *, current: AttendanceStatus, hours_worked: float) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY)
