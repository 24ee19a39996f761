from __future__ import annotations

from datetime import time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in; checkout keeps whatever status the day already has."""

    def decide_checkin(self, *, check_in: time) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_checkout(self, *, current: AttendanceStatus, hours_worked: float) -> StatusDecision:
        return StatusDecision(status=current)
