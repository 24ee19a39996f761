from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..core.constants import HALF_DAY_HOURS, LATE_CHECKIN_HOUR
from .strategies.base import AttendanceStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    late_hour: int = LATE_CHECKIN_HOUR
    half_day_hours: float = HALF_DAY_HOURS

    def for_checkin(self, *, check_in: time) -> AttendanceStrategy:
        if check_in.hour >= self.late_hour:
            return LateStrategy()
        return NormalStrategy()

    def for_checkout(self, *, hours_worked: float) -> AttendanceStrategy:
        if hours_worked < self.half_day_hours:
            return HalfDayStrategy()
        return NormalStrategy()
