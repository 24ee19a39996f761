from datetime import time

from src.hrms.hrms.attendance.factory import AttendanceStrategyFactory
from src.hrms.hrms.attendance.strategies.half_day_strategy import HalfDayStrategy
from src.hrms.hrms.attendance.strategies.late_strategy import LateStrategy
from src.hrms.hrms.attendance.strategies.normal_strategy import NormalStrategy
from src.hrms.hrms.core.enums import AttendanceStatus


def test_factory_checkin_before_ten_is_normal():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(check_in=time(9, 59))

    assert isinstance(strategy, NormalStrategy)
    assert strategy.decide_checkin(check_in=time(9, 59)).status == AttendanceStatus.PRESENT


def test_factory_checkin_at_ten_is_late():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(check_in=time(10, 0))

    assert isinstance(strategy, LateStrategy)
    assert strategy.decide_checkin(check_in=time(10, 0)).status == AttendanceStatus.LATE


def test_factory_short_day_downgrades_to_half_day():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkout(hours_worked=4.9)

    assert isinstance(strategy, HalfDayStrategy)
    assert strategy.decide_checkout(current=AttendanceStatus.LATE, hours_worked=4.9).status == AttendanceStatus.HALF_DAY


def test_factory_full_day_keeps_status():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkout(hours_worked=5.0)

    assert isinstance(strategy, NormalStrategy)
    assert strategy.decide_checkout(current=AttendanceStatus.LATE, hours_worked=5.0).status == AttendanceStatus.LATE
