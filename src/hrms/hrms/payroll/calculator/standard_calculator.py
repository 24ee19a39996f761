from __future__ import annotations

import math

from .base import PayBreakdown, PayrollCalculator


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: net = basic + bonus - deductions - tax.

    Monthly basic is a twelfth of the annual salary, with 5% deductions and 15%
    tax taken from it (both floored to whole units).
    """

    deduction_rate = 0.05
    tax_rate = 0.15

    def net_salary(self, *, basic_salary: float, bonus: float, deductions: float, tax: float) -> float:
        return basic_salary + bonus - deductions - tax

    def monthly_breakdown(self, *, annual_salary: float, bonus: float = 0) -> PayBreakdown:
        basic = annual_salary / 12
        deductions = math.floor(basic * self.deduction_rate)
        tax = math.floor(basic * self.tax_rate)
        net = self.net_salary(basic_salary=basic, bonus=bonus, deductions=deductions, tax=tax)
        return PayBreakdown(
            basic_salary=_round_half_up(basic),
            bonus=bonus,
            deductions=deductions,
            tax=tax,
            net_salary=_round_half_up(net),
        )
