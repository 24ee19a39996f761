from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class PayrollRecord:
    """Domain entity: one employee's pay for one month.

    ``net_salary`` is fixed when the record is created; ``paid_on`` is empty
    until the record moves to paid.
    """

    id: str
    employee_id: str
    month: str
    year: int
    basic_salary: float
    bonus: float
    deductions: float
    tax: float
    net_salary: float
    status: PayrollStatus = PayrollStatus.PENDING
    paid_on: str = ""
