from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PayBreakdown:
    basic_salary: float
    bonus: float
    deductions: float
    tax: float
    net_salary: float


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_salary(self, *, basic_salary: float, bonus: float, deductions: float, tax: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def monthly_breakdown(self, *, annual_salary: float, bonus: float = 0) -> PayBreakdown:
        raise NotImplementedError
