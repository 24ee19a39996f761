from __future__ import annotations

from ..core.constants import PAYROLL_KEY
from ..database.collection import Collection
from ..database.store import KeyValueStore
from .model import PayrollRecord
from .repository import PayrollRepository


class StorePayrollRepository(Collection[PayrollRecord], PayrollRepository):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, PAYROLL_KEY, PayrollRecord, label="Payroll record")
