from __future__ import annotations

from ..core.constants import LEAVES_KEY
from ..database.collection import Collection
from ..database.store import KeyValueStore
from .model import LeaveRequest
from .repository import LeaveRepository


class StoreLeaveRepository(Collection[LeaveRequest], LeaveRepository):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, LEAVES_KEY, LeaveRequest, label="Leave request")
