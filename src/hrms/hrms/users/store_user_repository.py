from __future__ import annotations

from typing import Optional

from ..core.constants import USERS_KEY
from ..database.collection import Collection
from ..database.store import KeyValueStore
from .model import User
from .repository import UserRepository


class StoreUserRepository(Collection[User], UserRepository):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, USERS_KEY, User, label="User")

    def get_by_email(self, email: str) -> Optional[User]:
        # Exact, case-sensitive match.
        return self.find_one(lambda u: u.email == email)
