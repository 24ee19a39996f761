from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note: the service layer depends on this interface, not on a concrete store.
    """

    def get(self, record_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def list(self, predicate: Optional[Callable[[User], bool]] = None) -> Sequence[User]:
        raise NotImplementedError

    def create(self, record: User) -> User:
        raise NotImplementedError

    def update(self, record_id: str, changes: Dict[str, Any]) -> User:
        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        raise NotImplementedError
