from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..common.records import to_wire
from ..core.enums import Role, UserStatus


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    ``password`` always holds a salted hash, never plaintext.
    """

    id: str
    name: str
    email: str
    password: str
    role: Role = Role.EMPLOYEE
    department: str = ""
    position: str = ""
    phone: str = ""
    avatar: str = ""
    join_date: str = ""
    salary: float = 0
    status: UserStatus = UserStatus.ACTIVE

    def to_public(self) -> Dict[str, Any]:
        """Wire shape safe to send to clients (no password)."""
        data = to_wire(self)
        data.pop("password", None)
        return data
