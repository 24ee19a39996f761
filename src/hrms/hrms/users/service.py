from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..auth.tokens import SessionClaims, TokenService
from ..common.datetime_utils import today_iso
from ..common.ids import generate_id
from ..common.records import changes_from_wire, from_wire, require_known_fields
from ..common.validators import (
    require_fields,
    require_iso_date,
    require_min_length,
    require_non_empty,
    require_non_negative,
)
from ..core.constants import DEFAULT_PASSWORD_MIN_LENGTH
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

AVATARS = ("👨‍💻", "👩‍💻", "🧑‍💻", "👨‍💼", "👩‍💼", "🧑‍💼", "👨‍🔬", "👩‍🎨")

# Fields only an admin may change on a user record.
ADMIN_ONLY_FIELDS = ("role", "status", "salary", "joinDate")


class EmployeeOwnedRecords(Protocol):
    """Any collection whose records carry an ``employee_id``."""

    def count(self, predicate: Optional[Callable[[Any], bool]] = None) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class LoginResult:
    user: User
    token: str


class AuthService:
    """Use case: authenticate user (login) and manage session tokens."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def authenticate(self, email: str, password: str) -> LoginResult:
        if not isinstance(email, str) or not isinstance(password, str):
            logger.warning("Login failed: malformed credentials")
            raise AuthenticationError("Invalid credentials")

        user = self._users.get_by_email(email)
        if not user:
            logger.warning("Login failed: unknown email")
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password, password)
        except (TypeError, ValueError):
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            logger.warning("Login failed for user %s", user.id)
            raise AuthenticationError("Invalid credentials")

        logger.info("User %s logged in", user.id)
        return LoginResult(user=user, token=self._tokens.issue(user))

    def validate(self, token: Optional[str]) -> SessionClaims:
        return self._tokens.validate(token)

    def logout(self, token: Optional[str]) -> None:
        claims = self._tokens.revoke(token)
        logger.info("User %s logged out", claims.user_id)

    def current_user(self, claims: SessionClaims) -> User:
        user = self._users.get(claims.user_id)
        if not user:
            raise NotFoundError("User not found")
        return user


class UserService:
    """Use case: manage users (admin) and profiles (self)."""

    def __init__(
        self,
        users: UserRepository,
        *,
        dependents: Sequence[EmployeeOwnedRecords] = (),
        password_hash_method: Optional[str] = None,
        password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH,
    ):
        self._users = users
        self._dependents = list(dependents)
        self._hash_method = password_hash_method
        self._password_min_length = int(password_min_length)

    def hash_password(self, password: str) -> str:
        if not isinstance(password, str):
            raise ValidationError("password must be a string")
        require_min_length(password, "password", self._password_min_length)
        if self._hash_method:
            return generate_password_hash(password, method=self._hash_method)
        return generate_password_hash(password)

    def list_users(self) -> Sequence[User]:
        return self._users.list()

    def get_user(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def _check_email_free(self, email: str, *, except_id: Optional[str] = None) -> None:
        existing = self._users.get_by_email(email)
        if existing and existing.id != except_id:
            raise ConflictError("User with this email already exists")

    @staticmethod
    def _validate_fields(payload: Mapping[str, Any]) -> None:
        if "name" in payload:
            require_non_empty(payload["name"], "name")
        if "email" in payload:
            require_non_empty(payload["email"], "email")
        if "salary" in payload:
            require_non_negative(payload["salary"], "salary")
        if "joinDate" in payload:
            require_iso_date(payload["joinDate"], "joinDate")

    def create_user(self, *, current_role: Role, payload: Mapping[str, Any]) -> User:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can add users")

        require_fields(payload, ("name", "email", "password"))
        self._validate_fields(payload)
        self._check_email_free(payload["email"])

        defaults = {
            "role": Role.EMPLOYEE.value,
            "status": "active",
            "avatar": random.choice(AVATARS),
            "joinDate": today_iso(),
            "salary": 0,
        }
        require_known_fields(User, payload)
        data = {**defaults, **payload}
        if not data.get("id"):
            data["id"] = generate_id()
        if self._users.get(data["id"]):
            raise ConflictError("User with this id already exists")
        data["password"] = self.hash_password(payload["password"])

        user = self._users.create(from_wire(User, data))
        logger.info("User %s created (%s)", user.id, user.role.value)
        return user

    def update_user(
        self,
        *,
        current_role: Role,
        current_user_id: str,
        user_id: str,
        payload: Mapping[str, Any],
    ) -> User:
        is_admin = current_role == Role.ADMIN
        if not is_admin and current_user_id != user_id:
            raise AuthorizationError("You can only edit your own profile")

        changes = changes_from_wire(User, payload)
        self._validate_fields(payload)

        current = self.get_user(user_id).to_public()
        if not is_admin:
            # Echoed values are fine; actual changes are not.
            touched = [k for k in ADMIN_ONLY_FIELDS if k in payload and payload[k] != current.get(k)]
            if touched:
                raise AuthorizationError(f"Only admins can change: {', '.join(touched)}")
        if "email" in changes:
            self._check_email_free(changes["email"], except_id=user_id)
        if "password" in changes:
            changes["password"] = self.hash_password(changes["password"])

        user = self._users.update(user_id, changes)
        logger.info("User %s updated (%s)", user_id, ", ".join(sorted(changes)) or "no changes")
        return user

    def change_password(
        self,
        *,
        current_user_id: str,
        user_id: str,
        current_password: str,
        new_password: str,
    ) -> None:
        if current_user_id != user_id:
            raise AuthorizationError("You can only change your own password")
        if not isinstance(current_password, str) or not isinstance(new_password, str):
            raise ValidationError("currentPassword and newPassword must be strings")

        user = self.get_user(user_id)
        try:
            ok = check_password_hash(user.password, current_password)
        except (TypeError, ValueError):
            ok = False
        if not ok:
            raise ValidationError("Current password is incorrect")

        self._users.update(user_id, {"password": self.hash_password(new_password)})
        logger.info("User %s changed password", user_id)

    def delete_user(self, *, current_role: Role, current_user_id: str, user_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can delete users")
        if current_user_id == user_id:
            raise ValidationError("You cannot delete your own account")

        self._users.delete(user_id)

        # Dependent records are kept; their employeeId now dangles.
        orphaned = sum(d.count(lambda r: r.employee_id == user_id) for d in self._dependents)
        if orphaned:
            logger.warning("User %s deleted; %d dependent record(s) left orphaned", user_id, orphaned)
        else:
            logger.info("User %s deleted", user_id)
