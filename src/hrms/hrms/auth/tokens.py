"""Stateless session tokens.

A token is a signed, timestamped payload produced with itsdangerous (the same
signing Flask uses for its session cookie). Any process holding the secret key
can validate any live token; no session table is kept. Early revocation is
handled by an optional in-process denylist keyed by token id.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Optional

from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer

from ..core.constants import DEFAULT_TOKEN_TTL_SECONDS, TOKEN_SALT
from ..core.enums import Role
from ..core.exceptions import UnauthorizedError
from ..users.model import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionClaims:
    """Decoded identity carried by a validated token."""

    user_id: str
    email: str
    role: Role
    token_id: str
    issued_at: datetime
    expires_at: float

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class TokenDenylist:
    """Revoked token ids, each kept only until the token would have expired."""

    def __init__(self, *, clock: Callable[[], float] = time.time):
        self._entries: Dict[str, float] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def add(self, token_id: str, *, expires_at: float) -> None:
        with self._lock:
            self._sweep()
            self._entries[token_id] = expires_at

    def contains(self, token_id: str) -> bool:
        with self._lock:
            expires_at = self._entries.get(token_id)
            return expires_at is not None and expires_at > self._clock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _sweep(self) -> None:
        now = self._clock()
        for token_id in [t for t, exp in self._entries.items() if exp <= now]:
            del self._entries[token_id]


class TokenService:
    def __init__(
        self,
        secret_key: str,
        *,
        ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
        denylist: Optional[TokenDenylist] = None,
    ):
        if not secret_key:
            raise ValueError("secret_key is required to sign session tokens")
        self._serializer = URLSafeTimedSerializer(secret_key, salt=TOKEN_SALT)
        self._ttl = int(ttl_seconds)
        self._denylist = denylist

    def issue(self, user: User) -> str:
        payload = {
            "userId": user.id,
            "email": user.email,
            "role": user.role.value,
            "jti": secrets.token_hex(8),
        }
        return self._serializer.dumps(payload)

    def validate(self, token: Optional[str]) -> SessionClaims:
        if not token:
            raise UnauthorizedError("Access token required")

        try:
            payload, issued_at = self._serializer.loads(token, max_age=self._ttl, return_timestamp=True)
        except SignatureExpired:
            raise UnauthorizedError("Token expired")
        except BadData:
            raise UnauthorizedError("Invalid token")

        try:
            claims = SessionClaims(
                user_id=str(payload["userId"]),
                email=str(payload["email"]),
                role=Role(payload["role"]),
                token_id=str(payload["jti"]),
                issued_at=issued_at,
                expires_at=issued_at.timestamp() + self._ttl,
            )
        except (KeyError, TypeError, ValueError):
            raise UnauthorizedError("Invalid token")

        if self._denylist is not None and self._denylist.contains(claims.token_id):
            raise UnauthorizedError("Token revoked")
        return claims

    def revoke(self, token: Optional[str]) -> SessionClaims:
        claims = self.validate(token)
        if self._denylist is None:
            logger.warning("Token revocation requested but no denylist is configured")
            return claims
        self._denylist.add(claims.token_id, expires_at=claims.expires_at)
        return claims
