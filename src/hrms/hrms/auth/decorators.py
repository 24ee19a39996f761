from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import g, request

from .tokens import SessionClaims, TokenService


def bearer_token() -> Optional[str]:
    """Token from an ``Authorization: Bearer <token>`` header, if any."""
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def make_login_required(tokens: TokenService):
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.claims = tokens.validate(bearer_token())
            return view(*args, **kwargs)

        return wrapper

    return login_required


def current_claims() -> SessionClaims:
    return g.claims
