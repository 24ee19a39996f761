from __future__ import annotations

import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(prefix: str = "id") -> str:
    """Timestamp plus random base-36 suffix, e.g. ``id-1735689600000-k3j9x0a1b``.

    Unique with very high probability; collisions are not checked.
    """
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(9))
    return f"{prefix}-{int(time.time() * 1000)}-{suffix}"
