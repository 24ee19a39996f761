import os
from typing import Optional

# APP_ENV value -> settings module
SETTINGS_MODULES = {
    "development": "config.development",
    "dev": "config.development",
    "local": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "ci": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Settings module for ``env`` (default: APP_ENV, else development).

    An unknown name raises ``ValueError`` rather than silently running with
    development settings.
    """
    name = (env if env is not None else os.getenv("APP_ENV") or "development").strip().lower()
    try:
        return SETTINGS_MODULES[name]
    except KeyError:
        allowed = ", ".join(sorted(SETTINGS_MODULES))
        raise ValueError(f"Unknown APP_ENV {name!r} (expected one of: {allowed})")
