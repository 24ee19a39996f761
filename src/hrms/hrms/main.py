from __future__ import annotations

import importlib
import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .announcements.controller import register as register_announcements
from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import build_container
from .core.constants import DEFAULT_PASSWORD_MIN_LENGTH, DEFAULT_TOKEN_TTL_SECONDS
from .database.bootstrap import seed_demo_data
from .database.connection import StoreConfig, open_store
from .database.store import KeyValueStore
from .files.controller import register as register_files
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)


def register_health(app: Flask) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()})


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> dict:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {name: getattr(settings, name) for name in dir(settings) if name.isupper()}
    values["SETTINGS_MODULE"] = settings_module
    values.update(overrides or {})
    return values


def create_app(
    settings_overrides: Optional[Mapping[str, Any]] = None,
    *,
    store: Optional[KeyValueStore] = None,
) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(settings_overrides)

    configure_logging(str(settings.get("LOG_LEVEL", "INFO")).upper())

    app = Flask(__name__)
    app.config.from_mapping(settings)
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))

    if store is None:
        store = open_store(StoreConfig(backend=settings.get("STORE_BACKEND", "memory"), path=settings.get("STORE_PATH")))

    container = build_container(
        store=store,
        secret_key=settings["SECRET_KEY"],
        token_ttl_seconds=int(settings.get("TOKEN_TTL_SECONDS", DEFAULT_TOKEN_TTL_SECONDS)),
        password_hash_method=settings.get("PASSWORD_HASH_METHOD"),
        password_min_length=int(settings.get("PASSWORD_MIN_LENGTH", DEFAULT_PASSWORD_MIN_LENGTH)),
    )
    app.extensions["hrms"] = container

    if settings.get("AUTO_SEED"):
        seed_demo_data(container)

    register_error_handlers(app)
    register_health(app)
    register_users(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_payroll(app, container)
    register_files(app, container)
    register_announcements(app, container)

    logger.info(
        "App ready (settings=%s, store=%s)",
        settings["SETTINGS_MODULE"],
        type(store).__name__,
    )
    return app


if __name__ == "__main__":
    application = create_app()
    application.run(port=int(application.config.get("PORT", 3000)))
