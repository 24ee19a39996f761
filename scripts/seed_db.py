from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hrms.hrms.container import build_container
from src.hrms.hrms.database.bootstrap import seed_demo_data
from src.hrms.hrms.database.connection import StoreConfig, open_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = open_store(StoreConfig(backend=settings.STORE_BACKEND, path=settings.STORE_PATH))
    container = build_container(
        store=store,
        secret_key=settings.SECRET_KEY,
        password_hash_method=getattr(settings, "PASSWORD_HASH_METHOD", None),
    )

    seed_demo_data(container)

    counts = {key: len(store.get(key) or []) for key in store.keys()}
    print(f"OK: Seeded {settings.STORE_BACKEND} store ({settings.STORE_PATH or 'in memory'}) -> {counts}")


if __name__ == "__main__":
    main()
