"""Backup the JSON store.

Note: Only the ``json`` backend has anything on disk; the in-memory store
disappears with the process.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    if settings.STORE_BACKEND != "json":
        raise SystemExit(f"Nothing to back up: STORE_BACKEND is {settings.STORE_BACKEND!r}")

    source = Path(settings.STORE_PATH)
    if not source.exists():
        raise SystemExit(f"Store file not found: {source}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"hrms_store_{ts}.json"
    shutil.copy2(source, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
