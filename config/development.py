import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# 24h session tokens
TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", str(24 * 60 * 60)))

# "memory" keeps data in the process; "json" persists the key space to STORE_PATH
STORE_BACKEND = os.getenv("STORE_BACKEND", "json")
STORE_PATH = os.getenv("STORE_PATH", "instance/hrms_store.json")

PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD") or None
PASSWORD_MIN_LENGTH = int(os.getenv("PASSWORD_MIN_LENGTH", "4"))

PORT = int(os.getenv("PORT", "3000"))
DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Seed demo users and records into an empty store on startup
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "1")))
