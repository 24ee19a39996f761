import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", str(24 * 60 * 60)))

STORE_BACKEND = os.getenv("STORE_BACKEND", "json")
STORE_PATH = os.getenv("STORE_PATH", "instance/hrms_store.json")

PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD") or None
PASSWORD_MIN_LENGTH = int(os.getenv("PASSWORD_MIN_LENGTH", "4"))

PORT = int(os.getenv("PORT", "3000"))
DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "0")))
