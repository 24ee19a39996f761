SECRET_KEY = "test-secret"

TOKEN_TTL_SECONDS = 24 * 60 * 60

STORE_BACKEND = "memory"
STORE_PATH = None

# Cheap hashes keep the suite fast
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
PASSWORD_MIN_LENGTH = 4

PORT = 3000
DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_SEED = True
