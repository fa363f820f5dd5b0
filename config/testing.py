import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "kesiswaan_test"),
}

STORE_BACKEND = "memory"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False

LOG_LEVEL = "WARNING"
LOG_DIR = None

RESOLVER_PERSIST_LINKS = True
RESOLVER_ALLOW_BOOTSTRAP = True
RESOLVER_MATCH_EMAIL_NIS = True
RESOLVER_EMAIL_NIS_MIN_LENGTH = 4
PLACEHOLDER_NIS_PREFIX = "SIS"
