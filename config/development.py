import os

from .config import Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "kesiswaan_db"),
}

STORE_BACKEND = Config.STORE_BACKEND

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also seed demo data on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_DIR = Config.LOG_DIR

RESOLVER_PERSIST_LINKS = Config.RESOLVER_PERSIST_LINKS
RESOLVER_ALLOW_BOOTSTRAP = Config.RESOLVER_ALLOW_BOOTSTRAP
RESOLVER_MATCH_EMAIL_NIS = Config.RESOLVER_MATCH_EMAIL_NIS
RESOLVER_EMAIL_NIS_MIN_LENGTH = Config.RESOLVER_EMAIL_NIS_MIN_LENGTH
PLACEHOLDER_NIS_PREFIX = Config.PLACEHOLDER_NIS_PREFIX
