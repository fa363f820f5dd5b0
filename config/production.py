import os

from .config import Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "kesiswaan_db"),
}

STORE_BACKEND = "mysql"

DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

RESOLVER_PERSIST_LINKS = True
RESOLVER_ALLOW_BOOTSTRAP = Config.RESOLVER_ALLOW_BOOTSTRAP
RESOLVER_MATCH_EMAIL_NIS = Config.RESOLVER_MATCH_EMAIL_NIS
RESOLVER_EMAIL_NIS_MIN_LENGTH = Config.RESOLVER_EMAIL_NIS_MIN_LENGTH
PLACEHOLDER_NIS_PREFIX = Config.PLACEHOLDER_NIS_PREFIX
