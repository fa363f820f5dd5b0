import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "kunci_rahasia_kesiswaan"

    # Konfigurasi DB
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "kesiswaan_db")

    # "mysql" or "memory"
    STORE_BACKEND = os.environ.get("STORE_BACKEND", "mysql").lower()

    # Dev helpers
    AUTO_INIT_DB = env_flag("AUTO_INIT_DB")
    AUTO_SEED_DB = env_flag("AUTO_SEED_DB")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_DIR = os.environ.get("LOG_DIR") or None

    # Identity resolver
    RESOLVER_PERSIST_LINKS = env_flag("RESOLVER_PERSIST_LINKS", "1")
    RESOLVER_ALLOW_BOOTSTRAP = env_flag("RESOLVER_ALLOW_BOOTSTRAP", "1")
    RESOLVER_MATCH_EMAIL_NIS = env_flag("RESOLVER_MATCH_EMAIL_NIS", "1")
    RESOLVER_EMAIL_NIS_MIN_LENGTH = int(os.environ.get("RESOLVER_EMAIL_NIS_MIN_LENGTH", "4"))
    PLACEHOLDER_NIS_PREFIX = os.environ.get("PLACEHOLDER_NIS_PREFIX", "SIS")


SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}

DEBUG = env_flag("DEBUG", "1")
