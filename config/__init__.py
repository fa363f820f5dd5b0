import os


def get_settings_module() -> str:
    # Ambil lingkungan dari APP_ENV, default 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"

    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"

    # 3. Selain itu selalu Development
    return "config.development"
