import os

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # WORKLOG_SETTINGS names a full module path and wins over APP_ENV
    explicit = os.getenv("WORKLOG_SETTINGS", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").lower()
    # Anything unrecognized falls back to development
    return _ENV_MODULES.get(env, "config.development")
