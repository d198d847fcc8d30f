import os
from typing import Optional

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Dotted settings module for APP_ENV; anything unknown means development."""
    env = (env or os.getenv("APP_ENV", "development")).lower()
    return _ENV_MODULES.get(env, "config.development")
