import os
from typing import Optional

_SETTINGS_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Settings module for APP_ENV; anything unknown runs as development."""
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _SETTINGS_BY_ENV.get(env, "config.development")


def env_capacity(name: str, default: int) -> Optional[int]:
    """Roster capacity from the environment; empty, 'none' or 'unlimited' lifts the cap."""
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if raw.lower() in {"", "none", "unlimited"}:
        return None
    return int(raw)
