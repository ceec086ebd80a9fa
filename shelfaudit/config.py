"""Environment-backed settings for the HTTP adapter.

Only the server reads these. Audit thresholds live in
``shelfaudit.core.config`` so the engine can run without any environment.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_MAX_UPLOAD_BYTES = 20 * 1024 * 1024
LOG_VERBOSITIES = frozenset({"low", "medium", "high", "extrahigh"})


@dataclass(frozen=True)
class Settings:
    app_name: str
    debug: bool
    log_verbosity: str
    cors_allow_origins: tuple[str, ...]
    max_upload_bytes: int
    host: str
    port: int


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: frozenset[str]) -> str:
    normalized = (os.getenv(name) or "").strip().lower()
    return normalized if normalized in allowed else default


def _env_positive_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw.isdigit():
        return default
    return int(raw) or default


def _env_origins(name: str) -> tuple[str, ...]:
    origins = tuple(origin.strip() for origin in os.getenv(name, "*").split(",") if origin.strip())
    return origins or ("*",)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        app_name=os.getenv("APP_NAME", "ShelfAudit"),
        debug=_env_bool("DEBUG"),
        log_verbosity=_env_choice("LOG_VERBOSITY", "medium", allowed=LOG_VERBOSITIES),
        cors_allow_origins=_env_origins("CORS_ALLOW_ORIGINS"),
        max_upload_bytes=_env_positive_int("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_env_positive_int("PORT", 8000),
    )


__all__ = ["DEFAULT_MAX_UPLOAD_BYTES", "LOG_VERBOSITIES", "Settings", "get_settings"]
