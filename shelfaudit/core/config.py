"""Core audit configuration.

Core config is side-effect free: it does not load dotenv files.
"""

import os
from dataclasses import dataclass

from .text import LANGUAGES

DEFAULT_LANGUAGE = "cs"
DEFAULT_MIN_DESCRIPTION_LENGTH = 100
DEFAULT_NEAR_DUPLICATE_LIMIT = 500
DEFAULT_NEAR_DUPLICATE_THRESHOLD = 0.8


@dataclass(frozen=True)
class AuditConfig:
    expected_language: str = DEFAULT_LANGUAGE
    min_description_length: int = DEFAULT_MIN_DESCRIPTION_LENGTH
    near_duplicate_limit: int = DEFAULT_NEAR_DUPLICATE_LIMIT
    near_duplicate_threshold: float = DEFAULT_NEAR_DUPLICATE_THRESHOLD

    def __post_init__(self) -> None:
        validate_language(self.expected_language)
        if self.min_description_length < 0:
            raise ValueError("min_description_length must be zero or greater.")
        if self.near_duplicate_limit < 0:
            raise ValueError("near_duplicate_limit must be zero or greater.")
        if not 0 <= self.near_duplicate_threshold <= 1:
            raise ValueError("near_duplicate_threshold must be between 0 and 1.")


def validate_language(language: str) -> str:
    if language not in LANGUAGES:
        raise ValueError(f"Unsupported language {language!r}. Expected one of: {', '.join(LANGUAGES)}.")
    return language


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {val!r}.") from exc


def config_from_env() -> AuditConfig:
    return AuditConfig(
        expected_language=os.getenv("SHELFAUDIT_LANGUAGE", DEFAULT_LANGUAGE).strip().lower() or DEFAULT_LANGUAGE,
        min_description_length=_env_int("SHELFAUDIT_MIN_DESCRIPTION_LENGTH", DEFAULT_MIN_DESCRIPTION_LENGTH),
        near_duplicate_limit=_env_int("SHELFAUDIT_NEAR_DUPLICATE_LIMIT", DEFAULT_NEAR_DUPLICATE_LIMIT),
    )


__all__ = ["AuditConfig", "config_from_env", "validate_language"]
