import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = _get_env(name)
    if raw is None:
        return default
    values = [item.strip() for item in raw.split(",")]
    clean = tuple(item for item in values if item)
    return clean or default


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    sentry_dsn: Optional[str] = None
    cors_allowed_origins: Tuple[str, ...] = ("*",)
    max_upload_bytes: int = 5 * 1024 * 1024
    min_words: int = 200
    max_words: int = 800
    feedback_top_n: int = 8


def load_settings() -> Settings:
    """Build settings from the process environment."""
    return Settings(
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        sentry_dsn=_get_env("SENTRY_DSN"),
        cors_allowed_origins=_get_env_list("CORS_ALLOWED_ORIGINS", ("*",)),
        max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 5 * 1024 * 1024),
        min_words=_get_env_int("CV_MIN_WORDS", 200),
        max_words=_get_env_int("CV_MAX_WORDS", 800),
        feedback_top_n=_get_env_int("FEEDBACK_TOP_N", 8),
    )


settings = load_settings()
