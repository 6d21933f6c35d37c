from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


def looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def _get_secret(name: str) -> str | None:
    raw = (_get_env(name) or "").strip()
    if not raw or looks_like_placeholder(raw):
        return None
    return raw


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    trust_x_forwarded_for: bool
    fast_path_threshold: int
    critic_timeout_ms: int
    editor_timeout_ms: int
    openai_api_key: str | None
    openai_base_url: str | None
    anthropic_api_key: str | None
    google_api_key: str | None
    critic_a_model: str
    critic_b_model: str
    critic_c_model: str
    editor_model: str

    @property
    def llm_credentials_configured(self) -> bool:
        return bool(self.openai_api_key and self.anthropic_api_key and self.google_api_key)


def load_settings() -> Settings:
    return Settings(
        api_key=_get_env("API_KEY"),
        rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
        rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
        log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
        sentry_dsn=_get_env("SENTRY_DSN"),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:3000",
                "http://127.0.0.1:3000",
                "http://localhost:5173",
            ],
        ),
        cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
        trust_x_forwarded_for=_get_env_bool("TRUST_X_FORWARDED_FOR", False),
        fast_path_threshold=_get_env_int("FAST_PATH_THRESHOLD", 88),
        critic_timeout_ms=_get_env_int("CRITIC_TIMEOUT_MS", 3500),
        editor_timeout_ms=_get_env_int("EDITOR_TIMEOUT_MS", 15000),
        openai_api_key=_get_secret("OPENAI_API_KEY"),
        openai_base_url=_get_env("OPENAI_BASE_URL"),
        anthropic_api_key=_get_secret("ANTHROPIC_API_KEY"),
        google_api_key=_get_secret("GOOGLE_API_KEY"),
        critic_a_model=_get_env("CRITIC_A_MODEL", "gemini-2.0-flash") or "gemini-2.0-flash",
        critic_b_model=_get_env("CRITIC_B_MODEL", "gpt-4o-mini") or "gpt-4o-mini",
        critic_c_model=_get_env("CRITIC_C_MODEL", "claude-3-5-haiku-latest") or "claude-3-5-haiku-latest",
        editor_model=_get_env("EDITOR_MODEL", "gpt-4.1-mini") or "gpt-4.1-mini",
    )


settings = load_settings()

if not 0 <= settings.fast_path_threshold <= 100:
    raise RuntimeError("FAST_PATH_THRESHOLD must be a percentage between 0 and 100.")

if settings.critic_timeout_ms <= 0 or settings.editor_timeout_ms <= 0:
    raise RuntimeError("CRITIC_TIMEOUT_MS and EDITOR_TIMEOUT_MS must be positive.")
