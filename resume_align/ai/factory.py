from __future__ import annotations

from resume_align.ai.config import AIConfig, load_ai_configs
from resume_align.ai.types import AIClient
from resume_align.core.config import Settings

from resume_align.ai.providers.openai_provider import OpenAIProvider
from resume_align.ai.providers.claude_provider import ClaudeProvider
from resume_align.ai.providers.gemini_provider import GeminiProvider


def get_ai_client(cfg: AIConfig, settings: Settings) -> AIClient:
    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
        )

    if cfg.provider == "claude":
        return ClaudeProvider(model=cfg.model, api_key=settings.anthropic_api_key)

    if cfg.provider == "gemini":
        return GeminiProvider(model=cfg.model, api_key=settings.google_api_key)

    raise ValueError(f"Unsupported AI provider '{cfg.provider}'")


def build_ai_clients(settings: Settings) -> dict[str, AIClient]:
    return {role: get_ai_client(cfg, settings) for role, cfg in load_ai_configs(settings).items()}
