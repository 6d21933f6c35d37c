from __future__ import annotations

from dataclasses import dataclass

from resume_align.core.config import Settings

FAST_CRITIC = "critic_a"
ESCALATION_CRITICS = ("critic_b", "critic_c")
EDITOR = "editor"


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str


def load_ai_configs(cfg: Settings) -> dict[str, AIConfig]:
    """Provider/model per pipeline role. The fast critic comes first."""
    return {
        FAST_CRITIC: AIConfig(provider="gemini", model=cfg.critic_a_model),
        "critic_b": AIConfig(provider="openai", model=cfg.critic_b_model),
        "critic_c": AIConfig(provider="claude", model=cfg.critic_c_model),
        EDITOR: AIConfig(provider="openai", model=cfg.editor_model),
    }
