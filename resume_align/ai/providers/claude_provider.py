from __future__ import annotations

import os
from typing import Optional

from anthropic import AsyncAnthropic


class ClaudeProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 0,
        temperature: float = 0.1,
    ):
        self._model = model
        self._temperature = temperature
        key = (api_key or os.getenv("ANTHROPIC_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("ANTHROPIC_API_KEY is missing")

        self._client = AsyncAnthropic(api_key=key, timeout=timeout_s, max_retries=max_retries)

    @property
    def model(self) -> str:
        return self._model

    async def complete_json(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: int = 900,
    ) -> str:
        response = await self._client.messages.create(
            model=self._model,
            max_tokens=max_output_tokens,
            temperature=self._temperature,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        parts = [block.text for block in response.content if getattr(block, "type", "") == "text"]
        return "".join(parts)

    async def aclose(self) -> None:
        await self._client.close()
