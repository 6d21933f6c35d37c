from __future__ import annotations

import os
from typing import Optional

from google import genai
from google.genai import types


class GeminiProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        temperature: float = 0.1,
    ):
        self._model = model
        self._temperature = temperature
        key = (api_key or os.getenv("GOOGLE_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("GOOGLE_API_KEY is missing")

        self._client = genai.Client(api_key=key)

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
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=user_prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_prompt,
                temperature=self._temperature,
                max_output_tokens=max_output_tokens,
                response_mime_type="application/json",
            ),
        )
        return response.text or ""

    async def aclose(self) -> None:
        # Older google-genai releases have no async close.
        close = getattr(self._client.aio, "aclose", None)
        if close is not None:
            await close()
