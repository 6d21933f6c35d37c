import os
import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

from resume_align.ai.config import AIConfig
from resume_align.ai.factory import get_ai_client
from resume_align.ai.providers.claude_provider import ClaudeProvider
from resume_align.ai.providers.gemini_provider import GeminiProvider
from resume_align.ai.providers.openai_provider import OpenAIProvider
from resume_align.core.config import load_settings


class ProviderTests(unittest.IsolatedAsyncioTestCase):
    async def test_openai_provider_requests_json_object(self):
        provider = OpenAIProvider(model="gpt-4o-mini", api_key="sk-test")
        message = SimpleNamespace(content='{"facts": []}')
        create = AsyncMock(return_value=SimpleNamespace(choices=[SimpleNamespace(message=message)]))
        provider._client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

        text = await provider.complete_json(system_prompt="sys", user_prompt="user", max_output_tokens=50)

        self.assertEqual(text, '{"facts": []}')
        kwargs = create.await_args.kwargs
        self.assertEqual(kwargs["response_format"], {"type": "json_object"})
        self.assertEqual(kwargs["messages"][0], {"role": "system", "content": "sys"})
        self.assertEqual(kwargs["max_tokens"], 50)

    async def test_claude_provider_joins_text_blocks(self):
        provider = ClaudeProvider(model="claude-3-5-haiku-latest", api_key="sk-ant-test")
        blocks = [SimpleNamespace(type="text", text='{"facts"'), SimpleNamespace(type="text", text=": []}")]
        create = AsyncMock(return_value=SimpleNamespace(content=blocks))
        provider._client = SimpleNamespace(messages=SimpleNamespace(create=create))

        text = await provider.complete_json(system_prompt="sys", user_prompt="user")

        self.assertEqual(text, '{"facts": []}')
        self.assertEqual(create.await_args.kwargs["system"], "sys")

    async def test_gemini_provider_closes_async_transport(self):
        provider = GeminiProvider(model="gemini-2.0-flash", api_key="g-test")
        aclose = AsyncMock()
        provider._client = SimpleNamespace(aio=SimpleNamespace(aclose=aclose))

        await provider.aclose()

        aclose.assert_awaited_once()

    async def test_gemini_provider_close_tolerates_missing_aclose(self):
        provider = GeminiProvider(model="gemini-2.0-flash", api_key="g-test")
        provider._client = SimpleNamespace(aio=SimpleNamespace())

        await provider.aclose()

    def test_missing_key_raises(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(RuntimeError):
                OpenAIProvider(model="gpt-4o-mini")

    def test_unknown_provider_is_rejected(self):
        with patch.dict(os.environ, {}, clear=True):
            cfg = load_settings()
        with self.assertRaises(ValueError):
            get_ai_client(AIConfig(provider="mistral", model="small"), cfg)


if __name__ == "__main__":
    unittest.main()
