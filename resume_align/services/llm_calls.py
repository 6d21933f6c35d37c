from __future__ import annotations

import asyncio
import logging
import time
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from resume_align.ai.errors import CriticTimeout, SchemaViolation, TransportFailure
from resume_align.ai.prompts import extract_json
from resume_align.ai.types import AIClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


async def json_completion(
    client: AIClient,
    *,
    system_prompt: str,
    user_prompt: str,
    timeout_ms: int,
    source: str,
    max_output_tokens: int = 900,
) -> str:
    """Run one bounded model call; failures surface as typed pipeline errors."""
    started = time.perf_counter()
    try:
        content = await asyncio.wait_for(
            client.complete_json(
                system_prompt=system_prompt,
                user_prompt=user_prompt,
                max_output_tokens=max_output_tokens,
            ),
            timeout=timeout_ms / 1000,
        )
    except asyncio.TimeoutError as exc:
        logger.warning("llm_call_timeout source=%s model=%s timeout_ms=%s", source, client.model, timeout_ms)
        raise CriticTimeout(f"{source}_timeout", source=source) from exc
    except Exception as exc:  # noqa: BLE001 - provider SDKs raise many error types
        logger.warning(
            "llm_call_failed source=%s model=%s latency_ms=%s: %s",
            source,
            client.model,
            _elapsed_ms(started),
            exc,
        )
        raise TransportFailure(f"{source}_transport: {exc}", source=source) from exc

    logger.info("llm_call_ok source=%s model=%s latency_ms=%s", source, client.model, _elapsed_ms(started))
    return content or ""


def parse_model_output(raw: str, model_cls: type[ModelT], *, source: str) -> ModelT:
    try:
        payload = extract_json(raw)
    except (ValueError, RecursionError) as exc:
        raise SchemaViolation(f"{source}_invalid_json: {exc}", source=source) from exc
    try:
        return model_cls.model_validate(payload)
    except ValidationError as exc:
        raise SchemaViolation(
            f"{source}_schema_violation: {exc.error_count()} error(s)", source=source
        ) from exc
