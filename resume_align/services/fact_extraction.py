from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

from resume_align.ai.config import ESCALATION_CRITICS, FAST_CRITIC
from resume_align.ai.errors import PipelineError, TransportFailure
from resume_align.ai.prompts import FACT_SYSTEM, build_fact_prompt
from resume_align.ai.types import AIClient
from resume_align.schemas.facts import FactBag

from .llm_calls import json_completion, parse_model_output

logger = logging.getLogger(__name__)

DEFAULT_CRITIC_TIMEOUT_MS = 3500


@dataclass(frozen=True)
class ExtractionOutcome:
    name: str
    bag: FactBag | None = None
    error: PipelineError | None = None

    @property
    def ok(self) -> bool:
        return self.bag is not None


class FactExtractor:
    """One critic: resume text in, FactBag or typed failure out."""

    def __init__(
        self,
        name: str,
        client: AIClient,
        *,
        timeout_ms: int = DEFAULT_CRITIC_TIMEOUT_MS,
        max_output_tokens: int = 900,
    ):
        self.name = name
        self._client = client
        self._timeout_ms = timeout_ms
        self._max_output_tokens = max_output_tokens

    async def extract_facts(self, resume: str) -> FactBag:
        raw = await json_completion(
            self._client,
            system_prompt=FACT_SYSTEM,
            user_prompt=build_fact_prompt(resume),
            timeout_ms=self._timeout_ms,
            source=self.name,
            max_output_tokens=self._max_output_tokens,
        )
        return parse_model_output(raw, FactBag, source=self.name)

    async def settle(self, resume: str) -> ExtractionOutcome:
        try:
            bag = await self.extract_facts(resume)
        except PipelineError as exc:
            logger.warning("fact_extraction_failed critic=%s code=%s: %s", self.name, exc.code, exc)
            return ExtractionOutcome(name=self.name, error=exc)
        logger.info("fact_extraction_ok critic=%s facts=%s", self.name, len(bag.facts))
        return ExtractionOutcome(name=self.name, bag=bag)


async def settle_all(extractors: Sequence[FactExtractor], resume: str) -> list[ExtractionOutcome]:
    """Run extractors concurrently; every task settles on its own."""
    results = await asyncio.gather(
        *(extractor.settle(resume) for extractor in extractors),
        return_exceptions=True,
    )
    outcomes: list[ExtractionOutcome] = []
    for extractor, result in zip(extractors, results):
        if isinstance(result, ExtractionOutcome):
            outcomes.append(result)
            continue
        if isinstance(result, Exception):
            logger.warning("fact_extraction_crashed critic=%s: %s", extractor.name, result)
            outcomes.append(
                ExtractionOutcome(
                    name=extractor.name,
                    error=TransportFailure(f"{extractor.name}_crashed: {result}", source=extractor.name),
                )
            )
            continue
        raise result
    return outcomes


def build_fact_extractors(
    clients: Mapping[str, AIClient],
    *,
    timeout_ms: int = DEFAULT_CRITIC_TIMEOUT_MS,
) -> dict[str, FactExtractor]:
    names = (FAST_CRITIC, *ESCALATION_CRITICS)
    missing = [name for name in names if name not in clients]
    if missing:
        raise ValueError(f"Missing AI clients for critics: {', '.join(missing)}")
    return {name: FactExtractor(name, clients[name], timeout_ms=timeout_ms) for name in names}
