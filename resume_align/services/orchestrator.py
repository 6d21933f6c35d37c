from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Mapping

from resume_align.ai.config import FAST_CRITIC
from resume_align.ai.errors import NoFactsAvailable
from resume_align.schemas.coverage import Coverage
from resume_align.schemas.facts import FactBag
from resume_align.schemas.requirements import RequirementSet

from .coverage import coverage_against_facts, coverage_pct
from .fact_extraction import ExtractionOutcome, FactExtractor, settle_all
from .facts import merge_facts, token_fallback_facts

logger = logging.getLogger(__name__)

DEFAULT_FAST_PATH_THRESHOLD = 88

ExtractionPath = Literal["fast", "full", "token_fallback"]


@dataclass(frozen=True)
class ExtractionReport:
    facts: FactBag
    coverage: Coverage
    path: ExtractionPath
    critics_succeeded: int
    failures: tuple[str, ...] = field(default_factory=tuple)
    note: str = ""


def should_escalate(*, fast_failed: bool, coverage_percent: int, threshold: int) -> bool:
    return fast_failed or coverage_percent < threshold


def _failure_labels(outcomes: list[ExtractionOutcome]) -> tuple[str, ...]:
    return tuple(f"{o.name}:{o.error.code}" for o in outcomes if o.error is not None)


class AdaptiveOrchestrator:
    """Fast critic first; escalate to the remaining critics when coverage is short.

    Escalation is the only retry policy: a failed critic is never called again
    within the same request.
    """

    def __init__(
        self,
        extractors: Mapping[str, FactExtractor],
        *,
        fast_name: str = FAST_CRITIC,
        threshold: int = DEFAULT_FAST_PATH_THRESHOLD,
    ):
        if fast_name not in extractors:
            raise ValueError(f"Fast critic '{fast_name}' is not registered")
        self._fast = extractors[fast_name]
        self._escalation = [extractor for name, extractor in extractors.items() if name != fast_name]
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    async def extract(self, resume: str, requirements: RequirementSet) -> ExtractionReport:
        fast = await self._fast.settle(resume)
        fast_percent = 0
        if fast.bag is not None:
            fast_percent = coverage_pct(coverage_against_facts(requirements, fast.bag))

        if not should_escalate(
            fast_failed=not fast.ok,
            coverage_percent=fast_percent,
            threshold=self._threshold,
        ):
            facts = merge_facts([fast.bag])
            return ExtractionReport(
                facts=facts,
                coverage=coverage_against_facts(requirements, facts),
                path="fast",
                critics_succeeded=1,
                note=f"Fast path ({self._fast.name} only). Coverage={fast_percent}%",
            )

        logger.info(
            "escalation_triggered fast_ok=%s coverage=%s threshold=%s",
            fast.ok,
            fast_percent,
            self._threshold,
        )
        outcomes = [fast, *await settle_all(self._escalation, resume)]
        failures = _failure_labels(outcomes)
        succeeded = [o for o in outcomes if o.bag is not None]

        if not succeeded:
            error = NoFactsAvailable("every fact extractor failed", source="orchestrator")
            logger.warning("no_facts_available failures=%s", ",".join(failures))
            facts = token_fallback_facts(resume)
            coverage = coverage_against_facts(requirements, facts)
            return ExtractionReport(
                facts=facts,
                coverage=coverage,
                path="token_fallback",
                critics_succeeded=0,
                failures=failures,
                note=(
                    f"Token fallback facts ({error.code}; all critics failed). "
                    f"Coverage={coverage_pct(coverage)}%"
                ),
            )

        facts = merge_facts([o.bag for o in succeeded if o.bag is not None])
        coverage = coverage_against_facts(requirements, facts)
        note = f"Full path ({'+'.join(o.name for o in succeeded)}). Coverage={coverage_pct(coverage)}%"
        if failures:
            note += f" Failed critics: {', '.join(failures)}."
        return ExtractionReport(
            facts=facts,
            coverage=coverage,
            path="full",
            critics_succeeded=len(succeeded),
            failures=failures,
            note=note,
        )
