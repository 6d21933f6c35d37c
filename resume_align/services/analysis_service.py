from __future__ import annotations

import logging
from typing import Mapping

from resume_align.ai.config import EDITOR
from resume_align.ai.errors import PipelineError
from resume_align.ai.factory import build_ai_clients
from resume_align.ai.types import AIClient
from resume_align.core.config import Settings
from resume_align.normalize.normalize_jd import build_jd_requirements
from resume_align.schemas.analyze import AnalyzeResponse
from resume_align.taxonomy import TaxonomyProvider

from .coverage import split_supported
from .editor import RewriteEditor, coverage_only_output
from .fact_extraction import build_fact_extractors
from .orchestrator import AdaptiveOrchestrator
from .provenance import validate_provenance

logger = logging.getLogger(__name__)

LIVE_NOTE = "Live pipeline with JD skill map -> adaptive routing."


class AnalysisPipeline:
    def __init__(
        self,
        orchestrator: AdaptiveOrchestrator,
        editor: RewriteEditor,
        *,
        taxonomy: TaxonomyProvider | None = None,
        clients: Mapping[str, AIClient] | None = None,
    ):
        self._orchestrator = orchestrator
        self._editor = editor
        self._taxonomy = taxonomy
        self._clients = dict(clients or {})

    async def analyze(self, resume: str, jd: str) -> AnalyzeResponse:
        requirements = build_jd_requirements(jd, self._taxonomy)
        report = await self._orchestrator.extract(resume, requirements)
        supported, missing = split_supported(requirements.canonical_phrases, report.facts)

        note = f"{LIVE_NOTE} {report.note}"
        try:
            edited = await self._editor.rewrite(resume, report.facts, supported)
        except PipelineError as exc:
            logger.warning("editor_degraded code=%s: %s", exc.code, exc)
            edited = coverage_only_output(report.coverage, missing, exc.code)
            note += f" Editor degraded: coverage-only ({exc.code})."
        else:
            edited = validate_provenance(edited, report.facts)

        return AnalyzeResponse(
            fitScore=edited.fitScore,
            uncoveredRequirements=missing,
            keyGaps=edited.key_gaps,
            alignedResume="\n".join(bullet.bullet for bullet in edited.aligned_resume),
            rationale=edited.rationale,
            coverage=report.coverage,
            criticsCount=report.critics_succeeded,
            note=note,
        )

    async def aclose(self) -> None:
        for role, client in self._clients.items():
            close = getattr(client, "aclose", None)
            if close is None:
                continue
            try:
                await close()
            except Exception as exc:  # pragma: no cover - shutdown must not raise
                logger.warning("ai_client_close_failed role=%s: %s", role, exc)


def build_analysis_pipeline(settings: Settings) -> AnalysisPipeline | None:
    if not settings.llm_credentials_configured:
        logger.info("analysis_pipeline_disabled reason=missing_credentials")
        return None

    clients = build_ai_clients(settings)
    extractors = build_fact_extractors(clients, timeout_ms=settings.critic_timeout_ms)
    orchestrator = AdaptiveOrchestrator(extractors, threshold=settings.fast_path_threshold)
    editor = RewriteEditor(clients[EDITOR], timeout_ms=settings.editor_timeout_ms)
    return AnalysisPipeline(orchestrator, editor, clients=clients)
