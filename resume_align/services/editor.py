from __future__ import annotations

from typing import Sequence

from resume_align.ai.config import EDITOR
from resume_align.ai.prompts import EDITOR_SYSTEM, build_editor_prompt
from resume_align.ai.types import AIClient
from resume_align.schemas.coverage import Coverage
from resume_align.schemas.editor import EditorOutput
from resume_align.schemas.facts import FactBag

from .coverage import coverage_pct
from .llm_calls import json_completion, parse_model_output

DEFAULT_EDITOR_TIMEOUT_MS = 15000


class RewriteEditor:
    def __init__(
        self,
        client: AIClient,
        *,
        timeout_ms: int = DEFAULT_EDITOR_TIMEOUT_MS,
        max_output_tokens: int = 1500,
    ):
        self._client = client
        self._timeout_ms = timeout_ms
        self._max_output_tokens = max_output_tokens

    async def rewrite(self, resume: str, facts: FactBag, supported: Sequence[str]) -> EditorOutput:
        raw = await json_completion(
            self._client,
            system_prompt=EDITOR_SYSTEM,
            user_prompt=build_editor_prompt(resume, facts, supported),
            timeout_ms=self._timeout_ms,
            source=EDITOR,
            max_output_tokens=self._max_output_tokens,
        )
        return parse_model_output(raw, EditorOutput, source=EDITOR)


def coverage_only_output(coverage: Coverage, missing: Sequence[str], reason: str) -> EditorOutput:
    return EditorOutput(
        fitScore=coverage_pct(coverage),
        missing_keywords=list(missing),
        key_gaps=list(missing),
        aligned_resume=[],
        rationale=(
            f"Coverage-only result: the rewrite editor was unavailable ({reason}). "
            "fitScore is the exact requirement coverage against extracted resume facts."
        ),
    )
