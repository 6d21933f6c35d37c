from __future__ import annotations

import logging

from resume_align.schemas.editor import EditorOutput
from resume_align.schemas.facts import FactBag

from .facts import fact_ids

logger = logging.getLogger(__name__)


def validate_provenance(output: EditorOutput, facts: FactBag) -> EditorOutput:
    """Keep only bullets whose every source id exists in the fact bag."""
    known = fact_ids(facts)
    kept = [
        bullet
        for bullet in output.aligned_resume
        if bullet.source_ids and all(source_id in known for source_id in bullet.source_ids)
    ]
    dropped = len(output.aligned_resume) - len(kept)
    if dropped:
        logger.info("provenance_dropped count=%s kept=%s", dropped, len(kept))
    return output.model_copy(update={"aligned_resume": kept})
