from __future__ import annotations

import re

from resume_align.normalize.normalize_jd import STOPWORDS
from resume_align.schemas.analyze import MockScoreResponse

_TOKEN_RE = re.compile(r"\b[a-z0-9+\-.%]{3,}\b")
# Requirement markers say how much a skill matters, not which skill it is.
_MARKER_WORDS = frozenset(
    {"must", "required", "require", "requires", "need", "needs", "needed", "mandatory", "preferred", "plus", "bonus", "nice", "have"}
)
_SAMPLE_LIMIT = 20

MOCK_NOTE = "Using MOCK (missing one or more API keys)"


def tokenize(text: str) -> list[str]:
    tokens = _TOKEN_RE.findall((text or "").lower())
    return list(dict.fromkeys(token for token in tokens if token not in STOPWORDS and token not in _MARKER_WORDS))


def mock_score(resume: str = "", jd: str = "") -> MockScoreResponse:
    lowered = (resume or "").lower()
    terms = tokenize(jd)
    matched = [term for term in terms if term in lowered]
    fit = round(len(matched) / len(terms) * 100) if terms else 0
    return MockScoreResponse(
        fitScore=fit,
        matchedCount=len(matched),
        totalJDWords=len(terms),
        sampleMatches=matched[:_SAMPLE_LIMIT],
        note=MOCK_NOTE,
    )
