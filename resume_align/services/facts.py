from __future__ import annotations

import re
from typing import Iterable, Iterator

from resume_align.schemas.facts import Fact, FactBag

_TOKEN_RE = re.compile(r"[a-z0-9+\-.%]+")
_ALNUM_RE = re.compile(r"[a-z0-9]")
# Sentence punctuation and separators clinging to a token.
_TOKEN_EDGE_CHARS = ".-"
_TOKEN_MIN_LENGTH = 3
_TOKEN_FALLBACK_LIMIT = 100


def _dedup_key(fact: Fact) -> tuple[str, str]:
    return fact.type, fact.text.strip().lower()


def merge_facts(bags: Iterable[FactBag]) -> FactBag:
    """Union facts from several bags; first occurrence wins and ids become f1..fn."""
    merged: dict[tuple[str, str], Fact] = {}
    for bag in bags:
        for fact in bag.facts:
            key = _dedup_key(fact)
            if key in merged:
                continue
            merged[key] = fact.model_copy(update={"id": f"f{len(merged) + 1}"})
    return FactBag(facts=list(merged.values()))


def fact_ids(bag: FactBag) -> set[str]:
    return {fact.id for fact in bag.facts}


def _fallback_tokens(resume: str) -> Iterator[str]:
    for raw in _TOKEN_RE.findall((resume or "").lower()):
        token = raw.strip(_TOKEN_EDGE_CHARS)
        if len(token) >= _TOKEN_MIN_LENGTH and _ALNUM_RE.search(token):
            yield token


def token_fallback_facts(resume: str) -> FactBag:
    tokens = list(dict.fromkeys(_fallback_tokens(resume)))[:_TOKEN_FALLBACK_LIMIT]
    facts = [Fact(id=f"f{index}", type="skill", text=token) for index, token in enumerate(tokens, start=1)]
    if not facts:
        facts = [Fact(id="f1", type="summary", text=(resume or "").strip() or "no resume content")]
    return FactBag(facts=facts)
