from __future__ import annotations

from typing import Iterable

from resume_align.schemas.coverage import BucketCoverage, Coverage
from resume_align.schemas.facts import FactBag
from resume_align.schemas.requirements import RequirementSet

_FACT_SEPARATOR = " \n "


def fact_text(bag: FactBag) -> str:
    return _FACT_SEPARATOR.join(fact.text.lower() for fact in bag.facts)


def _score_bucket(phrases: list[str], haystack: str) -> BucketCoverage:
    uncovered = [phrase for phrase in phrases if phrase.lower() not in haystack]
    return BucketCoverage(
        covered=len(phrases) - len(uncovered),
        total=len(phrases),
        items_uncovered=uncovered,
    )


def coverage_against_facts(requirements: RequirementSet, bag: FactBag) -> Coverage:
    haystack = fact_text(bag)
    must = _score_bucket(requirements.must_have, haystack)
    resp = _score_bucket(requirements.responsibilities, haystack)
    nice = _score_bucket(requirements.nice_to_have, haystack)

    total = must.total + resp.total + nice.total
    covered = must.covered + resp.covered + nice.covered
    # No requirements means nothing is left uncovered.
    ratio = covered / max(1, total) if total else 1.0
    return Coverage(must_have=must, responsibilities=resp, nice_to_have=nice, exact_match_ratio=ratio)


def coverage_pct(coverage: Coverage) -> int:
    return int(round(coverage.exact_match_ratio * 100))


def split_supported(phrases: Iterable[str], bag: FactBag) -> tuple[list[str], list[str]]:
    haystack = fact_text(bag)
    supported: list[str] = []
    missing: list[str] = []
    for phrase in phrases:
        (supported if phrase.lower() in haystack else missing).append(phrase)
    return supported, missing
