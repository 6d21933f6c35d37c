from __future__ import annotations

import re

from resume_align.schemas.requirements import RequirementSet
from resume_align.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .utils import dedup, split_lines, split_sentences, strip_bullet_prefix, strip_leading_label

STOPWORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "for", "to", "of", "in", "on", "with", "by", "from", "at",
        "as", "per", "out", "our", "one", "is", "are", "be", "being", "been", "that", "this",
        "those", "these", "it", "its", "into", "about", "across", "over", "under",
        "early", "form", "act",
    }
)

_MUST_RE = re.compile(r"must|required|need|mandatory")
_NICE_RE = re.compile(r"nice to have|preferred|plus|bonus")
_RESP_RE = re.compile(r"responsibilit|own|lead|deliver|manage|design|build|implement|ship|execute")

_CANDIDATE_SPLIT_RE = re.compile(r"[,;]|\s+and\s+")
_FALLBACK_SPLIT_RE = re.compile(r"[,;\n]|\.(?=\s|$)")
_BRACKET_RE = re.compile(r"[()\[\]{},;:]")
_NOISE_RE = re.compile(r"[^a-z0-9+\-.% ]")
_ALNUM_RE = re.compile(r"[a-z0-9]")

_MIN_BUCKET_PHRASES = 6
_FALLBACK_MAX_WORDS = 6
_FALLBACK_LIMIT = 20


def normalize_phrase(text: str) -> str:
    cleaned = _BRACKET_RE.sub(" ", text.lower())
    cleaned = _NOISE_RE.sub(" ", cleaned)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    return cleaned.strip("-").rstrip(".").strip()


def keep_phrase(phrase: str) -> bool:
    if not phrase:
        return False
    if len(phrase) < 3:
        return False
    if not _ALNUM_RE.search(phrase):
        return False
    return phrase not in STOPWORDS


def _classify(normalized_line: str) -> str | None:
    if _MUST_RE.search(normalized_line):
        return "must"
    if _NICE_RE.search(normalized_line):
        return "nice"
    if _RESP_RE.search(normalized_line):
        return "resp"
    return None


def _clean_phrases(pieces: list[str], taxonomy: TaxonomyProvider) -> list[str]:
    phrases = [taxonomy.canonicalize(normalize_phrase(piece)) for piece in pieces]
    return [phrase for phrase in phrases if keep_phrase(phrase)]


def _phrase_candidates(segment: str, taxonomy: TaxonomyProvider) -> list[str]:
    body = strip_leading_label(segment).lower()
    return _clean_phrases(_CANDIDATE_SPLIT_RE.split(body), taxonomy)


def _fallback_phrases(jd: str, taxonomy: TaxonomyProvider) -> list[str]:
    fragments = [normalize_phrase(fragment) for fragment in _FALLBACK_SPLIT_RE.split(jd.lower())]
    short = [fragment for fragment in fragments if len(fragment.split()) <= _FALLBACK_MAX_WORDS]
    return _clean_phrases(short, taxonomy)[:_FALLBACK_LIMIT]


def build_jd_requirements(jd: str, taxonomy: TaxonomyProvider | None = None) -> RequirementSet:
    taxonomy = taxonomy or get_default_taxonomy_provider()
    buckets: dict[str, list[str]] = {"must": [], "nice": [], "resp": []}

    for line in split_lines(jd):
        for segment in split_sentences(strip_bullet_prefix(line)):
            bucket = _classify(normalize_phrase(segment))
            if bucket is None:
                continue
            buckets[bucket].extend(_phrase_candidates(segment, taxonomy))

    if sum(len(items) for items in buckets.values()) < _MIN_BUCKET_PHRASES:
        buckets["resp"].extend(_fallback_phrases(jd or "", taxonomy))

    must = dedup(buckets["must"])
    nice = dedup(buckets["nice"])
    resp = dedup(buckets["resp"])
    return RequirementSet(
        must_have=must,
        nice_to_have=nice,
        responsibilities=resp,
        canonical_phrases=dedup(must + resp + nice),
    )
