from __future__ import annotations

import re

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")
_SENTENCE_BREAK_RE = re.compile(r"(?<=[.!?])\s+")
_LABEL_RE = re.compile(r"^\s*([^:]+):\s*")
_MAX_LABEL_WORDS = 4


def split_lines(text: str) -> list[str]:
    lines = [line.strip() for line in (text or "").splitlines()]
    return [line for line in lines if line]


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def split_sentences(line: str) -> list[str]:
    return [part.strip() for part in _SENTENCE_BREAK_RE.split(line) if part.strip()]


def strip_leading_label(line: str) -> str:
    """Drop a short heading such as 'Must have:' that precedes a phrase list."""
    match = _LABEL_RE.match(line)
    if not match:
        return line
    if len(match.group(1).split()) > _MAX_LABEL_WORDS:
        return line
    return line[match.end() :]


def dedup(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))
