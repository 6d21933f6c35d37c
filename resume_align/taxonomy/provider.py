from __future__ import annotations

from typing import Protocol


class TaxonomyProvider(Protocol):
    def canonicalize(self, phrase: str) -> str:
        """Return the canonical phrase for a known alias, or the phrase unchanged."""
