from __future__ import annotations

import json
from pathlib import Path

from .provider import TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, aliases_path: str | Path | None = None) -> None:
        path = Path(aliases_path) if aliases_path else Path(__file__).with_name("aliases.json")
        self._aliases = self._load_aliases(path)

    @staticmethod
    def _load_aliases(path: Path) -> dict[str, str]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return {str(key).strip().lower(): str(value).strip().lower() for key, value in raw.items()}

    def canonicalize(self, phrase: str) -> str:
        return self._aliases.get(phrase, phrase)
