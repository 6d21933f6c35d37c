from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator


class BucketCoverage(BaseModel):
    model_config = ConfigDict(frozen=True)

    covered: NonNegativeInt
    total: NonNegativeInt
    items_uncovered: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_counts(self) -> "BucketCoverage":
        if self.covered + len(self.items_uncovered) != self.total:
            raise ValueError("covered + len(items_uncovered) must equal total")
        return self


class Coverage(BaseModel):
    model_config = ConfigDict(frozen=True)

    must_have: BucketCoverage
    responsibilities: BucketCoverage
    nice_to_have: BucketCoverage
    exact_match_ratio: float = Field(ge=0.0, le=1.0)
