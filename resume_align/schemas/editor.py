from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class AlignedBullet(BaseModel):
    bullet: str = Field(min_length=1)
    source_ids: list[str] = Field(min_length=1)


class EditorOutput(BaseModel):
    fitScore: int = Field(ge=0, le=100)
    missing_keywords: list[str] = Field(default_factory=list)
    key_gaps: list[str] = Field(default_factory=list)
    aligned_resume: list[AlignedBullet] = Field(default_factory=list)
    rationale: str = ""

    @field_validator("fitScore", mode="before")
    @classmethod
    def _round_fit_score(cls, value: object) -> object:
        if isinstance(value, float):
            return int(round(value))
        return value
