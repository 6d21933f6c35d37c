from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, NonNegativeInt

FactType = Literal["role", "company", "date", "skill", "tool", "metric", "achievement", "summary"]


class SourceSpan(BaseModel):
    startLine: NonNegativeInt | None = None
    endLine: NonNegativeInt | None = None


class Fact(BaseModel):
    id: str
    type: FactType
    text: str = Field(min_length=1)
    sourceSpan: SourceSpan | None = None
    tags: list[str] | None = None


class FactBag(BaseModel):
    facts: list[Fact] = Field(min_length=1)
