from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RequirementSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    must_have: list[str] = Field(default_factory=list)
    nice_to_have: list[str] = Field(default_factory=list)
    responsibilities: list[str] = Field(default_factory=list)
    canonical_phrases: list[str] = Field(default_factory=list)

