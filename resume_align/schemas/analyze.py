from __future__ import annotations

from pydantic import BaseModel, Field

from .coverage import Coverage


class AnalyzeRequest(BaseModel):
    resume: str = Field(default="", max_length=120000)
    jd: str = Field(default="", max_length=120000)


class MockScoreResponse(BaseModel):
    fitScore: int
    matchedCount: int
    totalJDWords: int
    sampleMatches: list[str] = Field(default_factory=list)
    note: str


class AnalyzeResponse(BaseModel):
    fitScore: int
    uncoveredRequirements: list[str] = Field(default_factory=list)
    keyGaps: list[str] = Field(default_factory=list)
    alignedResume: str = ""
    rationale: str = ""
    coverage: Coverage
    criticsCount: int
    note: str


class AnalyzeErrorResponse(BaseModel):
    error: str
    details: str
