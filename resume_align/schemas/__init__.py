from .analyze import AnalyzeErrorResponse, AnalyzeRequest, AnalyzeResponse, MockScoreResponse
from .coverage import BucketCoverage, Coverage
from .editor import AlignedBullet, EditorOutput
from .facts import Fact, FactBag, FactType, SourceSpan
from .requirements import RequirementSet

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "AnalyzeErrorResponse",
    "MockScoreResponse",
    "BucketCoverage",
    "Coverage",
    "AlignedBullet",
    "EditorOutput",
    "Fact",
    "FactBag",
    "FactType",
    "SourceSpan",
    "RequirementSet",
]
