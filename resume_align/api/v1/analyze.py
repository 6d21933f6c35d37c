import logging

from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import JSONResponse

from resume_align.core.rate_limit import rate_limit
from resume_align.core.security import check_api_key
from resume_align.schemas.analyze import (
    AnalyzeErrorResponse,
    AnalyzeRequest,
    AnalyzeResponse,
    MockScoreResponse,
)
from resume_align.services.analysis_service import AnalysisPipeline
from resume_align.services.mock_scoring import mock_score

logger = logging.getLogger(__name__)

router = APIRouter()


def get_pipeline(request: Request) -> AnalysisPipeline | None:
    return getattr(request.app.state, "pipeline", None)


@router.get("/analyze", summary="Analyze liveness check")
async def analyze_liveness():
    return {"ok": True, "route": "/analyze"}


@router.post(
    "/analyze",
    response_model=AnalyzeResponse | MockScoreResponse,
    responses={500: {"model": AnalyzeErrorResponse}},
)
@rate_limit()
async def analyze(
    request: Request,
    payload: AnalyzeRequest,
    pipeline: AnalysisPipeline | None = Depends(get_pipeline),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    if pipeline is None:
        return mock_score(payload.resume, payload.jd)

    try:
        return await pipeline.analyze(payload.resume, payload.jd)
    except Exception as exc:  # noqa: BLE001 - surfaced to the caller as analysis_failed
        logger.exception("analysis_failed resume_len=%s jd_len=%s", len(payload.resume), len(payload.jd))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=AnalyzeErrorResponse(error="analysis_failed", details=str(exc) or "unknown").model_dump(),
        )
