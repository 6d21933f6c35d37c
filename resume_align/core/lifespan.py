from contextlib import asynccontextmanager
import logging

from resume_align.core.config import settings
from resume_align.services.analysis_service import build_analysis_pipeline

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    pipeline = build_analysis_pipeline(settings)
    app.state.pipeline = pipeline
    logger.info(
        "analysis_pipeline_ready live=%s threshold=%s critic_timeout_ms=%s",
        pipeline is not None,
        settings.fast_path_threshold,
        settings.critic_timeout_ms,
    )
    yield
    app.state.pipeline = None
    if pipeline is not None:
        await pipeline.aclose()
