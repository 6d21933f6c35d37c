from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service health and whether live analysis is enabled.")
async def health_check(request: Request):
    live = getattr(request.app.state, "pipeline", None) is not None
    return {"status": "healthy", "mode": "live" if live else "mock"}
