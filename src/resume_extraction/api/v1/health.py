from fastapi import APIRouter, Depends

from resume_extraction.core.config import Settings, get_settings
from resume_extraction.schemas.health import HealthResponse, StatusResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    configured = bool(settings.google_ai_api_key)
    return HealthResponse(
        status="healthy" if configured else "degraded",
        completion_configured=configured,
        model=settings.gemini_model,
        version=settings.app_version,
    )


@router.get("/status", response_model=StatusResponse)
async def liveness() -> StatusResponse:
    return StatusResponse(status="ok")
