"""
Routes for health check and monitoring
"""
from fastapi import APIRouter, Depends

from sitecrawler.api.config import settings
from sitecrawler.api.dependencies import AppState, get_app_state
from sitecrawler.api.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/api/v1/health", response_model=HealthResponse)
async def health_check(app_state: AppState = Depends(get_app_state)):
    """Health check endpoint"""
    return HealthResponse(
        status="healthy" if app_state.is_startup_complete() else "starting",
        active_crawls=app_state.active_crawls,
        version=settings.API_VERSION
    )
