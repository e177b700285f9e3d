"""
Main routes for the application
"""
from fastapi import APIRouter, Depends

from sitecrawler.api.config import settings
from sitecrawler.api.dependencies import get_app_state, AppState

router = APIRouter()


@router.get("/")
async def root(app_state: AppState = Depends(get_app_state)):
    """Root endpoint with startup status"""
    return {
        "message": settings.API_TITLE,
        "status": "running" if app_state.is_startup_complete() else "starting",
        "version": settings.API_VERSION,
        "endpoints": [
            "POST /api/v1/crawl",
            "POST /api/v1/scrape",
            "GET /api/v1/health"
        ]
    }
