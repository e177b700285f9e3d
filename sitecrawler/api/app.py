"""
FastAPI application factory and configuration
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sitecrawler.api.config import settings
from sitecrawler.api.dependencies import AppState
from sitecrawler.api.middleware import RequestLoggingMiddleware
from sitecrawler.api.routes import crawl, health, root, scrape

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown"""
    app_state = AppState()

    crawl_config = settings.crawl_config()
    app_state.set_crawl_config(crawl_config)
    logger.info(
        f"Crawler ready (timeout={crawl_config.request_timeout}s, "
        f"delay={crawl_config.request_delay}s, max_text_length={crawl_config.max_text_length})"
    )
    app_state.set_startup_complete(True)

    yield

    app_state.set_startup_complete(False)
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """Factory function creating the FastAPI app"""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(crawl.router)
    app.include_router(scrape.router)

    return app
