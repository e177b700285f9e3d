"""
Entry point for the Site Crawler API
"""
import uvicorn

from sitecrawler.api.app import create_app
from sitecrawler.api.config import settings

# Create FastAPI app instance
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
