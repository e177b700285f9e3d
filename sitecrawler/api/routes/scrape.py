"""
Routes for single-page scraping
"""
from fastapi import APIRouter, Depends

from sitecrawler.api.dependencies import get_crawl_config
from sitecrawler.api.models import ScrapeRequest, ScrapeResult
from sitecrawler.api.services import ScrapeService
from sitecrawler.crawl import CrawlConfig

router = APIRouter(prefix="/api/v1/scrape", tags=["scrape"])


@router.post("", response_model=ScrapeResult)
async def scrape_page(
    request: ScrapeRequest,
    config: CrawlConfig = Depends(get_crawl_config)
):
    """Fetch one page and return its extracted content"""
    return await ScrapeService.scrape(request, config)
