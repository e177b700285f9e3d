"""
Routes for multi-page crawling
"""
from fastapi import APIRouter, Depends

from sitecrawler.api.dependencies import AppState, get_app_state, get_crawl_config
from sitecrawler.api.models import CrawlRequest, CrawlResult
from sitecrawler.api.services import CrawlService
from sitecrawler.crawl import CrawlConfig

router = APIRouter(prefix="/api/v1/crawl", tags=["crawl"])


@router.post("", response_model=CrawlResult)
async def crawl_site(
    request: CrawlRequest,
    config: CrawlConfig = Depends(get_crawl_config),
    app_state: AppState = Depends(get_app_state)
):
    """Crawl a site breadth-first from the seed URL and return the full report"""
    return await CrawlService.run_crawl(request, config, app_state)
