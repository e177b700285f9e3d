"""
Business logic services for crawl and scrape operations
"""
import logging

from sitecrawler.api.config import settings
from sitecrawler.api.dependencies import AppState
from sitecrawler.api.exceptions import (
    CrawlLimitError,
    InternalServerError,
    InvalidUrlError,
    UrlRequiredError,
    fetch_failure_to_http,
)
from sitecrawler.api.models import CrawlRequest, OperationResult, ScrapeRequest, to_operation_result
from sitecrawler.crawl import (
    CrawlConfig,
    FetchFailure,
    InvalidInput,
    OrchestrationFault,
    PageScraper,
    WebCrawler,
    create_job,
)

logger = logging.getLogger(__name__)


def _require_url(url) -> str:
    if url is None or not str(url).strip():
        raise UrlRequiredError()
    return url


class CrawlService:
    """Service for multi-page crawl jobs"""

    @staticmethod
    async def run_crawl(request: CrawlRequest, config: CrawlConfig, app_state: AppState) -> OperationResult:
        url = _require_url(request.url)

        if request.max_pages > settings.CRAWL_MAX_PAGES_LIMIT:
            raise CrawlLimitError("maxPages", settings.CRAWL_MAX_PAGES_LIMIT)
        if request.max_depth > settings.CRAWL_MAX_DEPTH_LIMIT:
            raise CrawlLimitError("maxDepth", settings.CRAWL_MAX_DEPTH_LIMIT)

        try:
            job = create_job(
                url,
                max_depth=request.max_depth,
                max_pages=request.max_pages,
                same_origin_only=request.same_origin_only,
                config=config,
            )
        except InvalidInput as e:
            raise InvalidUrlError(str(e))

        crawler = WebCrawler(job, config)
        app_state.crawl_started()
        try:
            report = await crawler.crawl()
        except OrchestrationFault as e:
            logger.error(f"Error during crawl: {e}")
            raise InternalServerError("crawl failed")
        finally:
            app_state.crawl_finished()
            crawler.fetcher.close()

        return to_operation_result("crawl", report.to_dict())


class ScrapeService:
    """Service for single-page scraping"""

    @staticmethod
    async def scrape(request: ScrapeRequest, config: CrawlConfig) -> OperationResult:
        url = _require_url(request.url)

        scraper = PageScraper(config)
        try:
            page = await scraper.scrape(url)
        except InvalidInput as e:
            raise InvalidUrlError(str(e))
        except FetchFailure as failure:
            logger.warning(f"Scrape of {url} failed: {failure.message}")
            raise fetch_failure_to_http(failure)
        finally:
            scraper.fetcher.close()

        return to_operation_result("scrape", page.to_dict())
