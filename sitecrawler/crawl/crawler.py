"""
Crawl orchestrator: breadth-first traversal with isolated per-page failures
"""

import asyncio
import logging
import threading
from enum import Enum
from typing import List, Optional

from .config import CrawlConfig
from .errors import CrawlerError, FetchErrorKind, FetchFailure, InvalidInput, OrchestrationFault
from .extractor import ContentExtractor
from .fetcher import PageFetcher
from .frontier import Frontier
from .models import CrawlJob, CrawlReport, FrontierEntry, PageResult
from .report import build_report
from .url_resolver import host_of, validate_seed


logger = logging.getLogger(__name__)


class CrawlState(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"


class CancellationToken:
    """Cooperative cancellation flag checked between crawl iterations"""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


def create_job(url: str, max_depth: Optional[int] = None, max_pages: Optional[int] = None,
               same_origin_only: Optional[bool] = None, config: CrawlConfig = None) -> CrawlJob:
    """Validate job parameters and build an immutable CrawlJob"""
    config = config or CrawlConfig()
    seed_url = validate_seed(url)

    max_depth = config.default_max_depth if max_depth is None else max_depth
    max_pages = config.default_max_pages if max_pages is None else max_pages
    if same_origin_only is None:
        same_origin_only = config.default_same_origin_only

    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        raise InvalidInput(f"max_depth must be an integer >= 0, got {max_depth!r}")
    if isinstance(max_pages, bool) or not isinstance(max_pages, int) or max_pages < 1:
        raise InvalidInput(f"max_pages must be an integer >= 1, got {max_pages!r}")

    return CrawlJob(
        seed_url=seed_url,
        seed_host=host_of(seed_url),
        max_depth=max_depth,
        max_pages=max_pages,
        same_origin_only=bool(same_origin_only),
    )


class WebCrawler:
    """Runs exactly one crawl job and produces its CrawlReport"""

    def __init__(self, job: CrawlJob, config: CrawlConfig = None,
                 fetcher: PageFetcher = None, extractor: ContentExtractor = None):
        self.job = job
        self.config = config or CrawlConfig()
        self.fetcher = fetcher or PageFetcher(self.config)
        self.extractor = extractor or ContentExtractor(self.config)

        self.frontier = Frontier(job)
        self.pages: List[PageResult] = []
        self.state = CrawlState.PENDING

    async def crawl(self, cancel_token: CancellationToken = None) -> CrawlReport:
        """Drive the crawl loop to completion and aggregate the report"""
        if self.state is not CrawlState.PENDING:
            raise OrchestrationFault(f"Crawler for {self.job.seed_url} has already run")

        self.state = CrawlState.RUNNING
        logger.info(
            f"Starting crawl of {self.job.seed_url} "
            f"(max_depth={self.job.max_depth}, max_pages={self.job.max_pages}, "
            f"same_origin_only={self.job.same_origin_only})"
        )

        try:
            cancelled = await self._crawl_loop(cancel_token)
        except CrawlerError:
            raise
        except Exception as e:
            logger.exception(f"Crawl of {self.job.seed_url} aborted")
            raise OrchestrationFault(f"Crawl of {self.job.seed_url} aborted: {e}", cause=e) from e

        self.state = CrawlState.COMPLETED
        report = build_report(self.job, self.pages, len(self.frontier.visited), cancelled=cancelled)

        stats = report.statistics
        logger.info(
            f"Crawl of {self.job.seed_url} finished: {stats.total_pages_crawled} pages "
            f"({stats.successful_pages} ok, {stats.failed_pages} failed)"
            + (" [cancelled]" if cancelled else "")
        )
        return report

    async def _crawl_loop(self, cancel_token: Optional[CancellationToken]) -> bool:
        job = self.job
        self.frontier.seed()

        while len(self.frontier) and len(self.pages) < job.max_pages:
            if cancel_token is not None and cancel_token.cancelled:
                logger.info(f"Crawl of {job.seed_url} cancelled after {len(self.pages)} pages")
                return True

            entry = self.frontier.pop()
            if not self.frontier.mark_visited(entry.url):
                continue
            if entry.depth > job.max_depth:
                logger.debug(f"Skipping {entry.url}: depth {entry.depth} exceeds {job.max_depth}")
                continue

            page, links = await self._process_entry(entry)
            self.pages.append(page)

            admitted = 0
            for link in links:
                if self.frontier.admit(link, entry.depth, len(self.pages)):
                    admitted += 1
            if admitted:
                logger.debug(f"{entry.url}: queued {admitted} of {len(links)} links")

            if len(self.frontier) and len(self.pages) < job.max_pages and self.config.request_delay > 0:
                await asyncio.sleep(self.config.request_delay)

        return False

    async def _process_entry(self, entry: FrontierEntry):
        """Fetch and extract one entry; failures become failure results"""
        logger.info(f"Crawling (depth {entry.depth}): {entry.url}")

        try:
            response = await asyncio.to_thread(self.fetcher.fetch, entry.url)
        except FetchFailure as failure:
            logger.warning(f"Error crawling {entry.url}: {failure.message}")
            return PageResult.failure(entry, failure), ()

        try:
            content = self.extractor.extract(response.content, entry.url, response.encoding)
        except Exception as e:
            logger.warning(f"Extraction failed for {entry.url}: {e}")
            failure = FetchFailure(FetchErrorKind.OTHER, f"Extraction failed: {e}", response.status_code)
            return PageResult.failure(entry, failure), ()

        page = PageResult.success(entry, response.status_code, content, self.config.max_text_length)
        return page, content.links
