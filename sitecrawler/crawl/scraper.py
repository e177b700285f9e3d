"""
Single-page scrape: one strict fetch plus extraction, no frontier
"""

import asyncio
import logging

from .config import CrawlConfig
from .extractor import ContentExtractor
from .fetcher import PageFetcher
from .models import ScrapedPage
from .url_resolver import validate_seed


logger = logging.getLogger(__name__)


class PageScraper:
    """Fetches and extracts a single page; fetch failures propagate"""

    def __init__(self, config: CrawlConfig = None, fetcher: PageFetcher = None,
                 extractor: ContentExtractor = None):
        self.config = config or CrawlConfig()
        self.fetcher = fetcher or PageFetcher(self.config)
        self.extractor = extractor or ContentExtractor(self.config)

    async def scrape(self, url: str) -> ScrapedPage:
        url = validate_seed(url)
        logger.info(f"Scraping {url}")

        response = await asyncio.to_thread(
            self.fetcher.fetch, url, self.config.scrape_timeout, True
        )
        content = self.extractor.extract(response.content, url, response.encoding)
        return ScrapedPage(url=url, status_code=response.status_code, content=content)
