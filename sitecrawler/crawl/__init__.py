"""
Crawl engine package

Contains the address resolver, page fetcher, content extractor, frontier,
crawl orchestrator, single-page scraper and report aggregation.
"""

from .config import CrawlConfig
from .crawler import CancellationToken, CrawlState, WebCrawler, create_job
from .errors import (
    CrawlerError,
    FetchErrorKind,
    FetchFailure,
    InvalidInput,
    NormalizationError,
    OrchestrationFault,
)
from .extractor import ContentExtractor
from .fetcher import PageFetcher
from .frontier import Frontier, VisitedSet
from .models import CrawlJob, CrawlReport, ExtractedContent, FrontierEntry, PageResult, ScrapedPage
from .report import build_report
from .scraper import PageScraper
from .url_resolver import resolve, try_resolve, validate_seed

__all__ = [
    # Orchestration
    'WebCrawler',
    'CrawlState',
    'CancellationToken',
    'create_job',
    'PageScraper',

    # Configuration
    'CrawlConfig',

    # Components
    'PageFetcher',
    'ContentExtractor',
    'Frontier',
    'VisitedSet',
    'build_report',
    'resolve',
    'try_resolve',
    'validate_seed',

    # Data models
    'CrawlJob',
    'CrawlReport',
    'ExtractedContent',
    'FrontierEntry',
    'PageResult',
    'ScrapedPage',

    # Errors
    'CrawlerError',
    'InvalidInput',
    'NormalizationError',
    'FetchFailure',
    'FetchErrorKind',
    'OrchestrationFault',
]
