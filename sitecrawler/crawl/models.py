"""
Data models for the crawler
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from .errors import FetchFailure


def utc_timestamp() -> str:
    """Current UTC time in ISO-8601 format"""
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class CrawlJob:
    """Validated, immutable crawl job parameters"""
    seed_url: str
    seed_host: str
    max_depth: int = 2
    max_pages: int = 20
    same_origin_only: bool = True


@dataclass(frozen=True)
class FrontierEntry:
    url: str
    depth: int


@dataclass(frozen=True)
class FetchResponse:
    """Raw outcome of a successful fetch"""
    url: str
    status_code: int
    content: bytes
    encoding: Optional[str] = None


@dataclass(frozen=True)
class ExtractedContent:
    """Structured content extracted from one page"""
    title: str
    description: str
    text: str
    images: Tuple[str, ...] = ()
    links: Tuple[str, ...] = ()
    raw_image_count: int = 0
    raw_link_count: int = 0


@dataclass(frozen=True)
class PageResult:
    """Outcome of processing one frontier entry, success or failure"""
    url: str
    depth: int
    status_code: int
    content_length: int
    title: str
    description: str
    text: str = ""
    images: Tuple[str, ...] = ()
    links: Tuple[str, ...] = ()
    crawled_at: str = field(default_factory=utc_timestamp)
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, entry: FrontierEntry, status_code: int, content: ExtractedContent,
                max_text_length: int) -> "PageResult":
        return cls(
            url=entry.url,
            depth=entry.depth,
            status_code=status_code,
            content_length=len(content.text),
            title=content.title,
            description=content.description,
            text=content.text[:max_text_length],
            images=content.images,
            links=content.links,
        )

    @classmethod
    def failure(cls, entry: FrontierEntry, failure: FetchFailure) -> "PageResult":
        return cls(
            url=entry.url,
            depth=entry.depth,
            status_code=failure.status_code,
            content_length=0,
            title="Error",
            description=failure.message,
            error=failure.message,
            error_kind=failure.kind.value,
        )

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization"""
        data = {
            'url': self.url,
            'title': self.title,
            'description': self.description,
            'text': self.text,
            'images': list(self.images),
            'links': list(self.links),
            'status_code': self.status_code,
            'content_length': self.content_length,
            'depth': self.depth,
            'crawled_at': self.crawled_at,
        }
        if self.error is not None:
            data['error'] = self.error
            data['error_kind'] = self.error_kind
        return data


@dataclass(frozen=True)
class CrawlStatistics:
    total_pages_crawled: int
    successful_pages: int
    failed_pages: int
    total_images: int
    total_links: int
    unique_urls: int
    average_content_length: int
    crawl_depth_reached: int


@dataclass(frozen=True)
class CrawlSummary:
    pages_by_depth: Tuple[Tuple[int, int], ...]
    status_codes: Dict[int, int]


@dataclass(frozen=True)
class CrawlReport:
    """Final report of one crawl job; built once after the loop terminates"""
    job: CrawlJob
    pages: Tuple[PageResult, ...]
    statistics: CrawlStatistics
    summary: CrawlSummary
    cancelled: bool = False
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization"""
        return {
            'start_url': self.job.seed_url,
            'crawl_settings': {
                'max_depth': self.job.max_depth,
                'max_pages': self.job.max_pages,
                'same_origin_only': self.job.same_origin_only,
            },
            'crawled_pages': [page.to_dict() for page in self.pages],
            'statistics': {
                'total_pages_crawled': self.statistics.total_pages_crawled,
                'successful_pages': self.statistics.successful_pages,
                'failed_pages': self.statistics.failed_pages,
                'total_images': self.statistics.total_images,
                'total_links': self.statistics.total_links,
                'unique_urls': self.statistics.unique_urls,
                'average_content_length': self.statistics.average_content_length,
                'crawl_depth_reached': self.statistics.crawl_depth_reached,
            },
            'summary': {
                'pages_by_depth': [
                    {'depth': depth, 'count': count}
                    for depth, count in self.summary.pages_by_depth
                ],
                'status_codes': dict(self.summary.status_codes),
            },
            'cancelled': self.cancelled,
            'timestamp': self.timestamp,
        }


@dataclass(frozen=True)
class ScrapedPage:
    """Single-page scrape result"""
    url: str
    status_code: int
    content: ExtractedContent
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict:
        return {
            'url': self.url,
            'title': self.content.title,
            'description': self.content.description,
            'images': list(self.content.images),
            'links': list(self.content.links),
            'text': self.content.text,
            'timestamp': self.timestamp,
            'total_images': self.content.raw_image_count,
            'total_links': self.content.raw_link_count,
            'text_length': len(self.content.text),
        }
