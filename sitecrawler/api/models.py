"""
Pydantic models for API requests and responses

Responses are a closed set of result shapes discriminated by ``kind``.
"""
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CrawlRequest(CamelModel):
    url: Optional[str] = None
    max_depth: int = Field(default=2, ge=0)
    max_pages: int = Field(default=20, ge=1)
    same_origin_only: bool = True


class ScrapeRequest(CamelModel):
    url: Optional[str] = None


class CrawledPage(CamelModel):
    url: str
    title: str
    description: str
    text: str
    images: List[str]
    links: List[str]
    status_code: int
    content_length: int
    depth: int
    crawled_at: str
    error: Optional[str] = None
    error_kind: Optional[str] = None


class CrawlSettings(CamelModel):
    max_depth: int
    max_pages: int
    same_origin_only: bool


class CrawlStatistics(CamelModel):
    total_pages_crawled: int
    successful_pages: int
    failed_pages: int
    total_images: int
    total_links: int
    unique_urls: int
    average_content_length: int
    crawl_depth_reached: int


class DepthCount(CamelModel):
    depth: int
    count: int


class CrawlSummary(CamelModel):
    pages_by_depth: List[DepthCount]
    status_codes: Dict[int, int]


class CrawlResult(CamelModel):
    kind: Literal["crawl"] = "crawl"
    start_url: str
    crawl_settings: CrawlSettings
    crawled_pages: List[CrawledPage]
    statistics: CrawlStatistics
    summary: CrawlSummary
    cancelled: bool = False
    timestamp: str


class ScrapeResult(CamelModel):
    kind: Literal["scrape"] = "scrape"
    url: str
    title: str
    description: str
    images: List[str]
    links: List[str]
    text: str
    timestamp: str
    total_images: int
    total_links: int
    text_length: int


OperationResult = Annotated[Union[CrawlResult, ScrapeResult], Field(discriminator="kind")]

_operation_result_adapter = TypeAdapter(OperationResult)


def to_operation_result(kind: str, payload: dict) -> OperationResult:
    """Validate an engine payload into the result variant tagged by ``kind``"""
    return _operation_result_adapter.validate_python({**payload, 'kind': kind})


class HealthResponse(BaseModel):
    status: str
    active_crawls: int
    version: str
