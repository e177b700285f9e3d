"""
Aggregate statistics over the final page-result sequence
"""

from collections import Counter
from typing import Sequence

from .models import CrawlJob, CrawlReport, CrawlStatistics, CrawlSummary, PageResult


def build_report(job: CrawlJob, pages: Sequence[PageResult], visited_count: int,
                 cancelled: bool = False) -> CrawlReport:
    """Fold the ordered page results into a CrawlReport"""
    pages = tuple(pages)
    successful = [page for page in pages if page.ok]

    average_content_length = 0
    if successful:
        # Half-up rounding, not round()'s half-to-even
        average_content_length = int(
            sum(page.content_length for page in successful) / len(successful) + 0.5
        )

    statistics = CrawlStatistics(
        total_pages_crawled=len(pages),
        successful_pages=len(successful),
        failed_pages=len(pages) - len(successful),
        total_images=sum(len(page.images) for page in pages),
        total_links=sum(len(page.links) for page in pages),
        unique_urls=visited_count,
        average_content_length=average_content_length,
        crawl_depth_reached=max((page.depth for page in pages), default=0),
    )

    depth_counts = Counter(page.depth for page in pages)
    summary = CrawlSummary(
        pages_by_depth=tuple((depth, depth_counts.get(depth, 0)) for depth in range(job.max_depth + 1)),
        status_codes=dict(Counter(page.status_code for page in pages)),
    )

    return CrawlReport(
        job=job,
        pages=pages,
        statistics=statistics,
        summary=summary,
        cancelled=cancelled,
    )
