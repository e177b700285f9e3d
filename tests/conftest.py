"""
Shared test helpers: an in-memory fetcher and small HTML builders
"""

import pytest

from sitecrawler.crawl import CrawlConfig, FetchErrorKind, FetchFailure
from sitecrawler.crawl.models import FetchResponse


def html_page(title="Page", links=(), images=(), body=""):
    """Build a small HTML document"""
    anchors = "".join(f'<a href="{href}">{href}</a>' for href in links)
    imgs = "".join(f'<img src="{src}">' for src in images)
    return (
        f"<html><head><title>{title}</title></head>"
        f"<body><p>{body or title}</p>{anchors}{imgs}</body></html>"
    ).encode("utf-8")


class FakeFetcher:
    """Serves canned pages; anything unknown is a 404 page"""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []

    def fetch(self, url, timeout=None, strict=False):
        self.calls.append(url)
        page = self.pages.get(url)
        if isinstance(page, FetchFailure):
            raise page
        if page is None:
            status, content = 404, b"<html><body>Not found</body></html>"
        elif isinstance(page, tuple):
            status, content = page
        else:
            status, content = 200, page

        if status >= 500:
            raise FetchFailure(FetchErrorKind.SERVER_ERROR, f"Server error ({status})", status)
        if strict and status >= 400:
            raise FetchFailure(FetchErrorKind.NOT_FOUND, "Page not found", status)
        return FetchResponse(url=url, status_code=status, content=content)

    def close(self):
        pass


@pytest.fixture
def config():
    return CrawlConfig(request_delay=0)
