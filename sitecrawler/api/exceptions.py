"""
Custom exceptions for the API
"""
from fastapi import HTTPException

from sitecrawler.crawl.errors import FetchErrorKind, FetchFailure


class ApplicationStartupIncomplete(HTTPException):
    def __init__(self):
        super().__init__(status_code=503, detail="Application is still starting up")


class UrlRequiredError(HTTPException):
    def __init__(self):
        super().__init__(status_code=400, detail="URL is required")


class InvalidUrlError(HTTPException):
    def __init__(self, detail: str = "Invalid URL"):
        super().__init__(status_code=400, detail=detail)


class CrawlLimitError(HTTPException):
    def __init__(self, field: str, limit: int):
        super().__init__(
            status_code=400,
            detail=f"{field} cannot exceed {limit}"
        )


class DomainUnresolvedError(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=400,
            detail="Could not connect to the website. Check the URL."
        )


class FetchTimeoutError(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=408,
            detail="Timeout: the website took too long to respond."
        )


class AccessDeniedError(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=403,
            detail="Access denied: the website blocks scraping."
        )


class PageNotFoundError(HTTPException):
    def __init__(self):
        super().__init__(status_code=404, detail="Page not found (404).")


class InternalServerError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=500, detail=f"Internal server error: {detail}")


def fetch_failure_to_http(failure: FetchFailure) -> HTTPException:
    """Map a scrape fetch failure to the matching HTTP error"""
    if failure.kind is FetchErrorKind.DOMAIN_UNRESOLVED:
        return DomainUnresolvedError()
    if failure.kind is FetchErrorKind.TIMEOUT:
        return FetchTimeoutError()
    if failure.kind is FetchErrorKind.FORBIDDEN:
        return AccessDeniedError()
    if failure.kind is FetchErrorKind.NOT_FOUND:
        return PageNotFoundError()
    return InternalServerError(failure.message)
