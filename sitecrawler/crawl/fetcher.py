"""
Single bounded HTTP GET with a fixed header profile
"""

import logging
import socket
from typing import Dict, Optional

import requests

from .config import CrawlConfig
from .errors import FetchErrorKind, FetchFailure
from .models import FetchResponse


logger = logging.getLogger(__name__)

ERROR_MESSAGES: Dict[FetchErrorKind, str] = {
    FetchErrorKind.DOMAIN_UNRESOLVED: "Could not resolve domain",
    FetchErrorKind.TIMEOUT: "Connection timed out",
    FetchErrorKind.FORBIDDEN: "Access denied",
    FetchErrorKind.NOT_FOUND: "Page not found",
}


def _is_name_resolution_error(exc: BaseException) -> bool:
    """Walk the wrapped exception chain looking for a DNS failure"""
    seen = set()
    pending = [exc]
    while pending:
        current = pending.pop()
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))

        if isinstance(current, socket.gaierror):
            return True
        if type(current).__name__ == "NameResolutionError":
            return True

        pending.append(current.__cause__)
        pending.append(current.__context__)
        pending.append(getattr(current, 'reason', None))
        pending.extend(arg for arg in getattr(current, 'args', ()) if isinstance(arg, BaseException))
    return False


def declared_encoding(response: requests.Response) -> Optional[str]:
    """Charset from the Content-Type header, or None when the server gave none"""
    content_type = response.headers.get('Content-Type', '')
    if 'charset=' not in content_type.lower():
        return None
    return response.encoding


def classify_status(status_code: int, strict: bool = False) -> Optional[FetchFailure]:
    """Map an HTTP status to a FetchFailure, or None if it is acceptable"""
    if status_code >= 500:
        return FetchFailure(
            FetchErrorKind.SERVER_ERROR,
            f"Server error ({status_code})",
            status_code=status_code,
        )
    if not strict or status_code < 400:
        return None
    if status_code == 403:
        return FetchFailure(FetchErrorKind.FORBIDDEN, ERROR_MESSAGES[FetchErrorKind.FORBIDDEN], status_code)
    if status_code == 404:
        return FetchFailure(FetchErrorKind.NOT_FOUND, ERROR_MESSAGES[FetchErrorKind.NOT_FOUND], status_code)
    return FetchFailure(FetchErrorKind.OTHER, f"Request failed with status code {status_code}", status_code)


def classify_exception(exc: requests.RequestException) -> FetchFailure:
    """Map a transport-level exception to a FetchFailure"""
    response = getattr(exc, 'response', None)
    status_code = response.status_code if response is not None else 0

    if isinstance(exc, requests.exceptions.Timeout):
        return FetchFailure(FetchErrorKind.TIMEOUT, ERROR_MESSAGES[FetchErrorKind.TIMEOUT], status_code)
    if isinstance(exc, requests.exceptions.ConnectionError) and _is_name_resolution_error(exc):
        return FetchFailure(
            FetchErrorKind.DOMAIN_UNRESOLVED,
            ERROR_MESSAGES[FetchErrorKind.DOMAIN_UNRESOLVED],
            status_code,
        )
    if status_code:
        failure = classify_status(status_code, strict=True)
        if failure is not None:
            return failure
    return FetchFailure(FetchErrorKind.OTHER, str(exc) or type(exc).__name__, status_code)


class PageFetcher:
    """Performs one GET per call; no retries"""

    def __init__(self, config: CrawlConfig = None, session: requests.Session = None):
        self.config = config or CrawlConfig()
        self.session = session or requests.Session()
        self.session.headers.update(self.config.headers)

    def fetch(self, url: str, timeout: float = None, strict: bool = False) -> FetchResponse:
        """Fetch ``url``; raises FetchFailure when no usable response came back.

        In the default (crawl) mode every status below 500 is accepted and the
        body is still handed to the extractor. ``strict`` mode only accepts
        statuses below 400.
        """
        timeout = self.config.request_timeout if timeout is None else timeout

        try:
            response = self.session.get(url, timeout=timeout)
        except requests.RequestException as e:
            failure = classify_exception(e)
            logger.debug(f"Fetch of {url} failed: {failure!r}")
            raise failure from e

        failure = classify_status(response.status_code, strict=strict)
        if failure is not None:
            raise failure

        return FetchResponse(
            url=url,
            status_code=response.status_code,
            content=response.content,
            encoding=declared_encoding(response),
        )

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
