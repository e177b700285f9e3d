"""
Exception hierarchy for the crawl engine
"""

from enum import Enum
from typing import Optional


class CrawlerError(Exception):
    """Base class for all crawler errors"""


class InvalidInput(CrawlerError):
    """Seed address or job parameters were rejected before any network activity"""


class NormalizationError(CrawlerError):
    """A candidate address could not be resolved to an absolute address"""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Cannot resolve {raw!r}: {reason}")


class FetchErrorKind(str, Enum):
    DOMAIN_UNRESOLVED = "domain_unresolved"
    TIMEOUT = "timeout"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    OTHER = "other"


class FetchFailure(CrawlerError):
    """A single fetch did not produce a usable response"""

    def __init__(self, kind: FetchErrorKind, message: str, status_code: int = 0):
        self.kind = kind
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __repr__(self) -> str:
        return f"FetchFailure(kind={self.kind.value}, status_code={self.status_code}, message={self.message!r})"


class OrchestrationFault(CrawlerError):
    """Unexpected internal fault that aborts the whole crawl job"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)
