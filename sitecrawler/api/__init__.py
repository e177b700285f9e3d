"""
API module for the site crawler

FastAPI app factory, settings, request/response models, routes and
HTTP exceptions.
"""

from .app import create_app
from .config import settings
from .models import (
    CrawlRequest,
    CrawlResult,
    ScrapeRequest,
    ScrapeResult,
    OperationResult,
    HealthResponse,
    to_operation_result
)
from .exceptions import (
    ApplicationStartupIncomplete,
    UrlRequiredError,
    InvalidUrlError,
    CrawlLimitError,
    DomainUnresolvedError,
    FetchTimeoutError,
    AccessDeniedError,
    PageNotFoundError,
    InternalServerError
)
from .dependencies import AppState

__all__ = [
    # App factory
    'create_app',

    # Configuration
    'settings',

    # Models
    'CrawlRequest',
    'CrawlResult',
    'ScrapeRequest',
    'ScrapeResult',
    'OperationResult',
    'HealthResponse',
    'to_operation_result',

    # Exceptions
    'ApplicationStartupIncomplete',
    'UrlRequiredError',
    'InvalidUrlError',
    'CrawlLimitError',
    'DomainUnresolvedError',
    'FetchTimeoutError',
    'AccessDeniedError',
    'PageNotFoundError',
    'InternalServerError',

    # Dependencies
    'AppState'
]
