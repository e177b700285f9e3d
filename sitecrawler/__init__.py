"""
Site crawler package

- crawl: crawl engine (resolver, fetcher, extractor, frontier, orchestrator)
- api: FastAPI application and routes
- cli: command line interface
"""

from . import crawl, api

__version__ = "1.0.0"

__all__ = [
    'crawl',
    'api',
    '__version__'
]
