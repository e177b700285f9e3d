"""
API routes module

Route handlers for the crawl, scrape, health and root endpoints.
"""

from . import crawl, scrape, health, root

from .crawl import router as crawl_router
from .scrape import router as scrape_router
from .health import router as health_router
from .root import router as root_router

__all__ = [
    # Modules
    'crawl',
    'scrape',
    'health',
    'root',

    # Routers
    'crawl_router',
    'scrape_router',
    'health_router',
    'root_router'
]
