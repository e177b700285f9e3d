"""
Configuration settings for the crawler
"""

from dataclasses import dataclass, field
from typing import Dict, List


DEFAULT_HEADERS: Dict[str, str] = {
    'User-Agent': (
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
    ),
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.8,es-ES;q=0.5,es;q=0.3',
    'Accept-Encoding': 'gzip, deflate',
    'DNT': '1',
    'Connection': 'keep-alive',
    'Upgrade-Insecure-Requests': '1',
}


@dataclass
class CrawlConfig:
    """Configuration class for crawler settings"""
    # Request settings
    request_timeout: float = 10.0
    scrape_timeout: float = 10.0
    request_delay: float = 0.5
    headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    # Job defaults
    default_max_depth: int = 2
    default_max_pages: int = 20
    default_same_origin_only: bool = True

    # Content extraction
    max_text_length: int = 3000
    text_removal_selectors: List[str] = field(default_factory=lambda: [
        'script', 'style', 'nav', 'header', 'footer', 'aside',
        '.nav', '.navigation', '.menu',
    ])
    no_title: str = "No title"
    no_description: str = "No description"
