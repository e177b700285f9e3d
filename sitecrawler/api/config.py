"""
Configuration management for the API
"""
import os
from typing import List

from dotenv import load_dotenv

from sitecrawler.crawl.config import CrawlConfig

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Settings:
    """Application settings from environment variables"""

    # Server configuration
    PORT: int = int(os.getenv("PORT", 8000))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    RELOAD: bool = _env_bool("RELOAD", "false")

    # Logging configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Crawl configuration
    CRAWL_REQUEST_TIMEOUT: float = float(os.getenv("CRAWL_REQUEST_TIMEOUT", 10.0))
    CRAWL_REQUEST_DELAY: float = float(os.getenv("CRAWL_REQUEST_DELAY", 0.5))
    CRAWL_MAX_TEXT_LENGTH: int = int(os.getenv("CRAWL_MAX_TEXT_LENGTH", 3000))

    # Upper bounds accepted from API clients
    CRAWL_MAX_PAGES_LIMIT: int = int(os.getenv("CRAWL_MAX_PAGES_LIMIT", 100))
    CRAWL_MAX_DEPTH_LIMIT: int = int(os.getenv("CRAWL_MAX_DEPTH_LIMIT", 5))

    # API configuration
    API_TITLE: str = "Site Crawler API"
    API_DESCRIPTION: str = "Crawl a website from a seed URL and extract structured page content"
    API_VERSION: str = "1.0.0"

    # CORS configuration
    CORS_ORIGINS: List[str] = _env_list("CORS_ORIGINS", "*")

    def crawl_config(self) -> CrawlConfig:
        """Build the crawl engine configuration"""
        return CrawlConfig(
            request_timeout=self.CRAWL_REQUEST_TIMEOUT,
            scrape_timeout=self.CRAWL_REQUEST_TIMEOUT,
            request_delay=self.CRAWL_REQUEST_DELAY,
            max_text_length=self.CRAWL_MAX_TEXT_LENGTH,
        )


# Global settings instance
settings = Settings()
