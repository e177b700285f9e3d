"""
FastAPI dependencies for shared application state
"""
import threading

from fastapi import Depends

from sitecrawler.api.config import settings
from sitecrawler.api.exceptions import ApplicationStartupIncomplete
from sitecrawler.crawl.config import CrawlConfig


class AppState:
    """Singleton holding application-wide state"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.crawl_config = None
            cls._instance.app_startup_complete = False
            cls._instance.active_crawls = 0
            cls._instance._lock = threading.Lock()
        return cls._instance

    def set_crawl_config(self, config: CrawlConfig):
        self.crawl_config = config

    def get_crawl_config(self) -> CrawlConfig:
        if self.crawl_config is None:
            self.crawl_config = settings.crawl_config()
        return self.crawl_config

    def set_startup_complete(self, status: bool):
        self.app_startup_complete = status

    def is_startup_complete(self) -> bool:
        return self.app_startup_complete

    def crawl_started(self):
        with self._lock:
            self.active_crawls += 1

    def crawl_finished(self):
        with self._lock:
            self.active_crawls -= 1


def get_app_state() -> AppState:
    """Dependency returning the app state"""
    return AppState()


def get_crawl_config(app_state: AppState = Depends(get_app_state)) -> CrawlConfig:
    """Dependency returning the crawl configuration once startup is complete"""
    if not app_state.is_startup_complete():
        raise ApplicationStartupIncomplete()
    return app_state.get_crawl_config()
