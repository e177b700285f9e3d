"""
Frontier management: FIFO work queue, visited tracking and admission policy
"""

import logging
import threading
from collections import deque
from typing import Deque, Optional, Set

from .models import CrawlJob, FrontierEntry
from .url_resolver import host_of


logger = logging.getLogger(__name__)


class VisitedSet:
    """Addresses popped from the frontier at least once; never shrinks"""

    def __init__(self):
        self._urls: Set[str] = set()
        self._lock = threading.Lock()

    def add(self, url: str) -> bool:
        """Insert ``url``; returns False if it was already present"""
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def __contains__(self, url: str) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)


class Frontier:
    """Breadth-first work queue for one crawl job"""

    def __init__(self, job: CrawlJob):
        self.job = job
        self.visited = VisitedSet()
        self._queue: Deque[FrontierEntry] = deque()
        self._queued: Set[str] = set()
        self._lock = threading.Lock()

    def seed(self):
        self._push(FrontierEntry(self.job.seed_url, 0))

    def _push(self, entry: FrontierEntry):
        self._queue.append(entry)
        self._queued.add(entry.url)

    def pop(self) -> Optional[FrontierEntry]:
        with self._lock:
            if not self._queue:
                return None
            entry = self._queue.popleft()
            self._queued.discard(entry.url)
            return entry

    def mark_visited(self, url: str) -> bool:
        return self.visited.add(url)

    def is_queued(self, url: str) -> bool:
        return url in self._queued

    def admit(self, candidate: str, from_depth: int, produced: int) -> bool:
        """Enqueue ``candidate`` at ``from_depth + 1`` if the job policy allows it"""
        job = self.job
        if from_depth >= job.max_depth:
            return False
        if produced >= job.max_pages:
            return False
        if job.same_origin_only and host_of(candidate) != job.seed_host:
            return False

        with self._lock:
            if candidate in self.visited or candidate in self._queued:
                return False
            self._push(FrontierEntry(candidate, from_depth + 1))

        logger.debug(f"Queued {candidate} at depth {from_depth + 1}")
        return True

    def __len__(self) -> int:
        return len(self._queue)
