# link_scout/crawler/state.py
"""
Shared crawl state: visited set, frontier queue and findings collector.

Each structure guards its own mutations with a lock, so it is safe for
concurrent tasks as well as for callers running on other threads.
"""
from __future__ import annotations

import threading
from collections import deque
from typing import Deque, List, Optional, Set

from link_scout.crawler.models import CrawlTarget, Finding

__all__ = ("VisitedSet", "Frontier", "ResultCollector")


class VisitedSet:
    """Set of canonical URLs that have been claimed for processing."""

    def __init__(self) -> None:
        self._urls: Set[str] = set()
        self._lock = threading.Lock()

    def claim(self, url: str) -> bool:
        """Atomically mark *url* as visited; True only for the first caller."""
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)


class Frontier:
    """Unbounded FIFO of targets waiting to be processed."""

    def __init__(self) -> None:
        self._items: Deque[CrawlTarget] = deque()
        self._lock = threading.Lock()

    def push(self, target: CrawlTarget) -> None:
        with self._lock:
            self._items.append(target)

    def pop(self) -> Optional[CrawlTarget]:
        """Return the oldest pending target, or None when the queue is empty."""
        with self._lock:
            if not self._items:
                return None
            return self._items.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        return len(self) > 0


class ResultCollector:
    """Append-only list of findings, drained once the crawl is over."""

    def __init__(self) -> None:
        self._findings: List[Finding] = []
        self._lock = threading.Lock()

    def record(self, finding: Finding) -> None:
        with self._lock:
            self._findings.append(finding)

    def drain(self) -> List[Finding]:
        """Return the findings in record order and empty the collector."""
        with self._lock:
            findings, self._findings = self._findings, []
        return findings

    def __len__(self) -> int:
        with self._lock:
            return len(self._findings)
