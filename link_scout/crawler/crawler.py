# === FILE: link_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import contextlib
import time
from typing import AsyncContextManager, List, Optional, Set, Tuple

from link_scout.config import CrawlerConfig
from link_scout.crawler.fetcher import FetchOutcome, Fetcher, classify_status, final_url
from link_scout.crawler.link_extractor import extract_hrefs
from link_scout.crawler.models import SEED_REFERRER, CrawlTarget, Finding
from link_scout.crawler.normalizer import normalize_link
from link_scout.crawler.state import Frontier, ResultCollector, VisitedSet
from link_scout.logger import get_logger

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """
    Same-site broken link crawler.

    One instance owns the whole state of a single crawl: visited set,
    frontier, findings and the fetch permit pool. A URL is processed only
    after a successful ``visited.claim``; links are followed only from pages
    whose final URL starts with ``config.base_url``.
    """

    def __init__(self, config: CrawlerConfig, fetcher: Optional[Fetcher] = None) -> None:
        self.config = config
        self.base_url: str = config.base_url
        self.fetcher = fetcher
        self._owns_fetcher = fetcher is None
        self.visited = VisitedSet()
        self.frontier = Frontier()
        self.collector = ResultCollector()
        self.logger = get_logger("crawler")
        self._permits: Optional[asyncio.Semaphore] = (
            asyncio.Semaphore(config.concurrency) if config.concurrency else None
        )
        self.in_flight = 0

    async def __aenter__(self) -> AsyncCrawler:
        if self.fetcher is None:
            self.fetcher = Fetcher.from_config(self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_fetcher and self.fetcher is not None:
            await self.fetcher.close()

    # ------------------------------------------------------------------ #
    # Scheduler                                                          #
    # ------------------------------------------------------------------ #

    async def crawl(self) -> List[Finding]:
        """Crawl from ``base_url`` until nothing is queued or in flight; return findings."""
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized")
        self.logger.info("Starting crawl: %s", self.base_url)
        start = time.monotonic()
        self.frontier.push(CrawlTarget(self.base_url, SEED_REFERRER))

        pending: Set[asyncio.Task[None]] = set()
        try:
            while self.frontier or pending:
                self._dispatch(pending)
                if not pending:
                    continue
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                self.in_flight = len(pending)
                for task in done:
                    exc = task.exception()
                    if exc is not None:
                        self.logger.error("Worker failed: %r", exc, exc_info=exc)
        finally:
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            self.in_flight = 0

        duration = time.monotonic() - start
        self.logger.info(
            "Crawl finished: %d URLs checked, %d broken, %.2f s",
            len(self.visited), len(self.collector), duration,
        )
        return self.collector.drain()

    def _dispatch(self, pending: Set[asyncio.Task[None]]) -> None:
        limit = self.config.dispatch_limit
        while self.frontier and (limit is None or len(pending) < limit):
            target = self.frontier.pop()
            if target is None:
                break
            if target.url in self.visited:
                continue
            pending.add(asyncio.create_task(self.process(target)))
        self.in_flight = len(pending)

    # ------------------------------------------------------------------ #
    # Worker                                                             #
    # ------------------------------------------------------------------ #

    async def process(self, target: CrawlTarget) -> None:
        """Fetch one target, record it if missing, queue its outbound links."""
        if not self.visited.claim(target.url):
            return
        self.logger.info("Checking: %s", target.url)
        try:
            async with self._permit():
                page = await self._fetch(target)
            if page is None:
                return
            page_url, html = page
            for href in extract_hrefs(html):
                link = normalize_link(page_url, href, self.base_url, self.config.canonical_scheme)
                if link is not None:
                    self.frontier.push(CrawlTarget(link, page_url))
        except Exception as exc:
            self.logger.warning("Error processing %s: %s", target.url, str(exc) or type(exc).__name__)

    def _permit(self) -> AsyncContextManager[object]:
        if self._permits is None:
            return contextlib.nullcontext()
        return self._permits

    async def _fetch(self, target: CrawlTarget) -> Optional[Tuple[str, str]]:
        """Return ``(final_url, html)`` for an in-scope success, None otherwise."""
        assert self.fetcher is not None
        async with self.fetcher.open(target.url) as resp:
            outcome = classify_status(resp.status)
            if outcome is FetchOutcome.NOT_FOUND:
                finding = Finding(target.url, target.referrer)
                self.collector.record(finding)
                self.logger.warning("404 Error found: %s", finding.line())
                return None
            if outcome is FetchOutcome.SKIP:
                self.logger.debug("Skipping %s: HTTP %s", target.url, resp.status)
                return None

            page_url = final_url(resp)
            if page_url is None or not page_url.startswith(self.base_url):
                self.logger.debug("Out of scope: %s -> %s", target.url, page_url)
                return None

            return page_url, await resp.text()
