# File: link_scout/engine.py
"""link_scout.engine: Orchestration layer для запуска обхода и сборки отчёта."""

from __future__ import annotations

import asyncio
import time
from typing import Optional

from link_scout.aggregator import CrawlReport, build_report
from link_scout.config import CrawlerConfig
from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.fetcher import Fetcher
from link_scout.logger import logger

__all__ = ["start_scan"]


async def start_scan(
    config: CrawlerConfig,
    *,
    scan_timeout: Optional[float] = None,
    fetcher: Optional[Fetcher] = None,
) -> CrawlReport:
    """
    Запускает AsyncCrawler в контексте и возвращает CrawlReport.

    Parameters
    ----------
    config : CrawlerConfig
        Конфигурация обхода.
    scan_timeout : float, optional
        Таймаут всего обхода (секунд). По истечении возвращается
        частичный отчёт с ``completed=False``.
    fetcher : Fetcher, optional
        Готовый HTTP-клиент; по умолчанию создаётся из конфигурации.
    """
    start = time.monotonic()
    completed = True
    async with AsyncCrawler(config, fetcher=fetcher) as crawler:
        try:
            findings = await asyncio.wait_for(crawler.crawl(), timeout=scan_timeout)
        except asyncio.TimeoutError:
            logger.warning("Crawl did not finish within %s seconds, keeping partial results", scan_timeout)
            findings = crawler.collector.drain()
            completed = False
        pages_checked = len(crawler.visited)

    return build_report(
        config.base_url,
        findings,
        pages_checked=pages_checked,
        duration=time.monotonic() - start,
        completed=completed,
    )
