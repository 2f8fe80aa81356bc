# link_scout/crawler/fetcher.py
"""
Fetcher module: HTTP access for the crawler and response classification.
"""
from __future__ import annotations

import enum
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from aiohttp import ClientResponse, ClientSession, ClientTimeout

from link_scout.config import CrawlerConfig

__all__ = ("FetchOutcome", "classify_status", "final_url", "Fetcher")


class FetchOutcome(enum.Enum):
    """What the crawler does with a response after reading its headers."""

    NOT_FOUND = "not_found"
    SKIP = "skip"
    FOLLOW = "follow"


def classify_status(status: int) -> FetchOutcome:
    """
    Map an HTTP status to a crawler decision.

    404 is the only reported failure; every other non-2xx status
    (including 5xx) is skipped without a finding.
    """
    if status == 404:
        return FetchOutcome.NOT_FOUND
    if 200 <= status < 300:
        return FetchOutcome.FOLLOW
    return FetchOutcome.SKIP


def final_url(resp: object) -> Optional[str]:
    """Post-redirect URL of *resp* as a string, or None when unknown."""
    url = getattr(resp, "url", None)
    return str(url) if url else None


class Fetcher:
    """Thin wrapper over an aiohttp session that follows redirects."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    @classmethod
    def from_config(cls, config: CrawlerConfig) -> "Fetcher":
        """Create a fetcher with its own session (timeout and User-Agent from *config*)."""
        session = ClientSession(
            timeout=ClientTimeout(total=config.timeout),
            headers={"User-Agent": config.user_agent},
            raise_for_status=False,
        )
        return cls(session)

    @asynccontextmanager
    async def open(self, url: str) -> AsyncIterator[ClientResponse]:
        """
        Send GET for *url* and yield the response once headers are in.

        The body is not read here; ``response.url`` is the final URL after
        redirects and ``await response.text()`` reads the body.
        """
        async with self.session.get(url, allow_redirects=True) as resp:
            yield resp

    async def close(self) -> None:
        if not self.session.closed:
            await self.session.close()
