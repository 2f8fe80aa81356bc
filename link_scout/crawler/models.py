# link_scout/crawler/models.py
"""
Data models for the LinkScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass

#: Referrer recorded for the crawl seed.
SEED_REFERRER = "Initial URL"


@dataclass(frozen=True, slots=True)
class CrawlTarget:
    """One discovery event: a URL and the page that linked to it."""

    url: str
    referrer: str


@dataclass(frozen=True, slots=True)
class Finding:
    """A link that resolved to 404 Not Found, with the page that referenced it."""

    url: str
    referrer: str

    def line(self) -> str:
        return f"{self.url} (linked from {self.referrer})"
