# File: tests/conftest.py
import asyncio
from collections import Counter
from contextlib import asynccontextmanager
from typing import Any, Callable, Dict

import pytest

from link_scout.config import CrawlerConfig
from link_scout.logger import configure

BASE = "https://ex.com"


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse."""

    def __init__(self, status: int, url: Any, body: Any = "") -> None:
        self.status = status
        self.url = url
        self._body = body
        self.body_read = False

    async def text(self) -> str:
        self.body_read = True
        if isinstance(self._body, BaseException):
            raise self._body
        return self._body


class FakeFetcher:
    """
    In-memory site. Values of *pages*:

    * ``str`` – HTML served with 200;
    * ``int`` – bare status code;
    * ``dict`` – keys ``status``, ``body``, ``final_url``, ``delay``;
    * an exception instance – raised when the URL is opened.

    Unknown URLs answer 404.
    """

    def __init__(self, pages: Dict[str, Any], delay: float = 0.0) -> None:
        self.pages = pages
        self.delay = delay
        self.calls: Counter = Counter()
        self.responses: Dict[str, FakeResponse] = {}
        self.active = 0
        self.max_active = 0
        self.closed = False

    @asynccontextmanager
    async def open(self, url: str):
        self.calls[url] += 1
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            spec = self.pages.get(url, 404)
            if isinstance(spec, BaseException):
                await asyncio.sleep(self.delay)
                raise spec
            if isinstance(spec, str):
                spec = {"body": spec}
            elif isinstance(spec, int):
                spec = {"status": spec}
            await asyncio.sleep(spec.get("delay", self.delay))
            resp = FakeResponse(
                spec.get("status", 200),
                spec.get("final_url", url),
                spec.get("body", ""),
            )
            self.responses[url] = resp
            yield resp
        finally:
            self.active -= 1

    async def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_site() -> Callable[..., FakeFetcher]:
    """Factory building a FakeFetcher from a ``{url: page}`` mapping."""
    return FakeFetcher


@pytest.fixture()
def base_config() -> CrawlerConfig:
    """Default config rooted at the fake site."""
    return CrawlerConfig(base_url=BASE, timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests rebind the log handler to CliRunner's stream; restore it afterwards."""
    yield
    configure(level="INFO")
