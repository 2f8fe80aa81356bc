# File: tests/test_engine.py
import pytest

from link_scout.crawler.models import Finding
from link_scout.engine import start_scan

BASE = "https://ex.com"


@pytest.mark.asyncio()
async def test_start_scan_builds_report(fake_site, base_config):
    fetcher = fake_site({BASE: '<a href="/a">A</a><a href="/gone">G</a>', f"{BASE}/a": "<p>a</p>"})
    report = await start_scan(base_config, fetcher=fetcher)

    assert report.completed is True
    assert report.base_url == BASE
    assert report.pages_checked == 3
    assert report.findings == [Finding(f"{BASE}/gone", BASE)]
    assert report.lines() == [f"{BASE}/gone (linked from {BASE})"]
    assert fetcher.closed is False


@pytest.mark.asyncio()
async def test_start_scan_timeout_returns_partial_report(fake_site, base_config):
    fetcher = fake_site(
        {
            BASE: '<a href="/gone">G</a><a href="/slow">S</a>',
            f"{BASE}/slow": {"body": "<p>slow</p>", "delay": 5},
        }
    )
    report = await start_scan(base_config, fetcher=fetcher, scan_timeout=0.3)

    assert report.completed is False
    assert report.findings == [Finding(f"{BASE}/gone", BASE)]
    assert report.pages_checked == 3
