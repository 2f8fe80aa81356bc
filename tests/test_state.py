# File: tests/test_state.py
from concurrent.futures import ThreadPoolExecutor

from link_scout.crawler.models import CrawlTarget, Finding
from link_scout.crawler.state import Frontier, ResultCollector, VisitedSet


def test_claim_is_exclusive_under_threads():
    visited = VisitedSet()
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: visited.claim("https://ex.com/a"), range(200)))
    assert results.count(True) == 1
    assert results.count(False) == 199
    assert "https://ex.com/a" in visited
    assert len(visited) == 1


def test_claim_distinct_urls():
    visited = VisitedSet()
    assert visited.claim("https://ex.com/a")
    assert visited.claim("https://ex.com/b")
    assert not visited.claim("https://ex.com/a")
    assert len(visited) == 2


def test_frontier_fifo_and_empty():
    frontier = Frontier()
    assert not frontier
    assert frontier.pop() is None
    frontier.push(CrawlTarget("https://ex.com/1", "r"))
    frontier.push(CrawlTarget("https://ex.com/2", "r"))
    assert len(frontier) == 2
    assert frontier.pop().url == "https://ex.com/1"
    assert frontier.pop().url == "https://ex.com/2"
    assert frontier.pop() is None


def test_frontier_concurrent_push():
    frontier = Frontier()
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: frontier.push(CrawlTarget(f"https://ex.com/{i}", "r")), range(500)))
    urls = set()
    while (target := frontier.pop()) is not None:
        urls.add(target.url)
    assert len(urls) == 500


def test_collector_drain_keeps_order_and_empties():
    collector = ResultCollector()
    collector.record(Finding("https://ex.com/x", "https://ex.com/"))
    collector.record(Finding("https://ex.com/y", "https://ex.com/a"))
    assert len(collector) == 2
    drained = collector.drain()
    assert [f.url for f in drained] == ["https://ex.com/x", "https://ex.com/y"]
    assert collector.drain() == []


def test_finding_line_format():
    finding = Finding("https://ex.com/x", "https://ex.com/a")
    assert finding.line() == "https://ex.com/x (linked from https://ex.com/a)"
