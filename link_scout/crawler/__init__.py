"""Crawl engine: normalization, shared state, fetching and scheduling."""
from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.models import CrawlTarget, Finding
from link_scout.crawler.normalizer import normalize_link

__all__ = ["AsyncCrawler", "CrawlTarget", "Finding", "normalize_link"]
