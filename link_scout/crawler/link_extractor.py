# link_scout/crawler/link_extractor.py
"""
Anchor extraction for LinkScout.
"""
from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup
from bs4.element import Tag


def extract_hrefs(html: str) -> List[str]:
    """
    Return the raw ``href`` values of all ``<a>`` elements in document order.

    Values are not resolved or filtered; malformed markup yields whatever
    anchors the parser could recover, never an exception.
    """
    soup = BeautifulSoup(html, "html.parser")
    hrefs: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if isinstance(href_val, str) and href_val:
            hrefs.append(href_val)
    return hrefs
