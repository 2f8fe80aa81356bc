# link_scout/crawler/normalizer.py
"""
Link normalization for LinkScout.

Every accepted link is rewritten to one canonical absolute form
(``<scheme>://<host>[:port]<path>[?query][#fragment]`` with a single
canonical scheme, a lower-case host and percent-encoded path, query and
fragment), so plain string equality is enough for deduplication.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import SplitResult, quote, urljoin, urlsplit

__all__ = ("normalize_link",)

_WEB_SCHEMES = ("http", "https")
# RFC 3986 reserved characters plus "%" so existing escapes are kept as is.
_PATH_SAFE = "/%:@!$&'()*+,;="
_QUERY_SAFE = _PATH_SAFE + "?"


def _netloc(parts: SplitResult) -> Optional[str]:
    host = parts.hostname
    if not host:
        return None
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    return f"{host}:{port}" if port is not None else host


def _canonical(parts: SplitResult, scheme: str) -> Optional[str]:
    if parts.scheme.lower() not in _WEB_SCHEMES:
        return None
    netloc = _netloc(parts)
    if netloc is None:
        return None
    url = f"{scheme}://{netloc}{quote(parts.path or '/', safe=_PATH_SAFE)}"
    if parts.query:
        url += f"?{quote(parts.query, safe=_QUERY_SAFE)}"
    if parts.fragment:
        url += f"#{quote(parts.fragment, safe=_QUERY_SAFE)}"
    return url


def normalize_link(page_url: str, href: str, base_url: str, scheme: str = "https") -> Optional[str]:
    """
    Turn a raw ``href`` found on *page_url* into a canonical absolute URL.

    Root-relative links are resolved against the host of *base_url* (the
    crawl's root), not the host of the current page. Returns None when the
    link must not be followed: non-web schemes (``mailto:``, ``tel:``,
    ``javascript:``), pure fragments, empty values and anything that fails
    to parse.
    """
    href = href.strip()
    if not href:
        return None
    if ":" in href and not href.startswith("http"):
        return None
    if href.startswith("#"):
        return None

    try:
        parts = urlsplit(href)
        if parts.scheme:
            absolute = href
        elif href.startswith("//"):
            absolute = f"{scheme}:{href}"
        elif href.startswith("/"):
            netloc = _netloc(urlsplit(base_url))
            if netloc is None:
                return None
            absolute = f"{scheme}://{netloc}{href}"
        else:
            absolute = urljoin(page_url, href)
        return _canonical(urlsplit(absolute), scheme)
    except ValueError:
        return None
