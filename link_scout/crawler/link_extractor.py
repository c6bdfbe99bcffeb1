# link_scout/crawler/link_extractor.py
"""
Link extraction for LinkScout: turns an HTML page into the list of absolute
URLs it links to.
"""
from __future__ import annotations

from typing import List
from urllib.parse import urljoin, urlsplit, urlunsplit

from bs4 import BeautifulSoup
from bs4.element import Tag

from link_scout.logger import get_logger

__all__ = ("extract_links", "strip_url")

log = get_logger("extractor")

_WEB_SCHEMES = ("http", "https")


def strip_url(url: str) -> str:
    """Drop query string and fragment from *url*."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def extract_links(base_url: str, body: str | bytes) -> List[str]:
    """
    Extract absolute http(s) links from an HTML *body*.

    Relative hrefs are resolved against *base_url*; query strings and
    fragments are stripped. The result keeps first-seen order, holds no
    duplicates and never contains *base_url* itself. Empty, fragment-only
    and non-web (mailto:, javascript:, ...) hrefs are ignored.
    """
    soup = BeautifulSoup(body, "html.parser")
    seen: set[str] = set()
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if not raw or raw.startswith("#"):
            continue
        try:
            absolute = strip_url(urljoin(base_url, raw))
        except ValueError as exc:
            log.debug("Failed to build URL from %r on %s: %s", raw, base_url, exc)
            continue
        if urlsplit(absolute).scheme not in _WEB_SCHEMES:
            continue
        if absolute == base_url or absolute in seen:
            continue
        seen.add(absolute)
        links.append(absolute)
    return links
