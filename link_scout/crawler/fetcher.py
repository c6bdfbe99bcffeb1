# link_scout/crawler/fetcher.py
"""
Fetcher module: turns a URL into the list of links found on that page.

The crawl engine only depends on the :class:`Fetcher` protocol; any
exception raised by ``fetch`` means "no links for this URL".
"""
from __future__ import annotations

import asyncio
from typing import List, Optional, Protocol, runtime_checkable

from aiohttp import ClientError, ClientSession, ClientTimeout

from link_scout.config import CrawlConfig
from link_scout.crawler.link_extractor import extract_links
from link_scout.logger import get_logger

__all__ = ("Fetcher", "FetchError", "HttpFetcher")

log = get_logger("fetcher")


class FetchError(Exception):
    """A page could not be retrieved (network error, timeout or HTTP error status)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


@runtime_checkable
class Fetcher(Protocol):
    async def fetch(self, url: str) -> List[str]:
        """Return the links found on *url*; raise on failure."""
        ...


class HttpFetcher:
    """aiohttp-backed fetcher. Use as ``async with HttpFetcher(cfg) as f``."""

    def __init__(self, config: CrawlConfig) -> None:
        self.config = config
        self.session: Optional[ClientSession] = None

    async def __aenter__(self) -> HttpFetcher:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> List[str]:
        """
        GET *url* and return the links on it.

        Relative links are resolved against the final URL after redirects.
        Non-HTML responses are fetched but yield no links.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                if resp.status >= 400:
                    raise FetchError(url, f"HTTP {resp.status}")
                final_url = str(resp.url)
                ctype = resp.headers.get("Content-Type", "").lower()
                if "html" not in ctype:
                    log.debug("Skipping non-HTML %s (%s)", final_url, ctype or "no content type")
                    return []
                text = await resp.text(errors="replace")
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "timeout") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc
        links = extract_links(final_url, text)
        log.debug("Fetched %s: %d links", final_url, len(links))
        return links
