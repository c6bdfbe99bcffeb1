# === FILE: link_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional

from link_scout.config import CrawlConfig
from link_scout.crawler.domain import same_domain
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.store import VisitedStore
from link_scout.logger import get_logger
from link_scout.tree import TraversalNode, add_child, new_node

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """Bounded-depth, same-domain crawler.

    Every URL goes through :meth:`VisitedStore.claim` before anything else,
    so no page is expanded twice however many pages link to it. In-domain
    children run as separate tasks that the parent joins before returning;
    the number of fetches in flight is capped by ``config.concurrency``.
    """

    def __init__(
        self,
        config: CrawlConfig,
        fetcher: Fetcher,
        store: Optional[VisitedStore] = None,
    ) -> None:
        self.config = config
        self.fetcher = fetcher
        self.store = store if store is not None else VisitedStore()
        self.root: Optional[TraversalNode] = None
        self.failed: List[str] = []
        self.expired: List[str] = []
        self.logger = get_logger("crawler")
        self._semaphore = asyncio.Semaphore(config.concurrency)
        self._deadline: Optional[float] = None

    async def crawl(self) -> List[str]:
        """Crawl from the seed and return visited URLs in first-claim order."""
        seed = self.config.seed
        self.logger.info("Start crawling %s (max depth %d)", seed, self.config.max_depth)
        start = time.monotonic()
        self.root = new_node(seed) if self.config.show_tree else None
        if self.config.crawl_timeout is not None:
            self._deadline = asyncio.get_running_loop().time() + self.config.crawl_timeout

        await self._crawl(seed, self.config.max_depth, self.root)

        duration = time.monotonic() - start
        visited = self.store.snapshot()
        self.logger.info(
            "Finished: %d URLs seen, %d fetched, %d failed in %.2f s",
            len(visited), self.store.fetched, len(self.failed), duration,
        )
        if self.expired:
            self.logger.info("Not fetched after deadline: %d", len(self.expired))
        return visited

    async def _crawl(self, url: str, depth: int, node: Optional[TraversalNode]) -> None:
        if not self.store.claim(url):
            self.logger.debug("Already claimed, skipping: %s", url)
            return
        if depth < 1:
            self.logger.debug("Max depth reached, not expanding: %s", url)
            return

        links = await self._fetch(url)
        if not links:
            return

        pending: List[asyncio.Task[None]] = []
        for link in links:
            child = add_child(node, link)
            if not same_domain(url, link):
                self.store.claim(link)
                self.logger.debug("Outside of %s, not following: %s", url, link)
                continue
            if self.config.sequential:
                await self._crawl(link, depth - 1, child)
            else:
                pending.append(asyncio.create_task(self._crawl(link, depth - 1, child)))
        if pending:
            await asyncio.gather(*pending)

    async def _fetch(self, url: str) -> Optional[List[str]]:
        if self._deadline_passed():
            self.logger.debug("Deadline passed, not fetching: %s", url)
            self.expired.append(url)
            return None
        async with self._semaphore:
            if self._deadline_passed():
                self.logger.debug("Deadline passed, not fetching: %s", url)
                self.expired.append(url)
                return None
            self.logger.debug("Fetching %s", url)
            try:
                links = await self.fetcher.fetch(url)
            except Exception as exc:
                self.logger.warning("Failed to fetch %s: %s", url, exc)
                self.failed.append(url)
                return None
        self.store.mark_fetched()
        return links

    def _deadline_passed(self) -> bool:
        if self._deadline is None:
            return False
        return asyncio.get_running_loop().time() >= self._deadline
