# File: link_scout/engine.py
"""link_scout.engine: orchestration layer - запуск обхода и сборка отчёта."""

from __future__ import annotations

import asyncio
import time
from typing import Optional

from link_scout.aggregator import CrawlReport, build_report
from link_scout.config import CrawlConfig, load_config
from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.fetcher import Fetcher, HttpFetcher
from link_scout.logger import logger

__all__ = ["Engine", "start_crawl"]


async def _run(config: CrawlConfig, fetcher: Fetcher) -> CrawlReport:
    start = time.monotonic()
    crawler = AsyncCrawler(config, fetcher)
    await crawler.crawl()
    return build_report(crawler, time.monotonic() - start)


async def start_crawl(config: CrawlConfig, fetcher: Optional[Fetcher] = None) -> CrawlReport:
    """Запускает обход; без fetcher открывает HttpFetcher на время обхода."""
    if fetcher is not None:
        return await _run(config, fetcher)
    async with HttpFetcher(config) as http:
        return await _run(config, http)


class Engine:
    """Фасад для CLI и тестов: загрузка конфига и синхронный запуск обхода."""

    @staticmethod
    def load_config(path: Optional[str]) -> CrawlConfig:
        return load_config(path)

    def __init__(self, config: CrawlConfig, fetcher: Optional[Fetcher] = None) -> None:
        self.config = config
        self.fetcher = fetcher

    def run(self) -> CrawlReport:
        """Запускает обход в новом event loop и возвращает отчёт."""
        logger.info("Starting crawl…")
        try:
            return asyncio.run(start_crawl(self.config, self.fetcher))
        except Exception as exc:
            logger.error("Crawl failed: %s", exc)
            raise
