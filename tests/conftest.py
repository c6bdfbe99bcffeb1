# File: tests/conftest.py
import asyncio
from collections.abc import AsyncIterator
from typing import Dict, List

import pytest
from aiohttp import web

from link_scout.config import CrawlConfig
from link_scout.crawler.fetcher import FetchError
from link_scout.logger import init_logging

#: link graph of the g.org fixture site
G_ORG: Dict[str, List[str]] = {
    "https://g.org/": [
        "https://g.org/pkg/",
        "https://g.org/cmd/",
    ],
    "https://g.org/pkg/": [
        "https://g.org/",
        "https://g.org/cmd/",
        "https://g.org/pkg/fmt/",
        "https://g.org/pkg/os/",
    ],
    "https://g.org/cmd/": [
        "https://g.org/x/tools",
        "https://g.org/net/http",
        "https://g.org/net/html",
    ],
    "https://g.org/pkg/fmt/": [
        "https://g.org/",
        "https://g.org/pkg/",
    ],
    "https://g.org/pkg/os/": [
        "https://g.org/",
        "https://g.org/pkg/",
    ],
}


class FakeFetcher:
    """Fetcher returning canned link lists; unknown URLs raise FetchError."""

    def __init__(self, pages: Dict[str, List[str]], delay: float = 0.0) -> None:
        self.pages = pages
        self.delay = delay
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, url: str) -> List[str]:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        if url not in self.pages:
            raise FetchError(url, "not found")
        return list(self.pages[url])


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}/"
    finally:
        await runner.cleanup()


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep the project logger off the console during tests."""
    init_logging(level="WARNING", stream=None)
    yield
    init_logging(level="WARNING", stream=None)


@pytest.fixture()
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher(G_ORG)


@pytest.fixture()
def make_config():
    """Factory for CrawlConfig with the g.org seed by default."""

    def _make(**kwargs) -> CrawlConfig:
        kwargs.setdefault("base_url", "https://g.org/")
        return CrawlConfig(**kwargs)

    return _make
