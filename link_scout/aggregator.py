# File: link_scout/aggregator.py
"""link_scout.aggregator: итоговый отчёт об обходе."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from link_scout.tree import TraversalNode

if TYPE_CHECKING:
    from link_scout.crawler.crawler import AsyncCrawler


@dataclass(slots=True)
class CrawlReport:
    """Результаты обхода: sitemap (порядок первого захвата), дерево и счётчики.

    failed - загрузка не удалась, expired - не загружались из-за дедлайна.
    """

    seed: str
    max_depth: int
    visited: List[str] = field(default_factory=list)
    fetched: int = 0
    failed: List[str] = field(default_factory=list)
    expired: List[str] = field(default_factory=list)
    tree: Optional[TraversalNode] = None
    duration: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "max_depth": self.max_depth,
            "visited": list(self.visited),
            "fetched": self.fetched,
            "failed": list(self.failed),
            "expired": list(self.expired),
            "tree": self.tree.to_dict() if self.tree is not None else None,
            "duration": round(self.duration, 3),
        }

    def json(self, *, pretty: bool = False) -> str:
        """JSON-представление отчёта."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def build_report(crawler: AsyncCrawler, duration: float = 0.0) -> CrawlReport:
    """Собирает CrawlReport из состояния завершённого краулера."""
    return CrawlReport(
        seed=crawler.config.seed,
        max_depth=crawler.config.max_depth,
        visited=crawler.store.snapshot(),
        fetched=crawler.store.fetched,
        failed=list(crawler.failed),
        expired=list(crawler.expired),
        tree=crawler.root,
        duration=duration,
    )
