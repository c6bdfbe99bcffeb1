# link_scout/crawler/store.py
"""
Visited-URL store shared by every task of one crawl.
"""
from __future__ import annotations

import threading
from typing import Iterator, List, Set

__all__ = ("VisitedStore",)


class VisitedStore:
    """Set of claimed URLs plus their first-claim order and a fetched counter.

    All access goes through one lock, so the store can be shared by asyncio
    tasks and by threads alike. A URL is claimed at most once; the order list
    never holds duplicates and ``fetched`` never exceeds ``len(store)``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._seen: Set[str] = set()
        self._order: List[str] = []
        self._fetched = 0

    def claim(self, url: str) -> bool:
        """Insert *url* if absent. Return True only for the call that inserted it."""
        with self._lock:
            if url in self._seen:
                return False
            self._seen.add(url)
            self._order.append(url)
            return True

    def mark_fetched(self) -> None:
        with self._lock:
            self._fetched += 1

    def snapshot(self) -> List[str]:
        """Copy of the visit order (first claim first)."""
        with self._lock:
            return list(self._order)

    @property
    def fetched(self) -> int:
        with self._lock:
            return self._fetched

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._seen

    def __len__(self) -> int:
        with self._lock:
            return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"VisitedStore(seen={len(self)}, fetched={self.fetched})"
