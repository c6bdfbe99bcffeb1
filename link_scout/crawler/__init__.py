# link_scout/crawler/__init__.py
"""Crawl engine and its collaborators."""
from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.domain import same_domain
from link_scout.crawler.fetcher import Fetcher, FetchError, HttpFetcher
from link_scout.crawler.link_extractor import extract_links
from link_scout.crawler.store import VisitedStore

__all__ = [
    "AsyncCrawler",
    "Fetcher",
    "FetchError",
    "HttpFetcher",
    "VisitedStore",
    "extract_links",
    "same_domain",
]
