# link_scout/crawler/domain.py
"""
Domain scoping: decides whether a discovered link stays on the referring host.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from link_scout.logger import get_logger

__all__ = ("host_of", "same_domain")

log = get_logger("domain")


def host_of(url: str) -> Optional[str]:
    """
    Return the lower-cased host (with port, without userinfo) of *url*.

    None when the URL cannot be parsed or carries no host.
    """
    try:
        netloc = urlsplit(url).netloc
    except (ValueError, TypeError, AttributeError) as exc:
        log.debug("Cannot parse URL %r: %s", url, exc)
        return None
    host = netloc.rpartition("@")[2].lower()
    return host or None


def same_domain(base_url: str, candidate_url: str) -> bool:
    """
    True when both URLs point to the same host.

    Scheme, userinfo, path, query and fragment are ignored. A URL that does
    not parse, or has no host, is never in-domain.
    """
    base = host_of(base_url)
    if base is None:
        return False
    candidate = host_of(candidate_url)
    if candidate is None:
        return False
    return base == candidate
