# File: tests/test_domain.py
import pytest

from link_scout.crawler.domain import host_of, same_domain


@pytest.mark.parametrize(
    "base,candidate,expected",
    [
        ("http://foo.com", "http://foo.com", True),
        ("http://foo.com", "http://foo.com/bar", True),
        ("http://foo.com", "http://foo.com/bar?x=1#y", True),
        ("http://foo.com", "http://foo.com/#content", True),
        ("http://foo.com", "http://bar.com", False),
        ("http://foo.com", "http:/foo.org", False),
        ("https://foo.com", "http://foo.com", True),
        ("http://foo.com", "http://user@foo.com", True),
        ("http://foo.com", "https://ibrahim@foo.com", True),
        ("http://FOO.com", "http://foo.COM/x", True),
        ("http://foo.com", "http://foo.com:8080/", False),
        ("http://foo.com", "http://sub.foo.com/", False),
    ],
)
def test_same_domain(base, candidate, expected):
    assert same_domain(base, candidate) is expected


@pytest.mark.parametrize(
    "base,candidate",
    [
        ("http://foo.com", "http://[::1"),
        ("http://[::1", "http://foo.com"),
        ("/relative", "/other"),
        ("", ""),
    ],
)
def test_unparsable_or_hostless_urls_fail_closed(base, candidate):
    assert same_domain(base, candidate) is False


def test_host_of():
    assert host_of("https://user:pw@Example.com:443/p?q#f") == "example.com:443"
    assert host_of("mailto:me@example.com") is None
    assert host_of("http://[::1") is None
