# File: link_scout/report/sitemap.py
"""link_scout.report.sitemap: запись sitemap.xml по списку посещённых URL."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from lxml import etree

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _qname(tag: str) -> str:
    return f"{{{SITEMAP_NS}}}{tag}"


def build_sitemap(urls: Iterable[str]) -> etree._Element:
    """Строит минимальный <urlset>: только обязательный <loc> для каждого URL."""
    urlset = etree.Element(_qname("urlset"), nsmap={None: SITEMAP_NS})
    for url in urls:
        entry = etree.SubElement(urlset, _qname("url"))
        loc = etree.SubElement(entry, _qname("loc"))
        loc.text = url
    return urlset


def render_sitemap(urls: Iterable[str]) -> str:
    """Возвращает sitemap в виде строки с XML-декларацией.

    Пример:
    ```python
    from link_scout.report.sitemap import render_sitemap
    print(render_sitemap(["http://foo.com/", "http://foo.com/bar"]))
    ```
    """
    data = etree.tostring(
        build_sitemap(urls),
        xml_declaration=True,
        encoding="UTF-8",
        pretty_print=True,
    )
    return data.decode("utf-8")


def write_sitemap(urls: Iterable[str], output_path: Union[str, Path]) -> Path:
    """Сохраняет sitemap в файл и возвращает его путь."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_sitemap(urls), encoding="utf-8")
    return output
