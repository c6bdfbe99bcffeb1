# File: link_scout/report/__init__.py
"""link_scout.report: запись результатов обхода (sitemap, JSON, HTML)."""

from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json
from link_scout.report.sitemap import render_sitemap, write_sitemap

__all__ = ["render_html", "render_json", "render_sitemap", "write_sitemap"]
