# File: robots_gen/builder/robots.py
"""robots_gen.builder.robots: assembling robots.txt from a GenerationConfig."""

from __future__ import annotations

from typing import List

from robots_gen.builder import GeneratedDocument, banner
from robots_gen.config import GenerationConfig
from robots_gen.utils import ensure_leading_slash, is_http_url, normalize_url


def resolve_sitemap(site_url: str, entry: str) -> str:
    """Absolute http(s) URLs pass through, anything else is rooted at *site_url*."""
    if is_http_url(entry):
        return entry
    return normalize_url(site_url, ensure_leading_slash(entry.lstrip(".")))


def build_robots_txt(config: GenerationConfig) -> GeneratedDocument:
    """Build robots.txt text; never fails, problems are left to validation.

    Allow lines come before Disallow lines so that allow rules read as
    exceptions. Crawlers apply longest-match, so the order carries no meaning
    for them.
    """
    lines: List[str] = []
    if config.comments:
        lines.extend(banner("robots.txt"))
        lines.append("")

    lines.append(f"User-agent: {config.user_agent}")

    if not config.allow and not config.disallow:
        lines.append("Disallow:")
    else:
        lines.extend(f"Allow: {ensure_leading_slash(p)}" for p in config.allow)
        lines.extend(f"Disallow: {ensure_leading_slash(p)}" for p in config.disallow)

    if config.crawl_delay:
        lines.append(f"Crawl-delay: {config.crawl_delay}")

    if config.sitemaps:
        lines.append("")
        lines.extend(f"Sitemap: {resolve_sitemap(config.site_url, s)}" for s in config.sitemaps)

    return GeneratedDocument("\n".join(lines) + "\n")
