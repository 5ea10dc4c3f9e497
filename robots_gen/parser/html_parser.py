# === FILE: robots_gen/parser/html_parser.py ===
"""HTML helpers for the site audit.

Only two questions are asked of a built page:

* canonical: the ``href`` of ``<link rel="canonical">`` or ``None``.
* internal links: ``<a href>`` targets that stay on the site (no absolute
  http(s) URLs, fragments, ``mailto:`` or ``javascript:``).
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup

from robots_gen.utils import is_http_url

__all__: Sequence[str] = (
    "ParsedPage",
    "parse_html",
    "parse_html_file",
    "extract_canonical_url",
    "discover_internal_links",
)

_SKIPPED_PREFIXES = ("#", "mailto:", "javascript:", "tel:", "data:")


@dataclass(slots=True)
class ParsedPage:
    """Lightweight representation of a built HTML page."""

    path: str
    canonical: Optional[str]
    links: list[str]


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _canonical(soup: BeautifulSoup) -> Optional[str]:
    for tag in soup.find_all("link", href=True):
        # bs4 returns rel as a list of tokens
        rel = [token.lower() for token in (tag.get("rel") or [])]
        if "canonical" in rel:
            href = tag["href"].strip()  # type: ignore[index,union-attr]
            return href or None
    return None


def _internal_links(soup: BeautifulSoup) -> list[str]:
    seen: set[str] = set()
    links: list[str] = []
    for tag in soup.find_all("a", href=True):
        href = tag["href"].strip()  # type: ignore[index,union-attr]
        if not href or is_http_url(href) or href.startswith("//"):
            continue
        if href.lower().startswith(_SKIPPED_PREFIXES):
            continue
        if href not in seen:
            seen.add(href)
            links.append(href)
    return links


# ---------------------------------------------------------------------------
# Public functions
# ---------------------------------------------------------------------------


def extract_canonical_url(html: str) -> Optional[str]:
    return _canonical(_soup(html))


def discover_internal_links(html: str) -> list[str]:
    """Return internal ``<a href>`` targets in document order, deduplicated."""
    return _internal_links(_soup(html))


def parse_html(html: str, path: str = "/") -> ParsedPage:
    """Parse markup of the page served at URL *path*."""
    soup = _soup(html)
    return ParsedPage(path=path, canonical=_canonical(soup), links=_internal_links(soup))


def parse_html_file(file: Union[str, Path], path: str = "/") -> ParsedPage:
    return parse_html(Path(file).read_text(encoding="utf-8", errors="replace"), path)
