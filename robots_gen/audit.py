# === FILE: robots_gen/audit.py ===
"""Cross-check of a built site against its robots.txt rules.

Each HTML file below the public directory is mapped to the URL path it is
served from; pages, internal links and canonical URLs that fall under a
Disallow rule are reported.
"""
from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterator, List, Optional, Tuple, Union
from urllib.parse import urljoin, urlsplit

from robots_gen.logger import logger
from robots_gen.parser.html_parser import ParsedPage, parse_html_file
from robots_gen.parser.robots_parser import RobotsRules, is_path_disallowed
from robots_gen.validation.findings import Finding, info, warning

__all__ = ["url_path_for", "iter_pages", "is_blocked", "audit_site"]


def url_path_for(html_file: Path, public_dir: Path) -> str:
    """``about/index.html`` is served as ``/about/``, ``a/b.html`` as ``/a/b.html``."""
    relative = PurePosixPath(html_file.relative_to(public_dir).as_posix())
    if relative.name == "index.html":
        parent = relative.parent.as_posix()
        return "/" if parent == "." else f"/{parent}/"
    return f"/{relative.as_posix()}"


def iter_pages(public_dir: Path) -> Iterator[Tuple[Path, ParsedPage]]:
    for html_file in sorted(public_dir.rglob("*.html")):
        if html_file.is_file():
            yield html_file, parse_html_file(html_file, url_path_for(html_file, public_dir))


def is_blocked(path: str, rules: RobotsRules) -> bool:
    """Disallowed and not re-allowed by an Allow rule."""
    return is_path_disallowed(path, rules.disallowed) and not is_path_disallowed(
        path, rules.allowed
    )


def _link_path(page_path: str, href: str) -> str:
    return urlsplit(urljoin(f"https://site.invalid{page_path}", href)).path or "/"


def audit_site(
    public_dir: Union[str, Path],
    rules: RobotsRules,
    site_url: Optional[str] = None,
) -> List[Finding]:
    """Audit every built page against *rules*.

    Args:
        public_dir: built site directory.
        rules: rules of the audited user agent.
        site_url: when given, canonical URLs on another host are ignored.
    """
    root = Path(public_dir)
    results: List[Finding] = []
    pages = 0
    blocked_pages = 0

    for _, page in iter_pages(root):
        pages += 1
        if is_blocked(page.path, rules):
            blocked_pages += 1
            results.append(info(f"Page blocked by robots.txt: {page.path}"))

        blocked_links = [
            href for href in page.links if is_blocked(_link_path(page.path, href), rules)
        ]
        if blocked_links:
            results.append(
                warning(
                    f"{page.path} links to {len(blocked_links)} blocked path(s): "
                    + ", ".join(blocked_links)
                )
            )

        if page.canonical:
            canonical_host = urlsplit(page.canonical).netloc
            if site_url and canonical_host and canonical_host != urlsplit(site_url).netloc:
                logger.debug("Skipping foreign canonical %s on %s", page.canonical, page.path)
            elif is_blocked(_link_path(page.path, page.canonical), rules):
                results.append(
                    warning(f"{page.path} declares a blocked canonical URL: {page.canonical}")
                )

    results.append(info(f"Audited {pages} page(s), {blocked_pages} blocked"))
    return results
