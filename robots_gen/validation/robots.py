# File: robots_gen/validation/robots.py
"""robots_gen.validation.robots: structural checks of robots.txt text.

Every check runs independently and appends its findings in a fixed order;
none of them short-circuits another.
"""

from __future__ import annotations

import math
import re
from pathlib import Path
from typing import List, Optional, Sequence, Union
from urllib.parse import urlsplit

from lxml import etree

from robots_gen.parser.robots_parser import is_path_disallowed, parse_robots_rules
from robots_gen.parser.sitemap_parser import read_sitemap
from robots_gen.utils import is_http_url
from robots_gen.validation.findings import Finding, guarded, info, problem, warning

_USER_AGENT_RE = re.compile(r"^User-agent:", re.IGNORECASE)
_SITEMAP_RE = re.compile(r"^Sitemap:\s*(.*)$", re.IGNORECASE)
_GROUP_DIRECTIVE_RE = re.compile(r"^(Disallow|Allow|Crawl-delay):", re.IGNORECASE)
_CRAWL_DELAY_RE = re.compile(r"^Crawl-delay:\s*(.+)$", re.IGNORECASE)


def _strip_comment(line: str) -> str:
    return line.split("#", 1)[0].strip()


def check_size(text: str, max_size_kb: float, strict: bool, label: str = "") -> Finding:
    size_kb = len(text.encode("utf-8")) / 1024
    if size_kb > max_size_kb:
        return problem(f"Exceeds {label}{max_size_kb} KB ({size_kb:.2f} KB)", strict)
    return info(f"Size OK ({size_kb:.2f} KB)")


def _sitemap_urls(lines: Sequence[str]) -> List[str]:
    urls: List[str] = []
    for line in lines:
        match = _SITEMAP_RE.match(_strip_comment(line))
        if match:
            urls.append(match.group(1).strip())
    return urls


def _local_sitemap_path(url: str, site_url: str, public_dir: Path) -> Path:
    return public_dir / url[len(site_url):].lstrip("/")


def _blocked_sitemap_entries(
    sitemap_file: Path, site_url: str, text: str
) -> List[str]:
    rules = parse_robots_rules(text, "*")
    if not rules.disallowed:
        return []
    blocked: List[str] = []
    for loc in read_sitemap(sitemap_file):
        if not loc.startswith(site_url):
            continue
        path = urlsplit(loc).path or "/"
        if is_path_disallowed(path, rules.disallowed) and not is_path_disallowed(
            path, rules.allowed
        ):
            blocked.append(loc)
    return blocked


def _check_sitemaps(
    results: List[Finding],
    urls: List[str],
    text: str,
    public_dir: Optional[Path],
    site_url: Optional[str],
) -> None:
    unique = list(dict.fromkeys(urls))
    duplicates = len(urls) - len(unique)
    if duplicates:
        results.append(warning(f"Found {duplicates} duplicate sitemap reference(s)"))
    results.append(info(f"Contains Sitemap reference ({len(unique)} unique sitemap(s))"))

    invalid = sum(1 for url in unique if not is_http_url(url))
    if invalid:
        results.append(warning(f"{invalid} sitemap URL(s) invalid (must start with http/https)"))

    if public_dir is None or not site_url:
        return

    for url in unique:
        if not url.startswith(site_url):
            continue
        local = _local_sitemap_path(url, site_url, public_dir)
        if not local.is_file():
            results.append(warning(f"Sitemap file not found: {local.name} (referenced as {url})"))
            continue
        try:
            blocked = _blocked_sitemap_entries(local, site_url, text)
        except etree.XMLSyntaxError as exc:
            results.append(warning(f"Sitemap file {local.name} is not valid XML: {exc}"))
            continue
        if blocked:
            results.append(
                warning(
                    f"Sitemap {local.name} lists {len(blocked)} URL(s) blocked by Disallow "
                    f"rules (first: {blocked[0]})"
                )
            )


@guarded
def _validate(
    text: str,
    results: List[Finding],
    *,
    strict: bool,
    max_size_kb: float,
    require_sitemap: bool,
    public_dir: Optional[Path],
    site_url: Optional[str],
) -> None:
    lines = text.splitlines()

    results.append(check_size(text, max_size_kb, strict))

    if not any(_USER_AGENT_RE.match(line.strip()) for line in lines):
        results.append(problem("Missing required User-agent directive", strict))

    sitemap_urls = _sitemap_urls(lines)
    if require_sitemap and not sitemap_urls:
        results.append(problem("No Sitemap directive found", strict))
    elif sitemap_urls:
        _check_sitemaps(results, sitemap_urls, text, public_dir, site_url)

    seen_user_agent = False
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if _USER_AGENT_RE.match(stripped):
            seen_user_agent = True
        elif _GROUP_DIRECTIVE_RE.match(stripped):
            results.append(
                warning("Directive found before User-agent (may not be applied correctly)")
            )
            break
        if seen_user_agent:
            break

    for line in lines:
        match = _CRAWL_DELAY_RE.match(_strip_comment(line))
        if match and not _is_non_negative_number(match.group(1).strip()):
            results.append(
                warning(
                    f"Invalid Crawl-delay value: {match.group(1).strip()} "
                    "(must be a non-negative number)"
                )
            )


def _is_non_negative_number(value: str) -> bool:
    try:
        number = float(value)
    except ValueError:
        return False
    return math.isfinite(number) and number >= 0


def validate_robots_txt(
    text: str,
    *,
    strict: bool = True,
    max_size_kb: float = 500,
    require_sitemap: bool = False,
    public_dir: Union[str, Path, None] = None,
    site_url: Optional[str] = None,
) -> List[Finding]:
    """Validate robots.txt *text* and return findings in check order.

    Args:
        text: robots.txt content.
        strict: report structural problems as errors instead of warnings.
        max_size_kb: recommended size limit.
        require_sitemap: a missing Sitemap directive is a problem.
        public_dir: built site; enables the local sitemap file checks.
        site_url: site root used to recognise local sitemap URLs.
    """
    return _validate(
        text,
        strict=strict,
        max_size_kb=max_size_kb,
        require_sitemap=require_sitemap,
        public_dir=Path(public_dir) if public_dir is not None else None,
        site_url=site_url,
    )
