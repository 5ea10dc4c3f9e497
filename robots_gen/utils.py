# File: robots_gen/utils.py
"""robots_gen.utils: helpers for URLs, input lists, file sizes and site autodetection."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Collection, List, Mapping, Optional, Sequence, Union
from urllib.parse import urljoin

from robots_gen.logger import logger

__all__: Sequence[str] = (
    "is_http_url",
    "normalize_url",
    "ensure_leading_slash",
    "split_list",
    "to_bool",
    "format_file_size",
    "find_public_dir",
    "infer_site_url",
    "remove_duplicates",
)

_HTTP_RE = re.compile(r"^https?://", re.IGNORECASE)
_LIST_SEPARATORS = re.compile(r"[,\r\n]+")

PUBLIC_DIR_CANDIDATES: Sequence[str] = ("dist", "build", "out", "public", "website", "static")


def is_http_url(value: str) -> bool:
    """True for strings starting with ``http://`` or ``https://`` (any case)."""
    return bool(_HTTP_RE.match(value))


def normalize_url(base: str, rel: str) -> str:
    """Resolve *rel* against *base* the way a browser resolves a link.

    A leading ``.`` is dropped so that ``./page.html`` and ``/page.html``
    resolve to the same root-relative URL.
    """
    if not base.endswith("/"):
        base += "/"
    if rel.startswith("."):
        rel = rel[1:]
    resolved = urljoin(base, rel)
    logger.debug("Resolved URL: %s + %s -> %s", base, rel, resolved)
    return resolved


def ensure_leading_slash(value: str) -> str:
    return value if value.startswith("/") else f"/{value}"


def split_list(raw: Union[str, Sequence[str], None]) -> List[str]:
    """Split a comma/newline separated input into stripped, non-empty items."""
    if raw is None:
        return []
    items = _LIST_SEPARATORS.split(raw) if isinstance(raw, str) else list(raw)
    return [item.strip() for item in items if item and item.strip()]


def to_bool(value: Union[str, bool, None], fallback: bool) -> bool:
    """Action-style boolean: a non-empty string is true only when it reads ``true``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value:
        return value.strip().lower() == "true"
    return fallback


def format_file_size(size: int) -> str:
    """Human readable size: ``512 B``, ``1.50 KB``, ``2.00 MB``."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size / (1024 * 1024):.2f} MB"


def find_public_dir(candidate: Optional[Union[str, Path]]) -> Optional[Path]:
    """Pick the most likely build output directory.

    Candidates are *candidate* followed by the usual static-site folders; an
    ``index.html`` at the root outweighs any number of other HTML files.
    """
    candidates: List[Path] = []
    if candidate:
        candidates.append(Path(candidate))
    candidates.extend(Path(name) for name in PUBLIC_DIR_CANDIDATES)
    existing = [c for c in remove_duplicates(candidates) if c.is_dir()]
    if not existing:
        return None

    def _score(directory: Path) -> int:
        html_files = sum(1 for p in directory.rglob("*.html") if p.is_file())
        return (1000 if (directory / "index.html").is_file() else 0) + html_files

    # sorted() is stable, so ties keep candidate order
    best = sorted(existing, key=_score, reverse=True)[0]
    logger.debug("Public dir candidates %s -> %s", [str(e) for e in existing], best)
    return best


def infer_site_url(
    public_dir: Optional[Union[str, Path]], environ: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Infer the site URL from a ``CNAME`` file or the GitHub Pages convention."""
    env = os.environ if environ is None else environ
    cname = Path(public_dir) / "CNAME" if public_dir else Path("CNAME")
    if cname.is_file():
        try:
            domain = re.sub(r"\s+", "", cname.read_text(encoding="utf-8"))
        except OSError as exc:
            logger.debug("Could not read %s: %s", cname, exc)
            domain = ""
        if domain:
            return f"https://{domain}"

    owner, _, repo = env.get("GITHUB_REPOSITORY", "").partition("/")
    if owner and repo:
        if repo.lower() == f"{owner.lower()}.github.io":
            return f"https://{owner}.github.io/"
        return f"https://{owner}.github.io/{repo}/"
    return None


def remove_duplicates(items: Collection) -> list:
    """Remove duplicates, preserving order."""
    unique = list(dict.fromkeys(items))
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate entries", removed)
    return unique
