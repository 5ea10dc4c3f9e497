# File: robots_gen/validation/humans.py
"""robots_gen.validation.humans: checks for humans.txt (humanstxt.org)."""

from __future__ import annotations

from typing import List

from robots_gen.validation.findings import Finding, guarded, info, problem, warning
from robots_gen.validation.robots import check_size

SECTIONS = ("TEAM", "SITE", "THANKS")
KNOWN_FIELDS = ("Name:", "Title:", "Last update:", "Standards:", "Software:")


@guarded
def _validate(text: str, results: List[Finding], *, strict: bool, max_size_kb: float) -> None:
    results.append(check_size(text, max_size_kb, strict))

    present = [name for name in SECTIONS if f"/* {name} */" in text]
    if present:
        results.append(info(f"Contains standard sections: {', '.join(present)}"))
    else:
        results.append(problem("Missing standard sections (TEAM, SITE, or THANKS)", strict))

    if not any(field in text for field in KNOWN_FIELDS):
        results.append(warning("No standard fields detected (Name, Title, etc.)"))

    if not text.isascii():
        results.append(info("Contains non-ASCII characters (ensure UTF-8 encoding)"))

    results.append(info("Valid humans.txt format"))


def validate_humans_txt(
    text: str, *, strict: bool = True, max_size_kb: float = 500
) -> List[Finding]:
    return _validate(text, strict=strict, max_size_kb=max_size_kb)
