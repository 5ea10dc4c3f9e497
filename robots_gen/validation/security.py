# File: robots_gen/validation/security.py
"""robots_gen.validation.security: checks for security.txt as defined by RFC 9116."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from robots_gen.validation.findings import Finding, guarded, info, problem, warning
from robots_gen.validation.robots import check_size

# Fields whose value is a web resource and should be served over HTTPS
WEB_URI_FIELDS = ("Acknowledgments", "Canonical", "Encryption", "Hiring", "Policy")
OPTIONAL_FIELDS = ("Encryption", "Policy", "Canonical")

_CONTACT_SCHEMES = re.compile(r"^(mailto:|tel:|https?://)", re.IGNORECASE)
_PLAIN_HTTP = re.compile(r"^http://", re.IGNORECASE)


def _field_values(lines: List[str], name: str) -> List[str]:
    pattern = re.compile(rf"^{re.escape(name)}:\s*(.*)$", re.IGNORECASE)
    values: List[str] = []
    for line in lines:
        match = pattern.match(line.strip())
        if match:
            values.append(match.group(1).strip())
    return values


def _parse_expires(value: str) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _one_year_after(moment: datetime) -> datetime:
    try:
        return moment.replace(year=moment.year + 1)
    except ValueError:  # 29 February
        return moment + timedelta(days=365)


def _check_contacts(results: List[Finding], contacts: List[str], strict: bool) -> None:
    if not contacts:
        results.append(problem("Missing required Contact field (RFC 9116)", strict))
        return
    results.append(info(f"Contains Contact field ({len(contacts)} contact(s))"))
    invalid = sum(1 for uri in contacts if not _CONTACT_SCHEMES.match(uri))
    if invalid:
        results.append(
            warning(
                f"{invalid} contact(s) may have invalid URI format "
                "(should use mailto:, tel:, or https://)"
            )
        )


def _check_expires(
    results: List[Finding], expires: List[str], strict: bool, now: datetime
) -> None:
    if not expires:
        results.append(problem("Missing required Expires field (RFC 9116)", strict))
        return
    if len(expires) > 1:
        results.append(warning("Multiple Expires fields found (must appear only once)"))
        return

    value = expires[0]
    moment = _parse_expires(value)
    if moment is None:
        results.append(warning("Invalid Expires date format (should be ISO 8601)"))
    elif moment < now:
        results.append(warning(f"File has expired ({value})"))
    elif moment > _one_year_after(now):
        results.append(info("Expires more than 1 year in the future (not recommended)"))
    else:
        results.append(info(f"Valid Expires field ({value})"))


@guarded
def _validate(
    text: str,
    results: List[Finding],
    *,
    strict: bool,
    max_size_kb: float,
    now: datetime,
) -> None:
    lines = text.splitlines()

    results.append(check_size(text, max_size_kb, strict, label="recommended "))
    _check_contacts(results, _field_values(lines, "Contact"), strict)
    _check_expires(results, _field_values(lines, "Expires"), strict, now)

    if len(_field_values(lines, "Preferred-Languages")) > 1:
        results.append(warning("Multiple Preferred-Languages fields (must appear only once)"))

    optional = [name for name in OPTIONAL_FIELDS if _field_values(lines, name)]
    if optional:
        results.append(info(f"Optional fields present: {', '.join(optional)}"))

    for name in WEB_URI_FIELDS:
        for uri in _field_values(lines, name):
            if _PLAIN_HTTP.match(uri):
                results.append(
                    warning(f"{name} uses http:// instead of https:// (not recommended)")
                )

    signed = (
        "-----BEGIN PGP SIGNED MESSAGE-----" in text and "-----BEGIN PGP SIGNATURE-----" in text
    )
    if signed:
        results.append(info("File is digitally signed (OpenPGP)"))
    else:
        results.append(info("File is not digitally signed (signing is recommended)"))

    results.append(info("Valid security.txt format (RFC 9116)"))


def validate_security_txt(
    text: str,
    *,
    strict: bool = True,
    max_size_kb: float = 32,
    now: Optional[datetime] = None,
) -> List[Finding]:
    """Validate security.txt *text*; *now* defaults to the current UTC time."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return _validate(text, strict=strict, max_size_kb=max_size_kb, now=now)
