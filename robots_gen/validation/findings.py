# File: robots_gen/validation/findings.py
"""Validation findings shared by the robots.txt, humans.txt and security.txt checks."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List

from robots_gen.logger import logger


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Finding:
    """One validation result: a severity tag and a human readable message."""

    severity: Severity
    message: str

    def as_dict(self) -> dict:
        return {"type": self.severity.value, "message": self.message}


def info(message: str) -> Finding:
    return Finding(Severity.INFO, message)


def warning(message: str) -> Finding:
    return Finding(Severity.WARNING, message)


def problem(message: str, strict: bool) -> Finding:
    """An error in strict mode, a warning otherwise."""
    return Finding(Severity.ERROR if strict else Severity.WARNING, message)


def has_errors(findings: Iterable[Finding]) -> bool:
    return any(f.severity is Severity.ERROR for f in findings)


def count(findings: Iterable[Finding], severity: Severity) -> int:
    return sum(1 for f in findings if f.severity is severity)


def log_findings(findings: Iterable[Finding]) -> None:
    """Route findings to the project logger at the matching level."""
    for finding in findings:
        if finding.severity is Severity.ERROR:
            logger.error("  %s", finding.message)
        elif finding.severity is Severity.WARNING:
            logger.warning("  %s", finding.message)
        else:
            logger.info("  %s", finding.message)


def guarded(func: Callable[..., None]) -> Callable[..., List[Finding]]:
    """Turn an unexpected failure inside a validator into a single finding.

    The wrapped validator receives a ``results`` list it appends to, so
    findings collected before the failure are kept.
    """

    @functools.wraps(func)
    def wrapper(text: str, *args, strict: bool = True, **kwargs) -> List[Finding]:
        results: List[Finding] = []
        try:
            func(text, results, *args, strict=strict, **kwargs)
        except Exception as exc:
            logger.debug("Validator %s failed", func.__name__, exc_info=True)
            results.append(problem(f"Validation error: {exc}", strict))
        return results

    return wrapper
