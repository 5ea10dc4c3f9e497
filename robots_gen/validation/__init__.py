# File: robots_gen/validation/__init__.py
"""robots_gen.validation: independent checks producing ordered lists of findings."""

from robots_gen.validation.findings import Finding, Severity, has_errors, log_findings
from robots_gen.validation.humans import validate_humans_txt
from robots_gen.validation.robots import validate_robots_txt
from robots_gen.validation.security import validate_security_txt

VALIDATORS = {
    "robots": validate_robots_txt,
    "humans": validate_humans_txt,
    "security": validate_security_txt,
}

__all__ = [
    "Finding",
    "Severity",
    "VALIDATORS",
    "has_errors",
    "log_findings",
    "validate_humans_txt",
    "validate_robots_txt",
    "validate_security_txt",
]
