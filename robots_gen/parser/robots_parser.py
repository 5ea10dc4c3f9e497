# File: robots_gen/parser/robots_parser.py
"""robots_gen.parser.robots_parser: robots.txt rule extraction and path matching.

Matching follows the informal robots.txt conventions: prefix match, ``*`` as a
wildcard and a trailing ``$`` as an end anchor. It is meant for consistency
checks of generated files, not for admission decisions of a live crawler.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

__all__: Sequence[str] = (
    "RobotsRules",
    "matches_pattern",
    "is_path_disallowed",
    "parse_robots_rules",
    "read_robots_disallows",
)


@dataclass
class RobotsRules:
    """Rules from robots.txt that apply to a given User-Agent."""

    user_agent: str
    allowed: List[str] = field(default_factory=list)
    disallowed: List[str] = field(default_factory=list)
    crawl_delay: Optional[float] = None

    def is_disallowed(self, path: str) -> bool:
        return is_path_disallowed(path, self.disallowed)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(".*".join(re.escape(part) for part in pattern.split("*")), re.DOTALL)


def matches_pattern(path: str, pattern: str) -> bool:
    """Check whether *path* matches a single robots.txt *pattern*.

    Examples:
        >>> matches_pattern("/admin/panel", "/admin/")
        True
        >>> matches_pattern("/private/file.pdf", "/private/*.pdf")
        True
        >>> matches_pattern("/page/extra", "/page$")
        False
    """
    if not pattern:
        return False
    if pattern == "/":
        return True
    if pattern.endswith("$"):
        return _compile(pattern[:-1]).fullmatch(path) is not None
    if "*" in pattern:
        return _compile(pattern).match(path) is not None
    return path.startswith(pattern)


def is_path_disallowed(path: str, patterns: Iterable[str]) -> bool:
    """True when *path* matches any of *patterns*; an empty list never blocks."""
    return any(matches_pattern(path, pattern) for pattern in patterns)


def parse_robots_rules(text: str, user_agent: str = "*") -> RobotsRules:
    """Parse robots.txt *text* and collect the rules applying to *user_agent*.

    Args:
        text: robots.txt content.
        user_agent: target User-Agent; ``*`` collects the wildcard groups.

    Returns:
        RobotsRules with allowed, disallowed and crawl_delay.
    """
    rules = RobotsRules(user_agent=user_agent)
    current_agents: List[str] = []
    in_rules = False

    for directive, value in _prepare_lines(text):
        if directive == "user-agent":
            # consecutive User-agent lines share one group
            if in_rules:
                current_agents.clear()
                in_rules = False
            current_agents.append(value)
            continue
        in_rules = True
        _process_directive(directive, value, current_agents, user_agent, rules)

    return rules


def read_robots_disallows(robots_path: Union[str, Path], user_agent: str = "*") -> List[str]:
    """Disallow patterns of an existing robots.txt; a missing file has none."""
    path = Path(robots_path)
    if not path.is_file():
        return []
    return parse_robots_rules(path.read_text(encoding="utf-8"), user_agent).disallowed


def _process_directive(
    directive: str,
    value: str,
    current_agents: List[str],
    user_agent: str,
    rules: RobotsRules,
) -> None:
    """Apply one non-group directive to *rules* when the current group matches."""
    if not _matches_agent(current_agents, user_agent):
        return
    if directive == "allow":
        if value:
            rules.allowed.append(value)
    elif directive == "disallow":
        # empty Disallow means "allow everything"
        if value:
            rules.disallowed.append(value)
    elif directive == "crawl-delay":
        try:
            rules.crawl_delay = float(value)
        except ValueError:
            rules.crawl_delay = None


def _prepare_lines(text: str) -> List[Tuple[str, str]]:
    """Strip comments and split into (directive, value) pairs."""
    lines: List[Tuple[str, str]] = []
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if not line or ":" not in line:
            continue
        key, val = (part.strip() for part in line.split(":", 1))
        lines.append((key.lower(), val))
    return lines


def _matches_agent(agents: List[str], user_agent: str) -> bool:
    """Whether the group declared for *agents* applies to *user_agent*."""
    ua = user_agent.lower()
    return any(agent == "*" or agent.lower() in ua for agent in agents)
