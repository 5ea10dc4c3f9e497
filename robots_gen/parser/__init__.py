# File: robots_gen/parser/__init__.py
"""robots_gen.parser: reading robots.txt rules and built HTML pages."""

from robots_gen.parser.robots_parser import (
    RobotsRules,
    is_path_disallowed,
    matches_pattern,
    parse_robots_rules,
    read_robots_disallows,
)

__all__ = [
    "RobotsRules",
    "is_path_disallowed",
    "matches_pattern",
    "parse_robots_rules",
    "read_robots_disallows",
]
