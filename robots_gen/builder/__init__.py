# File: robots_gen/builder/__init__.py
"""robots_gen.builder: deterministic text builders for robots.txt and humans.txt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from robots_gen import __version__

PROJECT_NAME = "RobotsGen"
PROJECT_URL = "https://github.com/robots-gen/robots-gen"


@dataclass(frozen=True, slots=True)
class GeneratedDocument:
    """Generated file content; ``size`` is the UTF-8 byte length."""

    text: str

    @property
    def size(self) -> int:
        return len(self.text.encode("utf-8"))

    @property
    def lines(self) -> List[str]:
        return self.text.splitlines()


def banner(kind: str, comment: str = "#") -> List[str]:
    """Generator banner as comment lines, e.g. ``# robots.txt generated by ...``."""
    rule = "=" * 64
    if comment == "#":
        return [
            f"# {rule}",
            f"# {kind} generated by {PROJECT_NAME} v{__version__}",
            f"# {PROJECT_URL}",
            f"# {rule}",
        ]
    return [f"/* {kind} generated by {PROJECT_NAME} v{__version__} */", f"/* {PROJECT_URL} */"]


from robots_gen.builder.humans import build_humans_txt  # noqa: E402
from robots_gen.builder.robots import build_robots_txt  # noqa: E402

__all__ = ["GeneratedDocument", "banner", "build_robots_txt", "build_humans_txt"]
