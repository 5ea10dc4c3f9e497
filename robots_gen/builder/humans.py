# File: robots_gen/builder/humans.py
"""robots_gen.builder.humans: humans.txt following the humanstxt.org layout."""

from __future__ import annotations

from typing import Dict, List, Tuple

from robots_gen.builder import GeneratedDocument, banner
from robots_gen.config import HumansConfig

# (field key, label) in output order
_TEAM_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("name", "Name"),
    ("title", "Title"),
    ("contact", "Contact"),
    ("location", "Location"),
)
_SITE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("last_update", "Last update"),
    ("standards", "Standards"),
    ("components", "Components"),
    ("software", "Software"),
    ("language", "Language"),
    ("doctype", "Doctype"),
    ("ide", "IDE"),
)


def _labelled(section: Dict[str, str], fields: Tuple[Tuple[str, str], ...]) -> List[str]:
    return [f"  {label}: {section[key]}" for key, label in fields if section.get(key)]


def build_humans_txt(config: HumansConfig) -> GeneratedDocument:
    """Build humans.txt; empty text when there is nothing to say."""
    team = config.section("team")
    thanks = config.section("thanks")
    site = config.section("site")

    if not (team or thanks or site or config.include_comments):
        return GeneratedDocument("")

    lines: List[str] = [*banner("humans.txt", comment="/*"), ""]

    if config.include_comments:
        lines.extend(["/* HUMANS.TXT */", "/* humanstxt.org */", ""])

    if team:
        lines.append("/* TEAM */")
        lines.extend(_labelled(team, _TEAM_FIELDS))
        lines.append("")

    if thanks:
        lines.append("/* THANKS */")
        lines.extend(f"  {thanks[key]}" for key in ("name", "url") if thanks.get(key))
        lines.append("")

    if site:
        lines.append("/* SITE */")
        lines.extend(_labelled(site, _SITE_FIELDS))
        lines.append("")

    return GeneratedDocument("\n".join(lines))
