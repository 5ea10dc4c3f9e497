# File: robots_gen/parser/sitemap_parser.py
"""robots_gen.parser.sitemap_parser: reading <loc> URLs from a local sitemap file."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from lxml import etree


def parse_sitemap(xml_content: Union[str, bytes]) -> List[str]:
    """Parse sitemap (or sitemap index) XML and return the URLs of its <loc> tags.

    Args:
        xml_content: sitemap.xml content.

    Returns:
        URLs found in <loc> tags, empty when the markup is unusable.
    """
    data = xml_content.encode("utf-8") if isinstance(xml_content, str) else xml_content
    parser = etree.XMLParser(ns_clean=True, recover=True, resolve_entities=False)
    root = etree.fromstring(data, parser=parser)
    if root is None:
        return []
    locs = root.findall(".//{*}loc")
    return [loc.text.strip() for loc in locs if loc.text and loc.text.strip()]


def read_sitemap(path: Union[str, Path]) -> List[str]:
    return parse_sitemap(Path(path).read_bytes())
