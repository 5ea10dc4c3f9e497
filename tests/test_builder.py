# File: tests/test_builder.py
from robots_gen import __version__
from robots_gen.builder import GeneratedDocument
from robots_gen.builder.robots import build_robots_txt, resolve_sitemap


def _directive_lines(text, name):
    return [line for line in text.splitlines() if line.split(":", 1)[0] == name]


def test_empty_lists_emit_single_bare_disallow(make_config):
    doc = build_robots_txt(make_config())
    assert doc.text == "User-agent: *\nDisallow:\n"
    assert _directive_lines(doc.text, "Disallow") == ["Disallow:"]
    assert _directive_lines(doc.text, "Allow") == []


def test_disallow_only_keeps_order(make_config):
    doc = build_robots_txt(make_config(disallow=["/admin/", "/private/"]))
    assert _directive_lines(doc.text, "Disallow") == ["Disallow: /admin/", "Disallow: /private/"]
    assert _directive_lines(doc.text, "Allow") == []


def test_allow_lines_come_before_disallow(make_config):
    doc = build_robots_txt(make_config(allow=["/admin/public/"], disallow=["/admin/"]))
    lines = doc.lines
    assert lines.index("Allow: /admin/public/") < lines.index("Disallow: /admin/")
    assert lines[0] == "User-agent: *"


def test_paths_get_leading_slash(make_config):
    doc = build_robots_txt(make_config(disallow=["admin"], allow=["public"]))
    assert "Disallow: /admin" in doc.lines
    assert "Allow: /public" in doc.lines


def test_user_agent_and_crawl_delay(make_config):
    doc = build_robots_txt(make_config(user_agent="Googlebot", crawl_delay="10"))
    assert doc.text == "User-agent: Googlebot\nDisallow:\nCrawl-delay: 10\n"


def test_crawl_delay_is_emitted_verbatim(make_config):
    doc = build_robots_txt(make_config(crawl_delay="-5"))
    assert "Crawl-delay: -5" in doc.lines


def test_sitemaps_are_resolved_after_blank_line(make_config):
    cfg = make_config(
        sitemaps=["sitemap.xml", "https://cdn.example.org/s.xml", "./news.xml"],
    )
    doc = build_robots_txt(cfg)
    assert doc.text == (
        "User-agent: *\n"
        "Disallow:\n"
        "\n"
        "Sitemap: https://example.com/sitemap.xml\n"
        "Sitemap: https://cdn.example.org/s.xml\n"
        "Sitemap: https://example.com/news.xml\n"
    )


def test_resolve_sitemap_is_root_relative():
    assert resolve_sitemap("https://example.com/blog/", "/sitemap.xml") == (
        "https://example.com/sitemap.xml"
    )
    assert resolve_sitemap("https://example.com", "HTTP://Example.com/a.xml") == (
        "HTTP://Example.com/a.xml"
    )


def test_banner_is_prepended(make_config):
    doc = build_robots_txt(make_config(comments=True))
    assert doc.lines[0].startswith("# ")
    assert f"v{__version__}" in doc.text
    user_agent_index = doc.lines.index("User-agent: *")
    assert all(line.startswith("#") or not line for line in doc.lines[:user_agent_index])


def test_no_rule_line_precedes_user_agent(make_config):
    doc = build_robots_txt(
        make_config(comments=True, allow=["/a/"], disallow=["/b/"], crawl_delay="1")
    )
    first_rule = min(
        i for i, line in enumerate(doc.lines) if line.startswith(("Allow", "Disallow", "Crawl"))
    )
    assert doc.lines.index("User-agent: *") < first_rule


def test_document_size_counts_utf8_bytes():
    assert GeneratedDocument("é\n").size == 3
