# File: tests/test_humans.py
import pytest

from robots_gen.builder.humans import build_humans_txt
from robots_gen.config import HumansConfig
from robots_gen.validation import validate_humans_txt
from robots_gen.validation.findings import Severity, has_errors


def test_empty_config_builds_nothing():
    assert build_humans_txt(HumansConfig()).text == ""
    assert build_humans_txt(HumansConfig(team_name="   ")).text == ""


def test_sections_and_field_order():
    cfg = HumansConfig(
        team_name="Ada Lovelace",
        team_location="London",
        thanks_name="Charles Babbage",
        thanks_url="https://example.com/charles",
        site_language="English",
        site_last_update="2024/01/01",
    )
    text = build_humans_txt(cfg).text
    assert text.startswith("/* ")
    assert "/* TEAM */\n  Name: Ada Lovelace\n  Location: London\n" in text
    assert "/* THANKS */\n  Charles Babbage\n  https://example.com/charles\n" in text
    assert "/* SITE */\n  Last update: 2024/01/01\n  Language: English\n" in text
    assert text.index("/* TEAM */") < text.index("/* THANKS */") < text.index("/* SITE */")
    assert "HUMANS.TXT" not in text


def test_header_comments():
    text = build_humans_txt(HumansConfig(include_comments=True)).text
    assert "/* HUMANS.TXT */\n/* humanstxt.org */" in text


def test_generated_file_validates():
    text = build_humans_txt(HumansConfig(team_name="Ada", site_standards="HTML5")).text
    findings = validate_humans_txt(text)
    assert not has_errors(findings)
    assert findings[-1].message == "Valid humans.txt format"
    assert "Contains standard sections: TEAM, SITE" in [f.message for f in findings]


@pytest.mark.parametrize("strict,severity", [(True, Severity.ERROR), (False, Severity.WARNING)])
def test_missing_sections(strict, severity):
    findings = validate_humans_txt("hello", strict=strict)
    messages = {f.message: f.severity for f in findings}
    assert messages["Missing standard sections (TEAM, SITE, or THANKS)"] is severity
    assert messages["No standard fields detected (Name, Title, etc.)"] is Severity.WARNING


def test_non_ascii_is_reported():
    findings = validate_humans_txt("/* TEAM */\n  Name: Zoë\n")
    assert "Contains non-ASCII characters (ensure UTF-8 encoding)" in [f.message for f in findings]
