# File: tests/conftest.py
from pathlib import Path

import pytest

from robots_gen.config import GenerationConfig
from robots_gen.logger import init_logging


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """
    Run every test inside its own temporary directory, without GitHub
    environment leaking into autodetection.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_REPOSITORY", "GITHUB_OUTPUT", "GITHUB_ACTIONS", "RUNNER_TEMP",
                 "ROBOTS_GEN_MAX_SIZE_KB"):
        monkeypatch.delenv(name, raising=False)
    # CliRunner and the action adapter rebind the handlers
    init_logging(level="DEBUG")
    return tmp_path


@pytest.fixture()
def site_dir(tmp_path) -> Path:
    """
    Create a minimal built site: index.html, about.html and an admin page.
    """
    site = tmp_path / "site"
    (site / "admin").mkdir(parents=True)
    (site / "index.html").write_text(
        '<html><head><link rel="canonical" href="https://example.com/"></head>'
        '<body><a href="/about.html">About</a><a href="/admin/">Admin</a>'
        '<a href="https://other.org/">Out</a><a href="#top">Top</a></body></html>',
        encoding="utf-8",
    )
    (site / "about.html").write_text("<html><body>About</body></html>", encoding="utf-8")
    (site / "admin" / "index.html").write_text(
        '<html><head><link rel="canonical" href="/admin/"></head><body>Admin</body></html>',
        encoding="utf-8",
    )
    return site


@pytest.fixture()
def make_config(site_dir):
    """
    Return a factory for GenerationConfig bound to the temporary site.
    """

    def _make(**overrides) -> GenerationConfig:
        values = dict(site_url="https://example.com", public_dir=site_dir, comments=False)
        values.update(overrides)
        return GenerationConfig(**values)

    return _make
