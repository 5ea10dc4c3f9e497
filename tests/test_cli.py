# File: tests/test_cli.py
import json

import pytest
from click.testing import CliRunner

from robots_gen import __version__
from robots_gen.cli import cli


@pytest.fixture()
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert f"RobotsGen, version {__version__}" in result.output


def test_help_lists_commands(runner):
    result = runner.invoke(cli, ['-h'])
    assert result.exit_code == 0
    for command in ("generate", "config", "validate", "check", "audit", "humans"):
        assert command in result.output


def test_generate(runner, site_dir, tmp_path):
    report = tmp_path / "report.json"
    result = runner.invoke(cli, [
        'generate', '--site-url', 'https://example.com', '--public-dir', str(site_dir),
        '--disallow', '/admin/', '--allow', '/admin/public/', '--no-comments',
        '--report', str(report),
    ])
    assert result.exit_code == 0, result.output
    robots = site_dir / "robots.txt"
    assert f"robots_path={robots}" in result.output
    assert robots.read_text(encoding="utf-8") == (
        "User-agent: *\nAllow: /admin/public/\nDisallow: /admin/\n"
    )
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["counts"]["error"] == 0
    assert data["size"] == robots.stat().st_size


def test_generate_with_config_file(runner, site_dir, tmp_path):
    cfg = tmp_path / "robots-gen.yaml"
    cfg.write_text(
        f"site_url: https://example.com\npublic_dir: {site_dir}\n"
        "disallow: [/from-file/]\ncomments: false\n",
        encoding="utf-8",
    )
    result = runner.invoke(cli, ['generate', '-c', str(cfg), '--user-agent', 'Googlebot'])
    assert result.exit_code == 0, result.output
    assert (site_dir / "robots.txt").read_text(encoding="utf-8") == (
        "User-agent: Googlebot\nDisallow: /from-file/\n"
    )


def test_generate_bad_config_file(runner, tmp_path):
    cfg = tmp_path / "broken.yaml"
    cfg.write_text("not: a: mapping", encoding="utf-8")
    result = runner.invoke(cli, ['generate', '-c', str(cfg)])
    assert result.exit_code == 1


def test_generate_missing_site_url(runner):
    result = runner.invoke(cli, ['generate', '--no-autodetect'])
    assert result.exit_code == 1


def test_generate_strict_failure(runner, site_dir):
    args = ['generate', '--site-url', 'https://example.com', '--public-dir', str(site_dir),
            '--max-size-kb', '1']
    for i in range(200):
        args += ['--disallow', f'/section-{i:04d}/']
    result = runner.invoke(cli, args)
    assert result.exit_code == 1
    assert not (site_dir / "robots.txt").exists()


def test_config_command(runner, site_dir):
    result = runner.invoke(cli, [
        'config', '--site-url', 'https://example.com', '--public-dir', str(site_dir),
        '--sitemap', '/sitemap.xml', '--crawl-delay', '5', '--no-autodetect',
    ])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["site_url"] == "https://example.com"
    assert data["sitemaps"] == ["/sitemap.xml"]
    assert data["crawl_delay"] == "5"
    assert data["allow_autodetect"] is False


def test_validate_ok(runner, tmp_path):
    robots = tmp_path / "robots.txt"
    robots.write_text("User-agent: *\nDisallow:\n", encoding="utf-8")
    result = runner.invoke(cli, ['validate', str(robots)])
    assert result.exit_code == 0
    assert "robots.txt: OK" in result.output


def test_validate_failure_and_report(runner, tmp_path):
    robots = tmp_path / "robots.txt"
    robots.write_text("Disallow: /x\n", encoding="utf-8")
    report = tmp_path / "report.json"
    result = runner.invoke(cli, ['validate', str(robots), '--report', str(report)])
    assert result.exit_code == 1
    data = json.loads(report.read_text(encoding="utf-8"))
    assert {"type": "error", "message": "Missing required User-agent directive"} in data["findings"]

    relaxed = runner.invoke(cli, ['validate', str(robots), '--no-strict'])
    assert relaxed.exit_code == 0


def test_validate_guesses_security_kind(runner, tmp_path):
    security = tmp_path / "security.txt"
    security.write_text("Policy: https://example.com/policy\n", encoding="utf-8")
    result = runner.invoke(cli, ['validate', str(security)])
    assert result.exit_code == 1


def test_check(runner, tmp_path):
    robots = tmp_path / "robots.txt"
    robots.write_text("User-agent: *\nDisallow: /admin/\nAllow: /admin/public/\n", encoding="utf-8")
    result = runner.invoke(cli, [
        'check', '--robots', str(robots), '/admin/x', '/admin/public/y', '/about',
    ])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert "disallowed /admin/x" in lines
    assert "allowed    /admin/public/y" in lines
    assert "allowed    /about" in lines


def test_audit(runner, site_dir, tmp_path):
    (site_dir / "robots.txt").write_text("User-agent: *\nDisallow: /admin/\n", encoding="utf-8")
    report = tmp_path / "audit.json"
    result = runner.invoke(cli, ['audit', '--public-dir', str(site_dir), '--report', str(report)])
    assert result.exit_code == 0, result.output
    assert "Audited 3 page(s), 1 blocked" in result.output
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["counts"]["warning"] == 2


def test_audit_missing_robots(runner, site_dir):
    result = runner.invoke(cli, ['audit', '--public-dir', str(site_dir)])
    assert result.exit_code == 1


def test_humans(runner, tmp_path):
    out = tmp_path / "out"
    result = runner.invoke(cli, [
        'humans', '--output-dir', str(out), '--team-name', 'Ada', '--site-language', 'English',
    ])
    assert result.exit_code == 0, result.output
    assert f"humans_path={out / 'humans.txt'}" in result.output
    assert "  Language: English" in (out / "humans.txt").read_text(encoding="utf-8")


def test_humans_nothing_to_write(runner, tmp_path):
    result = runner.invoke(cli, ['humans', '--output-dir', str(tmp_path)])
    assert result.exit_code == 0
    assert "humans.txt: nothing to write" in result.output


def test_generate_write_failure(runner, site_dir, monkeypatch):
    def read_only(*args, **kwargs):
        raise PermissionError(13, "Permission denied", str(site_dir / "robots.txt"))

    monkeypatch.setattr("robots_gen.engine.write_document", read_only)
    result = runner.invoke(cli, [
        'generate', '--site-url', 'https://example.com', '--public-dir', str(site_dir),
    ])
    assert result.exit_code == 1
    assert "robots_path=" not in result.output
