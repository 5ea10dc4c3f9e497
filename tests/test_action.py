# File: tests/test_action.py
from robots_gen.action import artifact_store, main, read_inputs, set_output


def _env(site_dir, output_file, **inputs):
    env = {
        "INPUT_SITE_URL": "https://example.com",
        "INPUT_PUBLIC_DIR": str(site_dir),
        "INPUT_ROBOTS_COMMENTS": "false",
        "GITHUB_OUTPUT": str(output_file),
    }
    env.update({f"INPUT_{k.upper()}": v for k, v in inputs.items()})
    return env


def test_read_inputs():
    env = {"INPUT_SITE_URL": "https://x.org", "INPUT_ROBOTS DISALLOW": "/a/", "PATH": "/bin"}
    assert read_inputs(env) == {"site_url": "https://x.org", "robots_disallow": "/a/"}


def test_set_output_appends(tmp_path):
    out = tmp_path / "output"
    set_output("a", "1", {"GITHUB_OUTPUT": str(out)})
    set_output("b", "2", {"GITHUB_OUTPUT": str(out)})
    assert out.read_text(encoding="utf-8") == "a=1\nb=2\n"


def test_artifact_store_only_on_actions(tmp_path):
    assert artifact_store({}) is None
    store = artifact_store({"GITHUB_ACTIONS": "true", "RUNNER_TEMP": str(tmp_path)})
    assert store.store_dir == tmp_path / "robots-gen-artifacts"


def test_main_success(site_dir, tmp_path):
    out = tmp_path / "github_output"
    env = _env(site_dir, out, robots_disallow="/admin/\n/private/", sitemap_urls="sitemap.xml")
    assert main(env) == 0
    robots = site_dir / "robots.txt"
    assert robots.read_text(encoding="utf-8") == (
        "User-agent: *\nDisallow: /admin/\nDisallow: /private/\n\n"
        "Sitemap: https://example.com/sitemap.xml\n"
    )
    assert out.read_text(encoding="utf-8") == f"robots_path={robots}\n"


def test_main_stages_artifacts(site_dir, tmp_path):
    out = tmp_path / "github_output"
    env = _env(site_dir, out, upload_artifacts="true", artifact_name="robots")
    env.update({"GITHUB_ACTIONS": "true", "RUNNER_TEMP": str(tmp_path / "runner")})
    assert main(env) == 0
    staged = tmp_path / "runner" / "robots-gen-artifacts" / "robots"
    assert (staged / "robots.txt").is_file()
    assert f"artifact_dir={staged}" in out.read_text(encoding="utf-8")


def test_main_configuration_error(tmp_path):
    out = tmp_path / "github_output"
    env = {"INPUT_ALLOW_AUTODETECT": "false", "GITHUB_OUTPUT": str(out)}
    assert main(env) == 1
    assert not out.exists()


def test_main_invalid_site_url(site_dir, tmp_path):
    env = _env(site_dir, tmp_path / "out", site_url="example.com")
    assert main(env) == 1


def test_main_strict_failure(site_dir, tmp_path, monkeypatch):
    monkeypatch.setenv("ROBOTS_GEN_MAX_SIZE_KB", "1")
    paths = ",".join(f"/section-{i:04d}/" for i in range(200))
    env = _env(site_dir, tmp_path / "out", robots_disallow=paths)
    assert main(env) == 1
    assert not (site_dir / "robots.txt").exists()


def test_main_write_failure(site_dir, tmp_path, monkeypatch):
    def read_only(*args, **kwargs):
        raise PermissionError(13, "Permission denied", str(site_dir / "robots.txt"))

    monkeypatch.setattr("robots_gen.engine.write_document", read_only)
    out = tmp_path / "github_output"
    assert main(_env(site_dir, out)) == 1
    assert not out.exists()
