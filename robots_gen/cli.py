# === FILE: robots_gen/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point of RobotsGen.

Commands:
  generate  Build, validate and write robots.txt
  config    Show the effective generation config as JSON
  validate  Validate an existing robots.txt, humans.txt or security.txt
  check     Tell whether URL paths are blocked by a robots.txt
  audit     Cross-check built HTML pages against robots.txt
  humans    Build, validate and write humans.txt

Common options:
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only when omitted)
  --log-format FORMAT Logging format (e.g. "%(asctime)s %(levelname)s %(message)s")
  --version, -v       Show the RobotsGen version

Example:
  robots-gen generate --site-url https://example.com --public-dir dist \\
      --disallow /admin/ --sitemap /sitemap.xml
"""
import functools
import os
import sys
from pathlib import Path

import click
from click.core import ParameterSource

from robots_gen import __version__
from robots_gen.artifacts import DirectoryArtifactUploader
from robots_gen.audit import audit_site, is_blocked
from robots_gen.config import ConfigurationError, HumansConfig, build_config, read_config_data
from robots_gen.engine import RobotsGenerator, StrictValidationError, generate_humans
from robots_gen.logger import init_logging
from robots_gen.parser.robots_parser import parse_robots_rules
from robots_gen.report.json_report import build_report, render_json
from robots_gen.validation import VALIDATORS, has_errors, log_findings

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])

_DEFAULT_SIZE_KB = {"robots": 500, "humans": 500, "security": 32}
_GENERATION_FIELDS = (
    "site_url", "public_dir", "output_dir", "filename", "user_agent", "disallow", "allow",
    "crawl_delay", "sitemaps", "comments", "strict", "debug", "upload", "allow_autodetect",
    "artifact_name", "artifact_retention_days", "max_size_kb",
)


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _guess_kind(path: Path) -> str:
    name = path.name.lower()
    for kind in ("humans", "security"):
        if name.startswith(kind):
            return kind
    return "robots"


def generation_options(func):
    """Options shared by ``generate`` and ``config``; unset options stay None."""

    @click.option('--config', '-c', 'config_path', default=None,
                  type=click.Path(exists=True, dir_okay=False, path_type=Path),
                  help='YAML or JSON file with generation settings')
    @click.option('--site-url', default=None, help='Absolute site URL (http:// or https://)')
    @click.option('--public-dir', default=None, type=click.Path(path_type=Path),
                  help='Built site directory [dist]')
    @click.option('--output-dir', default=None, type=click.Path(path_type=Path),
                  help='Output directory [public dir]')
    @click.option('--filename', default=None, help='Output file name [robots.txt]')
    @click.option('--user-agent', default=None, help='User-agent of the group [*]')
    @click.option('--disallow', multiple=True, help='Disallow pattern (repeatable)')
    @click.option('--allow', multiple=True, help='Allow pattern (repeatable)')
    @click.option('--crawl-delay', default=None, help='Crawl-delay value')
    @click.option('--sitemap', 'sitemaps', multiple=True,
                  help='Sitemap URL or site path (repeatable)')
    @click.option('--comments/--no-comments', default=None, help='Prepend the generator banner')
    @click.option('--strict/--no-strict', default=None, help='Validation errors abort the run')
    @click.option('--debug', is_flag=True, default=None, help='Print the generated file')
    @click.option('--upload', is_flag=True, default=None, help='Stage the file as an artifact')
    @click.option('--autodetect/--no-autodetect', 'allow_autodetect', default=None,
                  help='Autodetect public dir and site URL')
    @click.option('--artifact-name', default=None, help='Artifact name [robots-file]')
    @click.option('--artifact-retention-days', default=None, type=click.IntRange(1, 90),
                  help='Artifact retention (days)')
    @click.option('--max-size-kb', default=None, type=click.IntRange(min=1),
                  help='Size limit in KB [500]')
    @functools.wraps(func)
    def wrapper(*args, config_path, **options):
        ctx = click.get_current_context()
        try:
            data = read_config_data(config_path) if config_path else {}
        except (OSError, TypeError, ValueError) as e:
            print_error(f'Failed to load configuration: {e}')
        for name in _GENERATION_FIELDS:
            value = options.pop(name)
            # only options given on the command line override the config file
            if ctx.get_parameter_source(name) is ParameterSource.DEFAULT:
                continue
            data[name] = list(value) if isinstance(value, tuple) else value
        try:
            cfg = build_config(data)
        except ConfigurationError as e:
            print_error(f'Configuration error: {e}')
        return func(*args, cfg=cfg, **options)

    return wrapper


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='RobotsGen, version %(version)s')
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stdout only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(levelname)s %(message)s',
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, log_level, log_file, log_format):
    """RobotsGen: robots.txt and humans.txt generator and validator."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)


@cli.command('generate', context_settings=CONTEXT_SETTINGS)
@generation_options
@click.option(
    '--artifact-dir', 'artifact_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Artifact staging directory [$RUNNER_TEMP/robots-gen-artifacts or .artifacts]'
)
@click.option(
    '--report', 'report_path',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON findings report'
)
def generate(cfg, artifact_dir, report_path):
    """Build, validate and write robots.txt."""
    if artifact_dir is None:
        runner_temp = os.environ.get('RUNNER_TEMP')
        artifact_dir = (
            Path(runner_temp) / 'robots-gen-artifacts' if runner_temp else Path('.artifacts')
        )
    generator = RobotsGenerator(cfg, uploader=DirectoryArtifactUploader(artifact_dir))
    try:
        result = generator.run()
    except ConfigurationError as e:
        print_error(f'Configuration error: {e}')
    except StrictValidationError as e:
        if report_path:
            render_json(build_report(e.findings), report_path)
        print_error(str(e))
    except OSError as e:
        print_error(f'Failed to write robots.txt: {e}')

    if report_path:
        try:
            saved = render_json(
                build_report(result.findings, result.path, result.document.size), report_path
            )
            click.echo(f'JSON report: {saved}')
        except OSError as e:
            print_error(f'Failed to save JSON report: {e}')
    click.echo(f'robots_path={result.path}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@generation_options
def show_config(cfg):
    """Show the effective generation config as JSON."""
    click.echo(cfg.model_dump_json(indent=2))


@cli.command('validate', context_settings=CONTEXT_SETTINGS)
@click.argument('file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--kind', type=click.Choice(sorted(VALIDATORS)), default=None,
              help='File type (guessed from the file name when omitted)')
@click.option('--strict/--no-strict', default=True, show_default=True,
              help='Report structural problems as errors')
@click.option('--max-size-kb', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Size limit in KB [500, 32 for security.txt]')
@click.option('--require-sitemap', is_flag=True, help='robots.txt must reference a sitemap')
@click.option('--public-dir', type=click.Path(file_okay=False, path_type=Path), default=None,
              help='Built site directory for local sitemap checks')
@click.option('--site-url', default=None, help='Site URL for local sitemap checks')
@click.option('--report', 'report_path', default=None,
              type=click.Path(writable=True, dir_okay=False, path_type=Path),
              help='Save a JSON findings report')
def validate(file, kind, strict, max_size_kb, require_sitemap, public_dir, site_url, report_path):
    """Validate an existing robots.txt, humans.txt or security.txt."""
    kind = kind or _guess_kind(file)
    text = file.read_text(encoding='utf-8', errors='replace')
    options = dict(strict=strict, max_size_kb=max_size_kb or _DEFAULT_SIZE_KB[kind])
    if kind == 'robots':
        options.update(require_sitemap=require_sitemap, public_dir=public_dir, site_url=site_url)
    findings = VALIDATORS[kind](text, **options)
    log_findings(findings)

    if report_path:
        render_json(build_report(findings, file, len(text.encode('utf-8'))), report_path)
    if strict and has_errors(findings):
        print_error(f'{file.name}: validation failed')
    click.echo(f'{file.name}: OK')


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('paths', nargs=-1, required=True)
@click.option('--robots', 'robots_path', required=True,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='robots.txt to check against')
@click.option('--user-agent', default='*', show_default=True, help='User-agent to check for')
def check(paths, robots_path, user_agent):
    """Tell whether URL PATHS are blocked for a user agent."""
    rules = parse_robots_rules(robots_path.read_text(encoding='utf-8'), user_agent)
    for path in paths:
        status = 'disallowed' if is_blocked(path, rules) else 'allowed'
        click.echo(f'{status:<10} {path}')


@cli.command('audit', context_settings=CONTEXT_SETTINGS)
@click.option('--public-dir', default='dist', show_default=True,
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Built site directory')
@click.option('--robots', 'robots_path', default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help='robots.txt to audit against [<public-dir>/robots.txt]')
@click.option('--user-agent', default='*', show_default=True, help='User-agent to audit for')
@click.option('--site-url', default=None, help='Ignore canonical URLs on other hosts')
@click.option('--report', 'report_path', default=None,
              type=click.Path(writable=True, dir_okay=False, path_type=Path),
              help='Save a JSON findings report')
def audit(public_dir, robots_path, user_agent, site_url, report_path):
    """Cross-check built HTML pages against robots.txt."""
    robots_path = robots_path or public_dir / 'robots.txt'
    if not robots_path.is_file():
        print_error(f'robots.txt not found: {robots_path}')
    rules = parse_robots_rules(robots_path.read_text(encoding='utf-8'), user_agent)
    findings = audit_site(public_dir, rules, site_url)
    log_findings(findings)
    if report_path:
        render_json(build_report(findings, robots_path), report_path)


@cli.command('humans', context_settings=CONTEXT_SETTINGS)
@click.option('--output-dir', default='dist', show_default=True,
              type=click.Path(file_okay=False, path_type=Path), help='Output directory')
@click.option('--filename', default='humans.txt', show_default=True, help='Output file name')
@click.option('--team-name', default=None)
@click.option('--team-title', default=None)
@click.option('--team-contact', default=None)
@click.option('--team-location', default=None)
@click.option('--thanks-name', default=None)
@click.option('--thanks-url', default=None)
@click.option('--site-last-update', default=None)
@click.option('--site-standards', default=None)
@click.option('--site-components', default=None)
@click.option('--site-software', default=None)
@click.option('--site-language', default=None)
@click.option('--site-doctype', default=None)
@click.option('--site-ide', default=None)
@click.option('--comments', 'include_comments', is_flag=True,
              help='Add the humanstxt.org header comment')
@click.option('--strict/--no-strict', default=True, show_default=True,
              help='Validation errors abort the run')
def humans(output_dir, filename, strict, **fields):
    """Build, validate and write humans.txt."""
    config = HumansConfig(**fields)
    try:
        result = generate_humans(config, output_dir, filename=filename, strict=strict)
    except StrictValidationError as e:
        print_error(str(e))
    if result is None:
        click.echo('humans.txt: nothing to write')
        return
    click.echo(f'humans_path={result.path}')


if __name__ == "__main__":
    cli()
