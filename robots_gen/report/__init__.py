# File: robots_gen/report/__init__.py
"""robots_gen.report: JSON findings reports used by the CLI."""

from robots_gen.report.json_report import build_report, render_json

__all__ = ["build_report", "render_json"]
