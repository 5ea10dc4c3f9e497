# robots_gen/report/json_report.py

"""
JSON report of a generation or validation run.

Serialises the findings together with the file they describe.
"""
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from robots_gen.validation.findings import Finding, Severity, count


def build_report(
    findings: Iterable[Finding], path: Optional[Path] = None, size: Optional[int] = None
) -> Dict[str, Any]:
    """Plain-dict form of a run: file, size, findings and per-severity counts."""
    items = list(findings)
    return {
        "path": str(path) if path is not None else None,
        "size": size,
        "findings": [f.as_dict() for f in items],
        "counts": {s.value: count(items, s) for s in Severity},
    }


def render_json(report: Dict[str, Any], output_path: Path | str) -> Path:
    """
    Save *report* as JSON at *output_path*.

    :param report: dict built by :func:`build_report`
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from robots_gen.report.json_report import build_report, render_json
    report_path = render_json(build_report(findings, path, size), 'reports/robots.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report, f, ensure_ascii=False, indent=2)

    return output
