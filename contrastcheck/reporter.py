"""Report generation — JSON, Markdown, and plain-text output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from contrastcheck.compliance import THRESHOLDS
from contrastcheck.models import ContrastReport, ParseResult


def _color_to_dict(result: ParseResult) -> dict[str, Any]:
    return {
        "input": result.text,
        "format": result.format.value if result.format else None,
        "rgb": list(result.color.as_tuple()) if result.color else None,
        "hex": result.color.to_hex() if result.color else None,
        "error": result.error.value if result.error else None,
    }


def report_to_dict(report: ContrastReport) -> dict[str, Any]:
    """Return a JSON-serialisable view of *report*."""
    return {
        "foreground": _color_to_dict(report.foreground),
        "background": _color_to_dict(report.background),
        "ratio": report.display_ratio,
        "results": {c.value: s.value for c, s in report.results.items()},
        "issues": [
            {
                "field": i.field,
                "error": i.error.value,
                "severity": i.severity.value,
                "message": i.message,
            }
            for i in report.issues
        ],
    }


def write_json_report(report: ContrastReport, output: Path) -> None:
    """Write a contrast report as JSON."""
    output.write_text(json.dumps(report_to_dict(report), indent=2), encoding="utf-8")


def format_markdown(report: ContrastReport) -> str:
    lines: list[str] = [
        "# Contrast Report",
        "",
        f"- **Foreground:** `{report.foreground.text.strip()}`"
        + (f" ({report.foreground.color.to_hex()})" if report.foreground.color else ""),
        f"- **Background:** `{report.background.text.strip()}`"
        + (f" ({report.background.color.to_hex()})" if report.background.color else ""),
        f"- **Ratio:** {_ratio_text(report)}",
        "",
        "| Criterion | Minimum | Result |",
        "| --- | --- | --- |",
    ]
    for criterion, status in report.results.items():
        lines.append(f"| {criterion.value} | {THRESHOLDS[criterion]:g}:1 | {status.value} |")

    if report.issues:
        lines += ["", "## Issues", ""]
        for issue in report.issues:
            marker = "WARN" if issue.severity.value == "warning" else "INFO"
            lines.append(f"- **[{marker}]** `{issue.field}`: {issue.message}")

    lines.append("")
    return "\n".join(lines)


def write_markdown_report(report: ContrastReport, output: Path) -> None:
    """Write a contrast report as Markdown."""
    output.write_text(format_markdown(report), encoding="utf-8")


def _ratio_text(report: ContrastReport) -> str:
    if report.display_ratio is None:
        return "n/a"
    return f"{report.display_ratio}:1"


def format_summary(report: ContrastReport) -> str:
    """Return a human-readable summary of a contrast check."""
    lines = [f"Contrast ratio: {_ratio_text(report)}"]
    for criterion, status in report.results.items():
        lines.append(f"  [{status.value.upper()}] {criterion.value}")
    for issue in report.issues:
        lines.append(f"  {issue.severity.value}: {issue.message}")
    return "\n".join(lines)
