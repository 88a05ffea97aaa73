"""Foreground/background contrast check.

Ties the parser, contrast math and classifier together for the two-field
workflow: read a text color and a background color, report the ratio and
which criteria it meets, or explain which field is empty or unrecognised.
"""

from __future__ import annotations

import logging
from typing import Iterable

from contrastcheck.compliance import classify_all
from contrastcheck.models import (
    ContrastReport,
    Criterion,
    InputIssue,
    ParseError,
    ParseResult,
    Severity,
)
from contrastcheck.parser import parse_color
from contrastcheck.utils.contrast import contrast_ratio

logger = logging.getLogger(__name__)

_ISSUE_SEVERITY = {
    ParseError.EMPTY: Severity.INFO,
    ParseError.MALFORMED: Severity.WARNING,
}


def _issue_for(field: str, result: ParseResult) -> InputIssue | None:
    if result.ok or result.error is None:
        return None
    if result.error is ParseError.EMPTY:
        message = f"Enter a {field} color."
    else:
        message = (
            f"Unrecognised {field} color {result.text.strip()!r}. "
            "Use #rgb, #rrggbb, rgb(r, g, b), hsl(h, s%, l%) or a CSS color name."
        )
    return InputIssue(
        field=field,
        error=result.error,
        severity=_ISSUE_SEVERITY[result.error],
        message=message,
    )


def check_contrast(
    foreground: str,
    background: str,
    criteria: Iterable[Criterion | str] | None = None,
    *,
    precision: int = 2,
) -> ContrastReport:
    """Parse both colors, compute their contrast ratio and classify it.

    Input problems never raise; they are listed in ``ContrastReport.issues``
    and every criterion is reported as ``UNSET``.
    """
    selected = list(criteria) if criteria is not None else None

    fg = parse_color(foreground)
    bg = parse_color(background)
    report = ContrastReport(foreground=fg, background=bg)

    for field, result in (("foreground", fg), ("background", bg)):
        issue = _issue_for(field, result)
        if issue is not None:
            report.issues.append(issue)

    if fg.color is not None and bg.color is not None:
        report.ratio = contrast_ratio(fg.color, bg.color)
        report.display_ratio = round(report.ratio, precision)
        logger.debug(
            "Contrast %s vs %s = %.4f", fg.color.to_hex(), bg.color.to_hex(), report.ratio
        )

    report.results = classify_all(report.ratio, selected)
    return report
