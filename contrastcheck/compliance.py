"""Classify contrast ratios against WCAG AA/AAA thresholds.

====================  =========
Criterion             Minimum
====================  =========
graphics              3:1
large-text-AA         3:1
normal-text-AA        4.5:1
large-text-AAA        4.5:1
normal-text-AAA       7:1
====================  =========

Large text is >=18pt, or >=14pt bold. Ratios are compared at full precision.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from contrastcheck.models import ComplianceStatus, Criterion

THRESHOLDS: Mapping[Criterion, float] = MappingProxyType({
    Criterion.GRAPHICS: 3.0,
    Criterion.LARGE_TEXT_AA: 3.0,
    Criterion.NORMAL_TEXT_AA: 4.5,
    Criterion.LARGE_TEXT_AAA: 4.5,
    Criterion.NORMAL_TEXT_AAA: 7.0,
})


def threshold_for(criterion: Criterion | str) -> float:
    """Minimum ratio for *criterion*.

    Raises ``ValueError`` for an unknown criterion name.
    """
    return THRESHOLDS[Criterion(criterion)]


def classify(ratio: float | None, criterion: Criterion | str) -> ComplianceStatus:
    """Check *ratio* against one criterion.

    ``None`` (no ratio could be computed) yields ``UNSET`` rather than a
    pass or fail.
    """
    threshold = threshold_for(criterion)
    if ratio is None:
        return ComplianceStatus.UNSET
    return ComplianceStatus.PASS if ratio >= threshold else ComplianceStatus.FAIL


def classify_all(
    ratio: float | None,
    criteria: Iterable[Criterion | str] | None = None,
) -> dict[Criterion, ComplianceStatus]:
    """Classify *ratio* against several criteria (all of them by default)."""
    selected = list(Criterion) if criteria is None else [Criterion(c) for c in criteria]
    return {c: classify(ratio, c) for c in selected}


def passes_aa(ratio: float, *, large_text: bool = False) -> bool:
    """Check whether a contrast ratio meets WCAG AA.

    Normal text: 4.5:1 minimum.
    Large text: 3:1 minimum.
    """
    criterion = Criterion.LARGE_TEXT_AA if large_text else Criterion.NORMAL_TEXT_AA
    return classify(ratio, criterion) is ComplianceStatus.PASS


def passes_aaa(ratio: float, *, large_text: bool = False) -> bool:
    """Check whether a contrast ratio meets WCAG AAA (7:1, or 4.5:1 for large text)."""
    criterion = Criterion.LARGE_TEXT_AAA if large_text else Criterion.NORMAL_TEXT_AAA
    return classify(ratio, criterion) is ComplianceStatus.PASS
