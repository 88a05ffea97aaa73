"""Tests for the foreground/background contrast check."""

from __future__ import annotations

import pytest

from contrastcheck.checker import check_contrast
from contrastcheck.models import ComplianceStatus, Criterion, ParseError, RGBColor, Severity


class TestCheckContrast:
    def test_gray_on_white(self) -> None:
        report = check_contrast("#777", "white")
        assert report.ok
        assert report.display_ratio == 4.48
        assert report.ratio == pytest.approx(4.478, abs=1e-3)
        assert report.results[Criterion.NORMAL_TEXT_AA] is ComplianceStatus.FAIL
        assert report.results[Criterion.LARGE_TEXT_AA] is ComplianceStatus.PASS
        assert report.results[Criterion.GRAPHICS] is ComplianceStatus.PASS
        assert report.issues == []

    def test_mixed_formats(self) -> None:
        report = check_contrast("rgb(0, 0, 0)", "hsl(0, 0%, 100%)")
        assert report.display_ratio == 21.0
        assert report.passed == list(Criterion)
        assert report.failed == []

    def test_order_does_not_matter(self) -> None:
        a = check_contrast("navy", "#fafafa")
        b = check_contrast("#fafafa", "navy")
        assert a.ratio == b.ratio

    def test_parsed_colors_exposed(self) -> None:
        report = check_contrast("#abc", "black")
        assert report.foreground.color == RGBColor(0xAA, 0xBB, 0xCC)
        assert report.background.color == RGBColor(0, 0, 0)

    def test_criteria_subset(self) -> None:
        report = check_contrast("black", "white", ["normal-text-aaa"])
        assert list(report.results) == [Criterion.NORMAL_TEXT_AAA]

    def test_classifies_unrounded_ratio(self) -> None:
        # 4.478 displays as 4.48 but is still below 4.5
        report = check_contrast("#777777", "#ffffff", [Criterion.NORMAL_TEXT_AA])
        assert report.results[Criterion.NORMAL_TEXT_AA] is ComplianceStatus.FAIL

    def test_precision(self) -> None:
        report = check_contrast("#777777", "#ffffff", precision=1)
        assert report.display_ratio == 4.5


class TestInputIssues:
    def test_empty_foreground_is_info(self) -> None:
        report = check_contrast("", "white")
        assert not report.ok
        assert report.ratio is None
        assert report.display_ratio is None
        assert len(report.issues) == 1
        issue = report.issues[0]
        assert issue.field == "foreground"
        assert issue.error is ParseError.EMPTY
        assert issue.severity is Severity.INFO
        assert report.info_count == 1
        assert report.warning_count == 0

    def test_malformed_background_is_warning(self) -> None:
        report = check_contrast("black", "rgb(999,0,0)")
        issue = report.issues[0]
        assert issue.field == "background"
        assert issue.error is ParseError.MALFORMED
        assert issue.severity is Severity.WARNING
        assert "rgb(999,0,0)" in issue.message

    def test_both_bad(self) -> None:
        report = check_contrast("   ", "notacolor")
        assert [i.field for i in report.issues] == ["foreground", "background"]
        assert report.info_count == 1
        assert report.warning_count == 1

    def test_all_unset_when_no_ratio(self) -> None:
        report = check_contrast("#ggg", "white")
        assert set(report.results.values()) == {ComplianceStatus.UNSET}
        assert report.passed == []
        assert report.failed == []
