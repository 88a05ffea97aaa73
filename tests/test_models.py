"""Tests for core data models."""

from __future__ import annotations

import dataclasses

import pytest

from contrastcheck.models import (
    ColorParseError,
    ComplianceStatus,
    ContrastReport,
    Criterion,
    HSLColor,
    InputIssue,
    ParseError,
    ParseResult,
    RGBColor,
    Severity,
)


class TestRGBColor:
    def test_components(self) -> None:
        c = RGBColor(1, 2, 3)
        assert c.as_tuple() == (1, 2, 3)
        assert tuple(c) == (1, 2, 3)
        assert len(list(c)) == 3

    def test_to_hex(self) -> None:
        assert RGBColor(255, 0, 10).to_hex() == "#ff000a"

    def test_css(self) -> None:
        assert RGBColor(51, 102, 153).css() == "rgb(51, 102, 153)"

    @pytest.mark.parametrize("bad", [(-1, 0, 0), (0, 256, 0), (0, 0, 1000)])
    def test_out_of_range(self, bad: tuple[int, int, int]) -> None:
        with pytest.raises(ValueError):
            RGBColor(*bad)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(ValueError):
            RGBColor(1.5, 0, 0)  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            RGBColor(True, 0, 0)

    def test_immutable(self) -> None:
        c = RGBColor(0, 0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.r = 10  # type: ignore[misc]

    def test_hashable_and_equal(self) -> None:
        assert {RGBColor(1, 2, 3), RGBColor(1, 2, 3)} == {RGBColor(1, 2, 3)}


class TestHSLColor:
    def test_valid(self) -> None:
        assert HSLColor(360, 100, 0).h == 360

    @pytest.mark.parametrize("bad", [(361, 0, 0), (0, 101, 0), (0, 0, -1)])
    def test_out_of_range(self, bad: tuple[int, int, int]) -> None:
        with pytest.raises(ValueError):
            HSLColor(*bad)


class TestCriterion:
    def test_values(self) -> None:
        assert Criterion.NORMAL_TEXT_AA.value == "normal-text-AA"
        assert Criterion.GRAPHICS.value == "graphics"

    def test_case_insensitive_lookup(self) -> None:
        assert Criterion("NORMAL-TEXT-aa") is Criterion.NORMAL_TEXT_AA
        assert Criterion(" large-text-aaa ") is Criterion.LARGE_TEXT_AAA

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            Criterion("medium-text-AA")


class TestParseResult:
    def test_unwrap_ok(self) -> None:
        result = ParseResult(text="#000", color=RGBColor(0, 0, 0))
        assert result.ok
        assert result.unwrap() == RGBColor(0, 0, 0)

    def test_unwrap_error(self) -> None:
        result = ParseResult(text="", error=ParseError.EMPTY)
        with pytest.raises(ColorParseError) as exc_info:
            result.unwrap()
        assert exc_info.value.error is ParseError.EMPTY
        assert "No color" in str(exc_info.value)


class TestContrastReport:
    def test_counts(self) -> None:
        report = ContrastReport(
            foreground=ParseResult(text=""),
            background=ParseResult(text="x"),
            issues=[
                InputIssue("foreground", ParseError.EMPTY, Severity.INFO, "i"),
                InputIssue("background", ParseError.MALFORMED, Severity.WARNING, "w"),
            ],
        )
        assert report.info_count == 1
        assert report.warning_count == 1
        assert not report.ok

    def test_passed_and_failed(self) -> None:
        report = ContrastReport(
            foreground=ParseResult(text="a"),
            background=ParseResult(text="b"),
            ratio=5.0,
            results={
                Criterion.NORMAL_TEXT_AA: ComplianceStatus.PASS,
                Criterion.NORMAL_TEXT_AAA: ComplianceStatus.FAIL,
            },
        )
        assert report.ok
        assert report.passed == [Criterion.NORMAL_TEXT_AA]
        assert report.failed == [Criterion.NORMAL_TEXT_AAA]
