"""contrastcheck — WCAG contrast ratio checker."""

from contrastcheck.checker import check_contrast
from contrastcheck.compliance import classify, classify_all
from contrastcheck.models import (
    ColorFormat,
    ColorParseError,
    ComplianceStatus,
    Criterion,
    ParseError,
    RGBColor,
)
from contrastcheck.parser import parse_color, parse_color_strict
from contrastcheck.utils.contrast import compute_ratio, contrast_ratio, relative_luminance

__version__ = "0.1.0"

__all__ = [
    "ColorFormat",
    "ColorParseError",
    "ComplianceStatus",
    "Criterion",
    "ParseError",
    "RGBColor",
    "check_contrast",
    "classify",
    "classify_all",
    "compute_ratio",
    "contrast_ratio",
    "parse_color",
    "parse_color_strict",
    "relative_luminance",
]
