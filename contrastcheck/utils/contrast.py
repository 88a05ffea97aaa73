"""WCAG contrast ratio utilities.

Implements the relative luminance and contrast ratio calculations defined in
WCAG 2.x Success Criterion 1.4.3 (Contrast — Minimum).
"""

from __future__ import annotations

from contrastcheck.models import RGBColor

# sRGB linearisation breakpoint as published in WCAG 2.x
_LINEAR_THRESHOLD = 0.03928

_WEIGHTS = (0.2126, 0.7152, 0.0722)


def _srgb_to_linear(v: float) -> float:
    """Convert an sRGB channel (0-1) to linear light."""
    if v <= _LINEAR_THRESHOLD:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: RGBColor) -> float:
    """Compute relative luminance (0-1) for an 8-bit sRGB color.

    L = 0.2126*R + 0.7152*G + 0.0722*B
    where R, G, B are linearized sRGB values.
    """
    return sum(
        weight * _srgb_to_linear(channel / 255.0)
        for weight, channel in zip(_WEIGHTS, color)
    )


def contrast_ratio(color1: RGBColor, color2: RGBColor) -> float:
    """Compute the WCAG contrast ratio between two colors at full precision.

    Returns a value between 1.0 (identical) and 21.0 (black on white).
    Argument order does not matter.
    """
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def compute_ratio(color1: RGBColor, color2: RGBColor, precision: int = 2) -> float:
    """Contrast ratio rounded to *precision* decimals, for display only."""
    return round(contrast_ratio(color1, color2), precision)
