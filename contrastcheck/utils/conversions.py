"""Color notation conversions to 8-bit RGB."""

from __future__ import annotations

import math

from contrastcheck.models import HSLColor, RGBColor


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def expand_short_hex(hex_color: str) -> str:
    """Double each digit of a 3-digit hex color: ``#abc`` -> ``#aabbcc``."""
    return "#" + "".join(ch * 2 for ch in hex_color.lstrip("#"))


def hex_to_rgb(hex_color: str) -> RGBColor:
    """Convert ``#rrggbb`` to RGB by reading three base-16 byte pairs."""
    digits = hex_color.lstrip("#")
    return RGBColor(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert HSL to RGB using the chroma / hue-prime construction.

    C = (1 - |2L - 1|) * S, X = C * (1 - |H' mod 2 - 1|), m = L - C / 2.
    Each hue-prime bucket is closed on its upper edge; the last one catches
    everything above 5 (including hue 360).
    """
    s = hsl.s / 100
    light = hsl.l / 100

    chroma = (1 - abs(2 * light - 1)) * s
    hue_prime = hsl.h / 60
    x = chroma * (1 - abs(hue_prime % 2 - 1))

    if hue_prime <= 1:
        r1, g1, b1 = chroma, x, 0.0
    elif hue_prime <= 2:
        r1, g1, b1 = x, chroma, 0.0
    elif hue_prime <= 3:
        r1, g1, b1 = 0.0, chroma, x
    elif hue_prime <= 4:
        r1, g1, b1 = 0.0, x, chroma
    elif hue_prime <= 5:
        r1, g1, b1 = x, 0.0, chroma
    else:
        r1, g1, b1 = chroma, 0.0, x

    m = light - chroma / 2
    return RGBColor(
        _round_half_up((r1 + m) * 255),
        _round_half_up((g1 + m) * 255),
        _round_half_up((b1 + m) * 255),
    )
