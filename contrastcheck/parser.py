"""Color string parsing.

Accepted notations, tried in this order (first match wins):

- 3-digit hex: ``#fff``
- 6-digit hex: ``#ffffff``
- HSL: ``hsl(240, 100%, 50%)``
- RGB: ``rgb(100, 1, 233)``
- CSS color names: ``white``, ``chocolate``

Input is trimmed and lower-cased first. A string that matches a notation's
syntax but not its numeric ranges (``rgb(300, 0, 0)``) is rejected rather than
handed to the next notation.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, NamedTuple

from contrastcheck.models import (
    ColorFormat,
    HSLColor,
    ParseError,
    ParseResult,
    RGBColor,
)
from contrastcheck.named import is_named_color, lookup
from contrastcheck.utils.conversions import expand_short_hex, hex_to_rgb, hsl_to_rgb

logger = logging.getLogger(__name__)

_HEX3_RE = re.compile(r"^#[0-9a-f]{3}$")
_HEX6_RE = re.compile(r"^#[0-9a-f]{6}$")
_HSL_RE = re.compile(r"^hsl\s?\(\s?(\d{1,3}),\s?(\d{1,3})%,\s?(\d{1,3})%\)$", re.ASCII)
_RGB_RE = re.compile(r"^rgb\(\s?(\d{1,3}),\s?(\d{1,3}),\s?(\d{1,3})\)$", re.ASCII)


class _Format(NamedTuple):
    tag: ColorFormat
    match: Callable[[str], re.Match[str] | str | None]
    convert: Callable[[re.Match[str] | str], RGBColor | None]


def _convert_hex3(m: re.Match[str]) -> RGBColor:
    return hex_to_rgb(expand_short_hex(m.group(0)))


def _convert_hex6(m: re.Match[str]) -> RGBColor:
    return hex_to_rgb(m.group(0))


def _convert_hsl(m: re.Match[str]) -> RGBColor | None:
    h, s, l = (int(g) for g in m.groups())  # noqa: E741
    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= l <= 100):
        return None
    return hsl_to_rgb(HSLColor(h, s, l))


def _convert_rgb(m: re.Match[str]) -> RGBColor | None:
    r, g, b = (int(v) for v in m.groups())
    if not all(0 <= v <= 255 for v in (r, g, b)):
        return None
    return RGBColor(r, g, b)


def _match_named(text: str) -> str | None:
    return text if is_named_color(text) else None


# Precedence order matters: see module docstring.
_FORMATS: tuple[_Format, ...] = (
    _Format(ColorFormat.HEX3, _HEX3_RE.match, _convert_hex3),
    _Format(ColorFormat.HEX6, _HEX6_RE.match, _convert_hex6),
    _Format(ColorFormat.HSL, _HSL_RE.match, _convert_hsl),
    _Format(ColorFormat.RGB, _RGB_RE.match, _convert_rgb),
    _Format(ColorFormat.NAMED, _match_named, lookup),
)


def normalize(text: str) -> str:
    """Trim and lower-case raw input."""
    return text.strip().lower()


def detect_format(text: str) -> ColorFormat | None:
    """Return the notation *text* is written in, ignoring numeric ranges."""
    value = normalize(text)
    for fmt in _FORMATS:
        if fmt.match(value):
            return fmt.tag
    return None


def parse_color(text: str) -> ParseResult:
    """Parse a color string into RGB.

    Never raises for string input; failures are reported through
    ``ParseResult.error`` as either ``EMPTY`` or ``MALFORMED``.
    """
    value = normalize(text)
    if not value:
        return ParseResult(text=text, error=ParseError.EMPTY)

    for fmt in _FORMATS:
        match = fmt.match(value)
        if not match:
            continue
        color = fmt.convert(match)
        if color is None:
            logger.debug("Rejected %r: %s syntax but out of range", text, fmt.tag.value)
            return ParseResult(text=text, error=ParseError.MALFORMED)
        return ParseResult(text=text, color=color, format=fmt.tag)

    logger.debug("Rejected %r: no matching color format", text)
    return ParseResult(text=text, error=ParseError.MALFORMED)


def parse_color_strict(text: str) -> RGBColor:
    """Like :func:`parse_color` but raises :class:`ColorParseError` on failure."""
    return parse_color(text).unwrap()
