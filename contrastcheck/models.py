"""Shared data models used across the contrast checker."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator


class Severity(str, enum.Enum):
    """Severity level for a problem with user input."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ColorFormat(str, enum.Enum):
    """Input notation a color was recognised in."""

    HEX3 = "hex3"
    HEX6 = "hex6"
    HSL = "hsl"
    RGB = "rgb"
    NAMED = "named"


class ParseError(str, enum.Enum):
    """Why a color string could not be parsed.

    ``EMPTY`` means nothing was entered; ``MALFORMED`` means something was
    entered but it matches no supported format (or is out of range).
    """

    EMPTY = "empty"
    MALFORMED = "malformed"


class Criterion(str, enum.Enum):
    """WCAG success criterion a contrast ratio can be checked against."""

    GRAPHICS = "graphics"
    LARGE_TEXT_AA = "large-text-AA"
    NORMAL_TEXT_AA = "normal-text-AA"
    LARGE_TEXT_AAA = "large-text-AAA"
    NORMAL_TEXT_AAA = "normal-text-AAA"

    @classmethod
    def _missing_(cls, value: object) -> Criterion | None:
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


class ComplianceStatus(str, enum.Enum):
    """Outcome of checking a ratio against one criterion."""

    PASS = "pass"
    FAIL = "fail"
    UNSET = "unset"  # no ratio available (empty or invalid input)


class ColorParseError(ValueError):
    """Raised by exception-style callers when a color string is rejected."""

    def __init__(self, text: str, error: ParseError) -> None:
        self.text = text
        self.error = error
        if error is ParseError.EMPTY:
            message = "No color given"
        else:
            message = f"Unrecognised color: {text!r}"
        super().__init__(message)


def _check_range(name: str, value: object, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


@dataclass(frozen=True)
class RGBColor:
    """An 8-bit sRGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_range(name, getattr(self, name), 0, 255)

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Lower-case ``#rrggbb`` notation."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def css(self) -> str:
        """Functional ``rgb(r, g, b)`` notation, e.g. for painting a swatch."""
        return f"rgb({self.r}, {self.g}, {self.b})"


@dataclass(frozen=True)
class HSLColor:
    """Hue in degrees, saturation and lightness in percent."""

    h: int
    s: int
    l: int  # noqa: E741

    def __post_init__(self) -> None:
        _check_range("h", self.h, 0, 360)
        _check_range("s", self.s, 0, 100)
        _check_range("l", self.l, 0, 100)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a single color string.

    Exactly one of ``color`` and ``error`` is set.
    """

    text: str
    color: RGBColor | None = None
    format: ColorFormat | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.color is not None

    def unwrap(self) -> RGBColor:
        """Return the parsed color or raise :class:`ColorParseError`."""
        if self.color is None:
            raise ColorParseError(self.text, self.error or ParseError.MALFORMED)
        return self.color


@dataclass
class InputIssue:
    """A problem with one of the two color fields."""

    field: str  # "foreground" or "background"
    error: ParseError
    severity: Severity
    message: str


@dataclass
class ContrastReport:
    """Complete result of checking a foreground/background pair."""

    foreground: ParseResult
    background: ParseResult
    ratio: float | None = None
    display_ratio: float | None = None
    results: dict[Criterion, ComplianceStatus] = field(default_factory=dict)
    issues: list[InputIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.ratio is not None

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == Severity.WARNING)

    @property
    def info_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == Severity.INFO)

    @property
    def passed(self) -> list[Criterion]:
        return [c for c, s in self.results.items() if s == ComplianceStatus.PASS]

    @property
    def failed(self) -> list[Criterion]:
        return [c for c, s in self.results.items() if s == ComplianceStatus.FAIL]
