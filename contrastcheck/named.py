"""Read-only table of CSS named colors.

The table lives in ``named_colors.yaml`` next to this module and is loaded once
at import time. Keys are lowercase names; values are :class:`RGBColor`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

from contrastcheck.models import RGBColor

logger = logging.getLogger(__name__)

_TABLE_PATH = Path(__file__).parent / "named_colors.yaml"


def load_named_colors(path: Path = _TABLE_PATH) -> Mapping[str, RGBColor]:
    """Read a ``name: "#rrggbb"`` YAML mapping into an immutable table."""
    raw: dict[str, str] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    table: dict[str, RGBColor] = {}
    for name, value in raw.items():
        digits = str(value).lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Bad color value for {name!r} in {path.name}: {value!r}")
        table[str(name).lower()] = RGBColor(
            int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
        )
    logger.debug("Loaded %d named colors from %s", len(table), path)
    return MappingProxyType(table)


NAMED_COLORS: Mapping[str, RGBColor] = load_named_colors()


def is_named_color(name: str) -> bool:
    return name in NAMED_COLORS


def lookup(name: str) -> RGBColor | None:
    """Return the color for an exact lowercase *name*, or None."""
    return NAMED_COLORS.get(name)
