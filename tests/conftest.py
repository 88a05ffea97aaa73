"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from contrastcheck.models import RGBColor


@pytest.fixture
def black() -> RGBColor:
    return RGBColor(0, 0, 0)


@pytest.fixture
def white() -> RGBColor:
    return RGBColor(255, 255, 255)


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Write a sample config YAML and return its path."""
    content = """\
criteria:
  - normal-text-AA
  - large-text-AA
display:
  precision: 3
output:
  report_format: json
"""
    path = tmp_path / "contrastcheck.yaml"
    path.write_text(content, encoding="utf-8")
    return path
