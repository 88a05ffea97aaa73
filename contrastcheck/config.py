"""Pydantic configuration model with YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from contrastcheck.models import Criterion

_DEFAULT_CONFIG_NAME = "contrastcheck.yaml"


class DisplayConfig(BaseModel):
    """How ratios are shown."""

    precision: int = Field(default=2, ge=0, le=6)


class OutputConfig(BaseModel):
    """Output format settings."""

    report_format: Literal["text", "json", "markdown"] = "text"


class ContrastConfig(BaseModel):
    """Top-level configuration for contrastcheck."""

    criteria: list[Criterion] = Field(default_factory=lambda: list(Criterion), min_length=1)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> ContrastConfig:
        """Load config from a YAML file.

        Search order when *path* is None:
          1. ./contrastcheck.yaml
          2. ~/.config/contrastcheck/contrastcheck.yaml

        Returns default config if no file is found.
        """
        if path is not None:
            return cls._from_yaml(path)

        candidates = [
            Path.cwd() / _DEFAULT_CONFIG_NAME,
            Path.home() / ".config" / "contrastcheck" / _DEFAULT_CONFIG_NAME,
        ]
        for candidate in candidates:
            if candidate.is_file():
                return cls._from_yaml(candidate)

        return cls()

    @classmethod
    def _from_yaml(cls, path: Path) -> ContrastConfig:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)
