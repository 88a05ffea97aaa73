"""FastAPI web application exposing the contrast checker as a JSON API."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query

from contrastcheck import __version__
from contrastcheck.checker import check_contrast
from contrastcheck.compliance import THRESHOLDS
from contrastcheck.models import Criterion
from contrastcheck.parser import parse_color
from contrastcheck.reporter import report_to_dict

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and return the FastAPI application."""
    app = FastAPI(title="contrastcheck", version=__version__, redoc_url=None)

    @app.get("/api/parse")
    async def parse(color: str = Query("")) -> dict:
        """Parse a single color string."""
        result = parse_color(color)
        if not result.ok:
            raise HTTPException(
                status_code=422,
                detail={"error": result.error.value, "color": color},
            )
        return {
            "color": color,
            "format": result.format.value,
            "rgb": list(result.color.as_tuple()),
            "hex": result.color.to_hex(),
        }

    @app.get("/api/contrast")
    async def contrast(
        foreground: str = Query(""),
        background: str = Query(""),
        criterion: Optional[List[str]] = Query(None),  # noqa: UP007
    ) -> dict:
        """Check a foreground/background pair.

        Empty or unrecognised input is reported in ``issues`` with a 200
        response; only an unknown criterion name is a client error.
        """
        try:
            criteria = [Criterion(c) for c in criterion] if criterion else None
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))

        report = check_contrast(foreground, background, criteria)
        if report.issues:
            logger.debug("Contrast request with %d input issue(s)", len(report.issues))
        return report_to_dict(report)

    @app.get("/api/criteria")
    async def criteria() -> dict:
        """Minimum ratio for every criterion."""
        return {c.value: t for c, t in THRESHOLDS.items()}

    return app
