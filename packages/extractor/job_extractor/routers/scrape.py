"""Extraction endpoint.

- POST /api/scrape — extract a structured job record from a posting URL
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Response

from job_extractor.models.requests import Degraded, ScrapeRequest
from job_extractor.models.responses import ApiResponse

logger = logging.getLogger(__name__)

FALLBACK_WARNING = "Used fallback data due to extraction error"


def create_scrape_router(*, pipeline: Any = None) -> APIRouter:
    """Factory that creates the scrape router with injected dependencies.

    Parameters
    ----------
    pipeline:
        JobExtractionPipeline used to serve requests. Validation and
        acquisition errors propagate to the registered error handlers.
    """
    scrape_router = APIRouter(prefix="/api", tags=["scrape"])

    @scrape_router.post("/scrape")
    async def scrape(body: ScrapeRequest, response: Response) -> dict:
        """Scrape *url* and return the structured job record."""
        if not body.url or not body.url.strip():
            response.status_code = 400
            return ApiResponse(success=False, error="URL is required").model_dump()

        outcome = await pipeline.process(
            body.url.strip(),
            image_url=body.image_url,
            company_name=body.company_name,
        )

        if isinstance(outcome, Degraded):
            logger.warning("AI extraction failed, returning fallback data")
            return ApiResponse(
                success=True,
                data=outcome.fallback.to_wire(),
                warning=FALLBACK_WARNING,
                meta={"error": outcome.error_message},
            ).model_dump()

        return ApiResponse(success=True, data=outcome.data.to_wire()).model_dump()

    return scrape_router
