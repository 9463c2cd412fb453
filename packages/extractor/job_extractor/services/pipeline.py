"""Job extraction pipeline — the single entry point the HTTP layer calls.

validate URL → fetch + reduce page → structure with the model (falling back
to synthesized data on failure).

Dependencies are injected via the constructor so the pipeline is testable
without real browsers or model calls. Each call is a linear sequence with no
shared mutable state, so one pipeline instance serves concurrent requests.
"""

from __future__ import annotations

import logging
import time

from job_extractor.browser.fetcher import ContentFetcher
from job_extractor.middleware.error_handler import ValidationError
from job_extractor.models.requests import (
    Degraded,
    ExtractionOutcome,
    ExtractionRequest,
)
from job_extractor.structuring.engine import StructuringEngine
from job_extractor.validators.url_validator import validate_job_url

logger = logging.getLogger(__name__)


class JobExtractionPipeline:
    """Orchestrates one URL → job record extraction."""

    def __init__(self, *, fetcher: ContentFetcher, engine: StructuringEngine) -> None:
        self._fetcher = fetcher
        self._engine = engine

    async def process(
        self,
        url: str,
        image_url: str | None = None,
        company_name: str | None = None,
    ) -> ExtractionOutcome:
        """Extract a job record from *url*.

        Returns
        -------
        ExtractionOutcome
            ``Success`` with the model's record, or ``Degraded`` with fallback
            data when structuring failed.

        Raises
        ------
        ValidationError
            If *url* is not a well-formed absolute URL. Nothing is fetched.
        AcquisitionError
            If the page could not be rendered.
        """
        started = time.monotonic()
        image_url = image_url or None
        company_name = (company_name or "").strip() or None

        validation = validate_job_url(url)
        if not validation.valid:
            raise ValidationError(validation.error)

        logger.info(
            "New extraction request: %s (company=%s)",
            url,
            company_name or "-",
            extra={"target_url": url, "stage": "validation"},
        )
        if not validation.likely_job_posting:
            logger.warning(
                "URL may not be a job posting: %s",
                url,
                extra={"target_url": url, "likely_job_posting": False},
            )

        payload = await self._fetcher.fetch(url)

        outcome = await self._engine.extract(
            ExtractionRequest(
                payload=payload,
                image_url=image_url,
                company_name=company_name,
            )
        )

        logger.info(
            "Processed job posting %s",
            url,
            extra={
                "target_url": url,
                "outcome": "degraded" if isinstance(outcome, Degraded) else "success",
                "duration_ms": round((time.monotonic() - started) * 1000),
            },
        )
        return outcome
