"""Structuring engine — turns scraped page text into a :class:`JobRecord`.

prompt build → model call (bounded by a timeout) → fence stripping → JSON
parse → post-processing → schema validation. Any failure along the way is
absorbed into a :class:`Degraded` outcome carrying a synthesized fallback
record; the engine never raises to its caller.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from datetime import date
from typing import TYPE_CHECKING, Any, Callable

import pydantic

from job_extractor.middleware.error_handler import StructuringError
from job_extractor.models.requests import (
    Degraded,
    ExtractionOutcome,
    ExtractionRequest,
    Success,
)
from job_extractor.models.schemas import JobRecord
from job_extractor.structuring.fallback import build_fallback_record
from job_extractor.structuring.generator import TextGenerator
from job_extractor.structuring.prompt import PROMPT_CHAR_BUDGET, build_extraction_prompt
from job_extractor.structuring.response import strip_code_fence

if TYPE_CHECKING:
    from job_extractor.config.settings import ExtractorSettings

logger = logging.getLogger(__name__)

# Placeholder the prompt template uses when no company name is known
COMPANY_NAME_PLACEHOLDER = "Company name"

DEFAULT_GENERATION_TIMEOUT_SECONDS = 30.0


def parse_model_response(text: str) -> dict[str, Any]:
    """Strip any code fence from *text* and parse it as a JSON object.

    Raises
    ------
    StructuringError
        If the response is empty, not valid JSON, or not a JSON object.
    """
    body = strip_code_fence(text or "")
    if not body:
        raise StructuringError("Model returned an empty response")
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise StructuringError(f"Model response is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise StructuringError(
            f"Model response must be a JSON object, got {type(data).__name__}"
        )
    return data


def apply_post_processing(
    data: dict[str, Any],
    *,
    source_url: str,
    image_url: str | None = None,
    company_name: str | None = None,
) -> dict[str, Any]:
    """Fill the fields the caller knows better than the model. Mutates *data*."""
    if not data.get("applyUrl"):
        data["applyUrl"] = source_url

    if image_url:
        if not isinstance(data.get("companyInfo"), dict):
            data["companyInfo"] = {}
        data["companyInfo"]["imageUrl"] = image_url

    company_info = data.get("companyInfo")
    if company_name and isinstance(company_info, dict):
        name = company_info.get("name")
        if not name or name == COMPANY_NAME_PLACEHOLDER:
            company_info["name"] = company_name

    return data


class StructuringEngine:
    """Runs the generative structuring stage for one request at a time.

    Holds no per-request state, so a single instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        generator: TextGenerator,
        *,
        timeout_seconds: float = DEFAULT_GENERATION_TIMEOUT_SECONDS,
        char_budget: int = PROMPT_CHAR_BUDGET,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._generator = generator
        self._timeout_seconds = timeout_seconds
        self._char_budget = char_budget
        self._today = today

    @classmethod
    def from_settings(
        cls, generator: TextGenerator, settings: "ExtractorSettings"
    ) -> "StructuringEngine":
        return cls(
            generator,
            timeout_seconds=settings.generation_timeout_seconds,
            char_budget=settings.prompt_char_budget,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def extract(self, request: ExtractionRequest) -> ExtractionOutcome:
        """Structure *request* into a record. Never raises."""
        payload = request.payload
        started = time.monotonic()

        try:
            record = await self._structure(request)
        except Exception as exc:
            message = exc.message if isinstance(exc, StructuringError) else str(exc)
            message = message or exc.__class__.__name__
            logger.warning(
                "AI extraction failed for %s, using fallback data: %s",
                payload.url,
                message,
                extra={
                    "target_url": payload.url,
                    "stage": "structuring",
                    "outcome": "degraded",
                    "error_reason": message,
                },
            )
            fallback = build_fallback_record(
                payload,
                request.company_name,
                request.image_url,
                today=self._today(),
            )
            return Degraded(error_message=message, fallback=fallback)

        logger.info(
            "Extracted job data: %s",
            record.title,
            extra={
                "target_url": payload.url,
                "stage": "structuring",
                "outcome": "success",
                "duration_ms": round((time.monotonic() - started) * 1000),
            },
        )
        return Success(data=record)

    # ------------------------------------------------------------------
    # Internal pipeline
    # ------------------------------------------------------------------

    async def _structure(self, request: ExtractionRequest) -> JobRecord:
        payload = request.payload
        prompt = build_extraction_prompt(
            payload.text,
            payload.url,
            request.company_name,
            today=self._today(),
            char_budget=self._char_budget,
        )

        try:
            response_text = await asyncio.wait_for(
                self._generator.generate(prompt),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            raise StructuringError(
                f"Model call timed out after {self._timeout_seconds:g}s"
            ) from None

        data = parse_model_response(response_text)
        apply_post_processing(
            data,
            source_url=payload.url,
            image_url=request.image_url,
            company_name=request.company_name,
        )

        try:
            return JobRecord.model_validate(data)
        except pydantic.ValidationError as exc:
            raise StructuringError(
                f"Model response does not match the job record schema "
                f"({exc.error_count()} errors)"
            ) from exc
