"""Request models and request-scoped pipeline values."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from job_extractor.models.schemas import JobRecord


class ScrapeRequest(BaseModel):
    """Body of ``POST /api/scrape``.

    ``url`` is optional at the schema level so a missing URL is answered with
    the service's own 400 message instead of a generic 422.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    url: str | None = None
    image_url: str | None = None
    company_name: str | None = None


@dataclass(frozen=True)
class UrlValidation:
    """Result of :func:`validate_job_url`."""

    url: str
    valid: bool
    likely_job_posting: bool = False
    error: str | None = None


@dataclass(frozen=True)
class ScrapedPayload:
    """Rendered page content after acquisition and reduction.

    ``text`` is the visible body text (scripts and styles removed). It is
    always a string, empty for a blank or degraded page.
    """

    url: str
    title: str
    reduced_html: str
    full_html: str
    text: str = ""
    captured_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            object.__setattr__(self, "text", "" if self.text is None else str(self.text))


@dataclass(frozen=True)
class ExtractionRequest:
    """Input of the structuring engine."""

    payload: ScrapedPayload
    image_url: str | None = None
    company_name: str | None = None


@dataclass(frozen=True)
class Success:
    """The model produced a valid record."""

    data: JobRecord


@dataclass(frozen=True)
class Degraded:
    """Structuring failed; ``fallback`` is a synthesized, schema-complete record."""

    error_message: str
    fallback: JobRecord


ExtractionOutcome = Union[Success, Degraded]
