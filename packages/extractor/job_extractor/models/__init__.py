"""Public models for the extractor service."""

from job_extractor.models.requests import (
    Degraded,
    ExtractionOutcome,
    ExtractionRequest,
    ScrapedPayload,
    ScrapeRequest,
    Success,
    UrlValidation,
)
from job_extractor.models.responses import ApiResponse
from job_extractor.models.schemas import (
    CareerGrowth,
    CompanyInfo,
    Faq,
    InterviewTip,
    JobDetails,
    JobRecord,
    Responsibility,
    SelectionStage,
)

__all__ = [
    "ApiResponse",
    "CareerGrowth",
    "CompanyInfo",
    "Degraded",
    "ExtractionOutcome",
    "ExtractionRequest",
    "Faq",
    "InterviewTip",
    "JobDetails",
    "JobRecord",
    "Responsibility",
    "ScrapeRequest",
    "ScrapedPayload",
    "SelectionStage",
    "Success",
    "UrlValidation",
]
