"""Fallback record synthesis.

Builds a schema-complete :class:`JobRecord` from locally known inputs only
(page title and URL, company name, image URL). Used when the model's output
cannot be turned into a valid record. Deterministic apart from
``postedDate``, which defaults to today.
"""

from __future__ import annotations

from datetime import date

from job_extractor.models.requests import ScrapedPayload
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

DEFAULT_TITLE = "Job Opportunity"
NOT_SPECIFIED = "Not specified"
NOT_DISCLOSED = "Not disclosed"


def build_fallback_record(
    payload: ScrapedPayload,
    company_name: str | None = None,
    image_url: str | None = None,
    *,
    today: date | None = None,
) -> JobRecord:
    """Return a placeholder record for *payload*."""
    company_label = company_name or "the company"

    return JobRecord(
        title=payload.title or DEFAULT_TITLE,
        subtitle=f"Exciting career opportunity at {company_name or 'Top Company'}",
        posted_date=today or date.today(),
        posted_by=f"{company_name} Careers" if company_name else "Company Careers",
        location=NOT_SPECIFIED,
        job_type="Full-time",
        apply_url=payload.url or NOT_SPECIFIED,
        full_description="Please visit the job posting for full details.",
        job_details=JobDetails(
            role=NOT_SPECIFIED,
            category="General",
            qualification="As per job requirements",
            batch="N/A",
            experience=NOT_SPECIFIED,
            salary=NOT_DISCLOSED,
            last_date=NOT_SPECIFIED,
        ),
        eligibility_criteria=[
            "Please check the original posting for eligibility criteria",
        ],
        responsibilities=[Responsibility(task="As described in the job posting")],
        interview_tips=[
            InterviewTip(tip=f"Research {company_label} thoroughly"),
            InterviewTip(tip="Prepare for behavioral questions"),
            InterviewTip(tip="Review the job requirements carefully"),
        ],
        selection_process=[
            SelectionStage(stage="Application Review"),
            SelectionStage(stage="Interview"),
            SelectionStage(stage="Offer"),
        ],
        career_growth=CareerGrowth(
            description="Career growth opportunities available",
            future_roles=["Senior Role", "Leadership Role"],
        ),
        company_info=CompanyInfo(
            name=company_name or "Company",
            founded_year=NOT_SPECIFIED,
            employee_count=NOT_SPECIFIED,
            about=f"Please visit the {company_name or 'company'} website for more information",
            technologies=["Various"],
            image_url=image_url or "",
        ),
        faqs=[
            Faq(
                question="Where can I find more details?",
                answer="Please visit the original job posting URL",
            )
        ],
    )
