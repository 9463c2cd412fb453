"""Output schema for extracted job postings.

Python attributes are snake_case; the wire format is camelCase (the field
names the record editor and downstream consumers expect). Serialize with
``model_dump(mode="json", by_alias=True)``.

Every list must hold at least one entry, and keys the schema does not know
(including any ``id`` a model invents) are dropped on validation.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _RecordModel(BaseModel):
    """Shared config: camelCase aliases, ignore unknown keys, numbers → str."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class JobDetails(_RecordModel):
    role: str
    category: str
    qualification: str
    batch: str
    experience: str
    salary: str
    last_date: str


class Responsibility(_RecordModel):
    task: str


class InterviewTip(_RecordModel):
    tip: str


class SelectionStage(_RecordModel):
    stage: str


class CareerGrowth(_RecordModel):
    description: str
    future_roles: list[str] = Field(..., min_length=1)


class CompanyInfo(_RecordModel):
    name: str
    founded_year: str
    employee_count: str
    about: str
    technologies: list[str] = Field(..., min_length=1)
    image_url: str | None = None


class Faq(_RecordModel):
    question: str
    answer: str


class JobRecord(_RecordModel):
    """The fixed structured record produced for one job posting."""

    title: str
    subtitle: str
    posted_date: date
    posted_by: str
    location: str
    job_type: str
    apply_url: str = Field(..., min_length=1)
    full_description: str
    job_details: JobDetails
    eligibility_criteria: list[str] = Field(..., min_length=1)
    responsibilities: list[Responsibility] = Field(..., min_length=1)
    interview_tips: list[InterviewTip] = Field(..., min_length=1)
    selection_process: list[SelectionStage] = Field(..., min_length=1)
    career_growth: CareerGrowth
    company_info: CompanyInfo
    faqs: list[Faq] = Field(..., min_length=1)

    def to_wire(self) -> dict:
        """Return the camelCase JSON-ready dict, omitting an unset image URL."""
        data = self.model_dump(mode="json", by_alias=True)
        if data["companyInfo"].get("imageUrl") is None:
            data["companyInfo"].pop("imageUrl", None)
        return data
