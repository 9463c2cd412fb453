"""Unit tests for fallback record synthesis."""

from __future__ import annotations

from datetime import date

from job_extractor.models.requests import ScrapedPayload
from job_extractor.structuring.fallback import (
    DEFAULT_TITLE,
    NOT_DISCLOSED,
    NOT_SPECIFIED,
    build_fallback_record,
)

URL = "https://acme.example/careers/42"
TODAY = date(2026, 2, 2)


def _payload(title: str = "") -> ScrapedPayload:
    return ScrapedPayload(url=URL, title=title, reduced_html="", full_html="")


class TestBuildFallbackRecord:
    def test_uses_page_title_and_url(self):
        record = build_fallback_record(_payload("Data Analyst"), today=TODAY)
        assert record.title == "Data Analyst"
        assert record.apply_url == URL
        assert record.posted_date == TODAY

    def test_generic_title_without_page_title(self):
        record = build_fallback_record(_payload(), today=TODAY)
        assert record.title == DEFAULT_TITLE

    def test_company_name_flows_into_fields(self):
        record = build_fallback_record(_payload(), "Acme", "https://cdn.example/logo.png", today=TODAY)
        assert record.subtitle == "Exciting career opportunity at Acme"
        assert record.posted_by == "Acme Careers"
        assert record.company_info.name == "Acme"
        assert record.company_info.image_url == "https://cdn.example/logo.png"
        assert record.company_info.about == "Please visit the Acme website for more information"
        assert record.interview_tips[0].tip == "Research Acme thoroughly"

    def test_placeholders_without_company(self):
        record = build_fallback_record(_payload(), today=TODAY)
        assert record.subtitle == "Exciting career opportunity at Top Company"
        assert record.posted_by == "Company Careers"
        assert record.company_info.name == "Company"
        assert record.company_info.image_url == ""
        assert record.interview_tips[0].tip == "Research the company thoroughly"

    def test_every_field_has_a_placeholder(self):
        record = build_fallback_record(_payload(), today=TODAY)
        assert record.location == NOT_SPECIFIED
        assert record.job_type == "Full-time"
        assert record.job_details.salary == NOT_DISCLOSED
        assert record.job_details.category == "General"
        assert len(record.eligibility_criteria) == 1
        assert len(record.responsibilities) == 1
        assert [s.stage for s in record.selection_process] == ["Application Review", "Interview", "Offer"]
        assert record.career_growth.future_roles == ["Senior Role", "Leadership Role"]
        assert record.company_info.technologies == ["Various"]
        assert len(record.faqs) == 1

    def test_wire_format_is_camel_case(self):
        wire = build_fallback_record(_payload(), today=TODAY).to_wire()
        assert wire["postedDate"] == "2026-02-02"
        assert wire["jobDetails"]["lastDate"] == NOT_SPECIFIED
        assert wire["careerGrowth"]["futureRoles"]
        assert wire["companyInfo"]["imageUrl"] == ""
        assert "id" not in wire

    def test_empty_url_still_yields_apply_url(self):
        payload = ScrapedPayload(url="", title="", reduced_html="", full_html="")
        assert build_fallback_record(payload, today=TODAY).apply_url == NOT_SPECIFIED
