"""Unit tests for job URL validation."""

from __future__ import annotations

import pytest

from job_extractor.validators.url_validator import (
    INVALID_URL_MESSAGE,
    is_well_formed_url,
    looks_like_job_posting,
    validate_job_url,
)


class TestValidateJobUrl:
    def test_valid_job_url(self):
        result = validate_job_url("https://acme.example/careers/backend-engineer")
        assert result.valid is True
        assert result.likely_job_posting is True
        assert result.error is None

    def test_valid_url_without_job_keyword_is_still_valid(self):
        result = validate_job_url("https://example.com/blog/post-1")
        assert result.valid is True
        assert result.likely_job_posting is False
        assert result.error is None

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "   ",
            "not a url",
            "example.com/jobs/1",
            "/jobs/123",
            "https://",
            "http://exa mple.com/jobs",
            "http://[::1/jobs",
            "https://example.com:99999/jobs",
            "1http://example.com",
        ],
    )
    def test_malformed_urls_are_rejected(self, url: str):
        result = validate_job_url(url)
        assert result.valid is False
        assert result.likely_job_posting is False
        assert result.error == INVALID_URL_MESSAGE

    @pytest.mark.parametrize("value", [None, 42, b"https://example.com", ["https://x.io"]])
    def test_non_string_input_does_not_raise(self, value):
        result = validate_job_url(value)
        assert result.valid is False
        assert result.error == INVALID_URL_MESSAGE

    def test_keyword_match_is_case_insensitive(self):
        assert looks_like_job_posting("https://example.com/CAREERS/42") is True
        assert looks_like_job_posting("https://example.com/Recruiting") is True

    @pytest.mark.parametrize(
        "url",
        [
            "https://boards.example.com/jobs/1",
            "https://example.com/open-position",
            "https://example.com/we-are-hiring",
            "https://example.com/vacancy/9",
            "https://example.com/apply?id=3",
        ],
    )
    def test_each_keyword_is_detected(self, url: str):
        assert looks_like_job_posting(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "file://localhost/etc/passwd",
            "ftp://files.example.com/jobs.txt",
            "chrome://settings/jobs",
            "javascript://example.com/%0Aalert(1)",
            "data://text/html,jobs",
        ],
    )
    def test_non_http_schemes_are_rejected(self, url: str):
        result = validate_job_url(url)
        assert result.valid is False
        assert result.error == INVALID_URL_MESSAGE

    def test_scheme_is_case_insensitive(self):
        assert is_well_formed_url("HTTPS://Example.com/Jobs/1") is True

    def test_ipv6_and_port_urls_are_well_formed(self):
        assert is_well_formed_url("http://[::1]:8080/jobs") is True
        assert is_well_formed_url("https://example.com:8443/careers") is True
