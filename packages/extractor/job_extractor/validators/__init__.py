"""Validators for extraction request inputs."""

from job_extractor.validators.url_validator import (
    JOB_KEYWORDS,
    is_well_formed_url,
    looks_like_job_posting,
    validate_job_url,
)

__all__ = [
    "JOB_KEYWORDS",
    "is_well_formed_url",
    "looks_like_job_posting",
    "validate_job_url",
]
