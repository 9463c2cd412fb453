"""Content reduction — selects the job posting body from rendered HTML."""

from job_extractor.extractors.reducer import (
    JOB_CONTAINER_SELECTORS,
    MIN_TEXT_LENGTH,
    find_job_container,
    reduce_html,
)

__all__ = [
    "JOB_CONTAINER_SELECTORS",
    "MIN_TEXT_LENGTH",
    "find_job_container",
    "reduce_html",
]
