"""URL validation for extraction targets.

Pure and side-effect free: no DNS lookups, no network access. A URL is valid
when it parses as an absolute http(s) URL with a network location.
Whether it *looks like* a job posting is a lexical hint that callers log but
never act on.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from job_extractor.models.requests import UrlValidation

INVALID_URL_MESSAGE = "Invalid URL format"

# Lowercased substrings that suggest a job posting URL
JOB_KEYWORDS: tuple[str, ...] = (
    "job",
    "career",
    "position",
    "hiring",
    "vacancy",
    "apply",
    "recruit",
)

# Schemes the browser may render; local and browser-internal schemes are refused
_ALLOWED_SCHEMES = frozenset({"http", "https"})
_WHITESPACE_RE = re.compile(r"\s")


def is_well_formed_url(url: object) -> bool:
    """Return ``True`` if *url* is a well-formed absolute http(s) URL."""
    if not isinstance(url, str):
        return False
    candidate = url.strip()
    if not candidate or _WHITESPACE_RE.search(candidate):
        return False
    try:
        parts = urlsplit(candidate)
        if parts.scheme not in _ALLOWED_SCHEMES:
            return False
        if not parts.netloc or not parts.hostname:
            return False
        # Accessing .port validates it (raises ValueError when out of range)
        parts.port
    except ValueError:
        return False
    return True


def looks_like_job_posting(url: str) -> bool:
    """Return ``True`` if the lowercased *url* contains a job keyword."""
    lowered = url.lower()
    return any(keyword in lowered for keyword in JOB_KEYWORDS)


def validate_job_url(url: object) -> UrlValidation:
    """Validate a job posting URL. Never raises.

    Returns a :class:`UrlValidation` with ``valid=False`` and a fixed error
    message for malformed input.
    """
    text = url if isinstance(url, str) else ("" if url is None else repr(url))
    if not is_well_formed_url(url):
        return UrlValidation(url=text, valid=False, error=INVALID_URL_MESSAGE)
    return UrlValidation(
        url=text,
        valid=True,
        likely_job_posting=looks_like_job_posting(text),
    )
