"""Relevance reducer — narrows rendered HTML to the job description body.

Probes an ordered list of container selectors and returns the inner HTML of
the first candidate whose text is longer than ``MIN_TEXT_LENGTH``. The order
is significant: the first qualifying selector wins even when a later one
would hold more text. When nothing qualifies, the whole ``<body>`` is used.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

# Elements stripped before probing
NOISE_SELECTOR = "script, style, noscript, iframe"

# Common job posting containers, most specific first
JOB_CONTAINER_SELECTORS: tuple[str, ...] = (
    '[class*="job-detail"]',
    '[class*="job-description"]',
    '[id*="job-detail"]',
    '[id*="job-description"]',
    "main",
    "article",
    '[role="main"]',
)

MIN_TEXT_LENGTH = 100


def inner_html(element: Tag) -> str:
    """Return the serialized children of *element*."""
    return element.decode_contents()


def find_job_container(soup: BeautifulSoup) -> Tag | None:
    """Return the first container whose text exceeds ``MIN_TEXT_LENGTH``."""
    for selector in JOB_CONTAINER_SELECTORS:
        element = soup.select_one(selector)
        if element is not None and len(element.get_text()) > MIN_TEXT_LENGTH:
            logger.debug("Job container matched selector %r", selector)
            return element
    return None


def reduce_html(html: str) -> str:
    """Reduce *html* to the fragment most likely to contain the job posting."""
    soup = BeautifulSoup(html or "", "lxml")

    for element in soup.select(NOISE_SELECTOR):
        element.decompose()

    container = find_job_container(soup)
    if container is not None:
        return inner_html(container)

    logger.debug("No job container qualified; falling back to <body>")
    body = soup.body
    return inner_html(body) if body is not None else ""
