"""Headless browser sessions and the content fetcher."""

from job_extractor.browser.fetcher import ContentFetcher
from job_extractor.browser.session import (
    CHROMIUM_ARGS,
    DEFAULT_USER_AGENT,
    BrowserLauncher,
    BrowserProfile,
    BrowserSession,
    PlaywrightLauncher,
    PlaywrightSession,
)

__all__ = [
    "CHROMIUM_ARGS",
    "DEFAULT_USER_AGENT",
    "BrowserLauncher",
    "BrowserProfile",
    "BrowserSession",
    "ContentFetcher",
    "PlaywrightLauncher",
    "PlaywrightSession",
]
