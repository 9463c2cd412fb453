"""Pydantic Settings for the extractor service.

All environment variables use the EXTRACTOR_ prefix.
Example: EXTRACTOR_PORT=8001, EXTRACTOR_GEMINI_API_KEY=my-api-key
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ExtractorSettings(BaseSettings):
    """Extractor service configuration validated from environment variables."""

    # Service
    port: int = 8001
    log_level: str = "INFO"
    log_json: bool = True
    frontend_url: str = "*"  # CORS origin of the record editor

    # Generative model
    gemini_api_key: str
    gemini_model: str = "gemini-pro"
    generation_timeout_seconds: float = Field(default=30.0, gt=0, le=300)
    prompt_char_budget: int = Field(default=8000, ge=1)

    # Browser
    browser_launch_timeout_ms: int = Field(default=10000, ge=1000)
    navigation_timeout_ms: int = Field(default=15000, ge=1000)
    settle_delay_ms: int = Field(default=1000, ge=0)
    chrome_path: str | None = None  # Use Playwright's bundled Chromium when unset

    model_config = {"env_prefix": "EXTRACTOR_"}
