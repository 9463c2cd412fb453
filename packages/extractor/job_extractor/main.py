"""FastAPI application entry point with lifespan management.

``create_app`` wires the extraction pipeline: a Playwright launcher for page
acquisition and a Gemini client for structuring. Both are explicit
dependencies owned by the application and can be replaced by passing a
ready-made pipeline (as the tests do).
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from job_extractor import __version__
from job_extractor.browser.fetcher import ContentFetcher
from job_extractor.browser.session import PlaywrightLauncher
from job_extractor.config.settings import ExtractorSettings
from job_extractor.logging_config import configure_logging
from job_extractor.middleware.error_handler import register_error_handlers
from job_extractor.middleware.request_id import RequestIdMiddleware
from job_extractor.routers.health import create_health_router
from job_extractor.routers.scrape import create_scrape_router
from job_extractor.services.pipeline import JobExtractionPipeline
from job_extractor.structuring.engine import StructuringEngine
from job_extractor.structuring.generator import GeminiTextGenerator

logger = logging.getLogger(__name__)


def build_pipeline(settings: ExtractorSettings) -> JobExtractionPipeline:
    """Build the production pipeline from *settings*."""
    fetcher = ContentFetcher.from_settings(PlaywrightLauncher(), settings)
    generator = GeminiTextGenerator(settings.gemini_api_key, settings.gemini_model)
    engine = StructuringEngine.from_settings(generator, settings)
    return JobExtractionPipeline(fetcher=fetcher, engine=engine)


def create_app(
    settings: ExtractorSettings | None = None,
    *,
    pipeline: JobExtractionPipeline | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Loads ``ExtractorSettings`` eagerly so that a missing
    ``EXTRACTOR_GEMINI_API_KEY`` causes an immediate startup failure.
    """
    settings = settings or ExtractorSettings()  # type: ignore[call-arg]
    pipeline = pipeline or build_pipeline(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level, json_format=settings.log_json)
        logger.info(
            "Starting job extractor on port %d (model=%s)",
            settings.port,
            settings.gemini_model,
        )
        yield
        logger.info("Job extractor shut down")

    app = FastAPI(
        title="Job Posting Extractor",
        version=__version__,
        lifespan=lifespan,
    )

    register_error_handlers(app)

    # Starlette applies middleware in reverse order of add_middleware calls
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=settings.frontend_url != "*",
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    app.include_router(create_health_router())
    app.include_router(create_scrape_router(pipeline=pipeline))

    app.state.settings = settings
    app.state.pipeline = pipeline
    return app
