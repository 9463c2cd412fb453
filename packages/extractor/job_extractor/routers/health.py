"""Health and discovery endpoints.

- GET /health, GET /api/health — liveness
- GET /api/test — endpoint listing
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from job_extractor.models.responses import ApiResponse


def create_health_router() -> APIRouter:
    """Create the health router."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    @health_router.get("/api/health")
    async def health() -> dict:
        """Service liveness check."""
        return ApiResponse(
            success=True,
            data={
                "status": "ok",
                "message": "Job Scraper API is running",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        ).model_dump()

    @health_router.get("/api/test")
    async def endpoints() -> dict:
        """List the available endpoints."""
        return ApiResponse(
            success=True,
            data={
                "message": "API is working!",
                "endpoints": {
                    "health": "GET /health",
                    "scrape": (
                        "POST /api/scrape (body: { url, imageUrl?, companyName? })"
                    ),
                    "test": "GET /api/test",
                },
            },
        ).model_dump()

    return health_router
