"""HTTP routers."""

from job_extractor.routers.health import create_health_router
from job_extractor.routers.scrape import create_scrape_router

__all__ = ["create_health_router", "create_scrape_router"]
