"""Service layer — the end-to-end extraction pipeline."""

from job_extractor.services.pipeline import JobExtractionPipeline

__all__ = ["JobExtractionPipeline"]
