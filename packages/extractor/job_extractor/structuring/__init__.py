"""AI-backed structuring stage: prompt, model call, parsing and fallback."""

from job_extractor.structuring.engine import (
    StructuringEngine,
    apply_post_processing,
    parse_model_response,
)
from job_extractor.structuring.fallback import build_fallback_record
from job_extractor.structuring.generator import GeminiTextGenerator, TextGenerator
from job_extractor.structuring.prompt import PROMPT_CHAR_BUDGET, build_extraction_prompt
from job_extractor.structuring.response import strip_code_fence

__all__ = [
    "PROMPT_CHAR_BUDGET",
    "GeminiTextGenerator",
    "StructuringEngine",
    "TextGenerator",
    "apply_post_processing",
    "build_extraction_prompt",
    "build_fallback_record",
    "parse_model_response",
    "strip_code_fence",
]
