"""Generative text capability used by the structuring engine.

The engine only needs ``await generator.generate(prompt) -> str``. The
production implementation calls Google Gemini; tests substitute fakes.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from job_extractor.middleware.error_handler import StructuringError

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-pro"


class TextGenerator(Protocol):
    """Turns a prompt into free-form response text."""

    async def generate(self, prompt: str) -> str: ...


class GeminiTextGenerator:
    """:class:`TextGenerator` backed by ``google-generativeai``.

    The client is created once by the application and injected into the
    engine, so its lifecycle belongs to the caller.
    """

    def __init__(self, api_key: str, model_name: str = DEFAULT_GEMINI_MODEL) -> None:
        import google.generativeai as genai

        genai.configure(api_key=api_key)
        self._model_name = model_name
        self._model: Any = genai.GenerativeModel(model_name)

    @property
    def model_name(self) -> str:
        return self._model_name

    async def generate(self, prompt: str) -> str:
        response = await self._model.generate_content_async(prompt)
        try:
            text = response.text
        except ValueError as exc:
            # Raised when the candidate was blocked or carries no text parts
            raise StructuringError(f"Model returned no text: {exc}") from exc
        logger.debug("Gemini %s returned %d chars", self._model_name, len(text or ""))
        return text or ""
