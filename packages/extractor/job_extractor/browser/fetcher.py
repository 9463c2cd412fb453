"""Content fetcher — renders a URL and captures its HTML and visible text.

Pipeline per call: launch isolated browser → navigate (DOM parsed) → settle
delay → capture HTML, title and visible text → reduce HTML → close browser.

Launch, navigation and content capture are each bounded by a timeout and
fail closed with :class:`AcquisitionError`. The session is closed on every exit path.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from job_extractor.browser.session import BrowserLauncher, BrowserProfile, BrowserSession
from job_extractor.extractors.reducer import reduce_html
from job_extractor.middleware.error_handler import AcquisitionError
from job_extractor.models.requests import ScrapedPayload

if TYPE_CHECKING:
    from job_extractor.config.settings import ExtractorSettings

logger = logging.getLogger(__name__)


class ContentFetcher:
    """Acquires rendered page content through an injected browser launcher.

    Dependencies are injected via the constructor so the fetcher is testable
    without a real browser.
    """

    def __init__(
        self,
        launcher: BrowserLauncher,
        *,
        profile: BrowserProfile | None = None,
        navigation_timeout_ms: int = 15_000,
        settle_delay_ms: int = 1_000,
    ) -> None:
        self._launcher = launcher
        self._profile = profile or BrowserProfile()
        self._navigation_timeout_ms = navigation_timeout_ms
        self._settle_delay_ms = settle_delay_ms

    @classmethod
    def from_settings(
        cls, launcher: BrowserLauncher, settings: "ExtractorSettings"
    ) -> "ContentFetcher":
        profile = BrowserProfile(
            executable_path=settings.chrome_path,
            launch_timeout_ms=settings.browser_launch_timeout_ms,
        )
        return cls(
            launcher,
            profile=profile,
            navigation_timeout_ms=settings.navigation_timeout_ms,
            settle_delay_ms=settings.settle_delay_ms,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def fetch(self, url: str) -> ScrapedPayload:
        """Render *url* and return its content.

        Raises
        ------
        AcquisitionError
            If the browser cannot be launched, navigation fails or times out,
            or the page content cannot be read.
        """
        started = time.monotonic()
        session: BrowserSession | None = None

        try:
            session = await self._launch()
            await self._navigate(session, url)

            # Let client-side frameworks populate the DOM
            if self._settle_delay_ms:
                await asyncio.sleep(self._settle_delay_ms / 1000.0)

            full_html, title, text = await self._capture(session)

            payload = ScrapedPayload(
                url=url,
                title=(title or "").strip(),
                reduced_html=reduce_html(full_html),
                full_html=full_html,
                text=(text or "").strip(),
                captured_at=datetime.now(timezone.utc),
            )

        except AcquisitionError as exc:
            logger.error(
                "Acquisition failed for %s: %s",
                url,
                exc.message,
                extra={"target_url": url, "stage": "acquisition", "error_reason": exc.message},
            )
            raise
        except Exception as exc:
            logger.error(
                "Acquisition failed for %s: %s",
                url,
                exc,
                extra={"target_url": url, "stage": "acquisition", "error_reason": str(exc)},
            )
            raise AcquisitionError(str(exc) or exc.__class__.__name__) from exc
        finally:
            if session is not None:
                await self._close(session, url)

        logger.info(
            "Fetched %s (title=%r, text_chars=%d)",
            url,
            payload.title,
            len(payload.text),
            extra={
                "target_url": url,
                "stage": "acquisition",
                "duration_ms": round((time.monotonic() - started) * 1000),
            },
        )
        return payload

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _launch(self) -> BrowserSession:
        timeout_ms = self._profile.launch_timeout_ms
        try:
            return await asyncio.wait_for(
                self._launcher.launch(self._profile),
                timeout=timeout_ms / 1000.0,
            )
        except asyncio.TimeoutError:
            raise AcquisitionError(
                f"Browser launch timed out after {timeout_ms}ms"
            ) from None

    async def _navigate(self, session: BrowserSession, url: str) -> None:
        timeout_ms = self._navigation_timeout_ms
        try:
            await asyncio.wait_for(
                session.navigate(url, timeout_ms=timeout_ms),
                timeout=timeout_ms / 1000.0,
            )
        except asyncio.TimeoutError:
            raise AcquisitionError(
                f"Navigation timed out after {timeout_ms}ms"
            ) from None

    async def _capture(self, session: BrowserSession) -> tuple[str, str, str]:
        # page.evaluate has no timeout of its own; a busy page would hang here
        timeout_ms = self._navigation_timeout_ms

        async def read() -> tuple[str, str, str]:
            return (
                await session.get_html(),
                await session.title(),
                await session.extract_text(),
            )

        try:
            return await asyncio.wait_for(read(), timeout=timeout_ms / 1000.0)
        except asyncio.TimeoutError:
            raise AcquisitionError(
                f"Reading page content timed out after {timeout_ms}ms"
            ) from None

    async def _close(self, session: BrowserSession, url: str) -> None:
        try:
            await session.close()
        except Exception:
            logger.warning("Failed to close browser session for %s", url, exc_info=True)
