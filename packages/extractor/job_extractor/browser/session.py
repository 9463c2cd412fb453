"""Headless browser sessions.

Defines the two capabilities the content fetcher depends on
(:class:`BrowserLauncher` and :class:`BrowserSession`) and their Playwright
Chromium implementation. Every launch creates a fresh browser with its own
context, so no cookies, storage or cache are shared between requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from playwright.async_api import Browser, BrowserContext, Page, Playwright

logger = logging.getLogger(__name__)

# Chromium flags for containerized / headless operation
CHROMIUM_ARGS: list[str] = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]

# Desktop Chrome UA; mobile UAs get stripped-down job pages on many boards
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Runs in the page: drop non-visible elements, then read the rendered text
VISIBLE_TEXT_SCRIPT = """
() => {
    document.querySelectorAll('script, style, noscript').forEach(el => el.remove());
    return document.body ? document.body.innerText : '';
}
"""


@dataclass(frozen=True)
class BrowserProfile:
    """Launch and context options applied to every session."""

    user_agent: str = DEFAULT_USER_AGENT
    viewport_width: int = 1920
    viewport_height: int = 1080
    args: tuple[str, ...] = tuple(CHROMIUM_ARGS)
    executable_path: str | None = None
    launch_timeout_ms: int = 10_000

    @property
    def viewport(self) -> dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}


class BrowserSession(Protocol):
    """A single page in an isolated browser, closed exactly once."""

    async def navigate(self, url: str, *, timeout_ms: int) -> None: ...

    async def title(self) -> str: ...

    async def get_html(self) -> str: ...

    async def extract_text(self) -> str: ...

    async def close(self) -> None: ...


class BrowserLauncher(Protocol):
    """Starts a new, isolated :class:`BrowserSession`."""

    async def launch(self, profile: BrowserProfile) -> BrowserSession: ...


@dataclass
class PlaywrightSession:
    """:class:`BrowserSession` backed by one Playwright Chromium process."""

    playwright: Any  # playwright.async_api.Playwright at runtime
    browser: Any  # playwright.async_api.Browser at runtime
    page: Any  # playwright.async_api.Page at runtime
    _closed: bool = field(default=False, init=False)

    async def navigate(self, url: str, *, timeout_ms: int) -> None:
        await self.page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)

    async def title(self) -> str:
        return await self.page.title()

    async def get_html(self) -> str:
        return await self.page.content()

    async def extract_text(self) -> str:
        text = await self.page.evaluate(VISIBLE_TEXT_SCRIPT)
        return text if isinstance(text, str) else ""

    async def close(self) -> None:
        """Close the browser and stop the Playwright driver. Idempotent."""
        if self._closed:
            return
        self._closed = True
        try:
            await self.browser.close()
        finally:
            await self.playwright.stop()


class PlaywrightLauncher:
    """Launches a dedicated headless Chromium per session."""

    async def launch(self, profile: BrowserProfile) -> PlaywrightSession:
        from playwright.async_api import async_playwright

        # Kept so a driver spawned by a cancelled start() can still be stopped;
        # Playwright.stop() is this manager's __aexit__.
        manager = async_playwright()
        browser: "Browser | None" = None
        try:
            playwright: "Playwright" = await manager.start()

            launch_kwargs: dict = {
                "headless": True,
                "args": list(profile.args),
                "timeout": profile.launch_timeout_ms,
            }
            if profile.executable_path:
                launch_kwargs["executable_path"] = profile.executable_path
            browser = await playwright.chromium.launch(**launch_kwargs)

            context: "BrowserContext" = await browser.new_context(
                user_agent=profile.user_agent,
                viewport=profile.viewport,
            )
            page: "Page" = await context.new_page()
        except BaseException:
            # Includes cancellation by the caller's launch timeout
            await _shutdown(manager, browser)
            raise

        logger.debug("Launched Chromium session (ua=%s)", profile.user_agent)
        return PlaywrightSession(playwright=playwright, browser=browser, page=page)


async def _shutdown(manager: Any, browser: Any) -> None:
    """Best-effort teardown of a partially launched session."""
    if browser is not None:
        try:
            await browser.close()
        except Exception:
            logger.debug("Error closing browser during launch cleanup", exc_info=True)
    try:
        await manager.__aexit__(None, None, None)
    except Exception:
        logger.debug("Error stopping Playwright during launch cleanup", exc_info=True)
