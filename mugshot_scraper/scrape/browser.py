"""Request-scoped Chromium session built on Playwright."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from .errors import BrowserLaunchError

if TYPE_CHECKING:
    from mugshot_scraper.config import Settings

logger = logging.getLogger(__name__)

# Containers have no usable OS sandbox and a tiny /dev/shm
CHROME_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
]

VIEWPORT = {"width": 1366, "height": 900}


class BrowserSession:
    """One Playwright driver, one Chromium process and a single page.

    Sessions are never shared between requests. ``release`` must run on every
    exit path; :func:`open_session` takes care of that.
    """

    def __init__(
        self,
        playwright: Playwright,
        browser: Browser,
        context: BrowserContext,
        page: Page,
    ) -> None:
        self.playwright = playwright
        self.browser = browser
        self.context = context
        self.page = page
        self._released = False

    @classmethod
    async def acquire(cls, settings: Settings) -> BrowserSession:
        """Launch Chromium and open a page, or raise ``BrowserLaunchError``."""
        try:
            pw = await async_playwright().start()
        except PlaywrightError as exc:
            raise BrowserLaunchError(f"could not start playwright: {exc}") from exc

        try:
            browser = await pw.chromium.launch(headless=settings.headless, args=CHROME_ARGS)
        except PlaywrightError as exc:
            await pw.stop()
            raise BrowserLaunchError(f"could not launch chromium: {exc}") from exc

        try:
            # Playwright binds the user agent to the context, not the page
            context = await browser.new_context(
                user_agent=settings.user_agent,
                viewport=VIEWPORT,
            )
            page = await context.new_page()
        except PlaywrightError as exc:
            await browser.close()
            await pw.stop()
            raise BrowserLaunchError(f"could not open page: {exc}") from exc

        logger.debug("browser session acquired", extra={"headless": settings.headless})
        return cls(pw, browser, context, page)

    async def configure(self, settings: Settings) -> None:
        """Apply the request headers sent with every navigation."""
        await self.page.set_extra_http_headers({"Accept-Language": settings.accept_language})

    async def release(self) -> None:
        """Close the browser process and stop the driver. Safe to call twice."""
        if self._released:
            return
        self._released = True
        try:
            await self.browser.close()
        except PlaywrightError:
            logger.warning("browser close failed", exc_info=True)
        try:
            await self.playwright.stop()
        except Exception:
            logger.warning("playwright driver stop failed", exc_info=True)
        logger.debug("browser session released")


@asynccontextmanager
async def open_session(settings: Settings) -> AsyncIterator[BrowserSession]:
    """Acquire and configure a session, releasing it however the block exits."""
    session = await BrowserSession.acquire(settings)
    try:
        await session.configure(settings)
        yield session
    finally:
        await session.release()
