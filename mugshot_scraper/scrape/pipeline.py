"""Scrape pipeline — browser session, navigation, popups, extraction."""

from __future__ import annotations

import asyncio
import logging

from playwright.async_api import Page
from playwright.async_api import Error as PlaywrightError

from mugshot_scraper.config import Settings

from .browser import open_session
from .errors import BrowserLaunchError, NavigationError
from .extractor import ARTICLE_SELECTOR, extract_mugshots
from .models import FailureKind, MugshotRecord, ScrapeFailure, ScrapeResult, ScrapeSuccess
from .navigation import goto_with_retry
from .popups import dismiss_popups

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No mugshots found"


def build_target_url(template: str, page_number: int) -> str:
    """Substitute ``page_number`` into the listing URL template."""
    return template.format(page=page_number)


class ScrapePipeline:
    """Runs one fetch-render-extract pass per call.

    Every call launches its own browser; nothing is shared between calls.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def run(self, page_number: int) -> ScrapeResult:
        """Scrape ``page_number`` and return a success or a classified failure."""
        url = build_target_url(self._settings.target_url_template, page_number)
        logger.info("scrape started", extra={"page": page_number, "url": url})

        try:
            async with open_session(self._settings) as session:
                records = await self._scrape(session.page, url)
        except BrowserLaunchError as exc:
            logger.error("browser launch failed", extra={"page": page_number, "error": str(exc)})
            return ScrapeFailure(FailureKind.BROWSER_LAUNCH, str(exc), page_number)
        except NavigationError as exc:
            logger.error(
                "navigation failed",
                extra={"page": page_number, "url": exc.url, "attempts": exc.attempts},
            )
            return ScrapeFailure(FailureKind.NAVIGATION, str(exc), page_number)
        except Exception as exc:
            logger.exception("scraping error", extra={"page": page_number})
            return ScrapeFailure(FailureKind.UNEXPECTED, str(exc), page_number)

        if not records:
            logger.warning("no mugshots on page", extra={"page": page_number, "url": url})
            return ScrapeFailure(FailureKind.NO_RESULTS, NO_RESULTS_MESSAGE, page_number)

        logger.info(
            "scrape completed",
            extra={"page": page_number, "records": len(records)},
        )
        return ScrapeSuccess(
            page_number=page_number,
            records=records,
            total_pages=self._settings.total_pages,
        )

    async def _scrape(self, page: Page, url: str) -> list[MugshotRecord]:
        settings = self._settings

        await goto_with_retry(
            page,
            url,
            wait_until=settings.navigation_wait_until,
            timeout_ms=settings.navigation_timeout_ms,
            max_attempts=settings.max_navigation_attempts,
            backoff_seconds=settings.retry_backoff_seconds,
        )

        try:
            await page.wait_for_selector(ARTICLE_SELECTOR, timeout=settings.content_wait_timeout_ms)
        except PlaywrightError as exc:
            logger.warning(
                "article elements not found: %s",
                exc.message,
                extra={"url": url, "timeout_ms": settings.content_wait_timeout_ms},
            )

        await dismiss_popups(page)
        # Let layout settle after a popup closes
        await asyncio.sleep(settings.settle_delay_seconds)

        return await extract_mugshots(page)
