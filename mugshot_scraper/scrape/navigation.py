"""Page navigation with bounded retry and fixed backoff."""

from __future__ import annotations

import asyncio
import logging

from playwright.async_api import Page

from .errors import NavigationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BACKOFF_SECONDS = 1.0
DEFAULT_TIMEOUT_MS = 15000


async def goto_with_retry(
    page: Page,
    url: str,
    *,
    wait_until: str = "networkidle",
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
) -> None:
    """Navigate ``page`` to ``url``, retrying failed loads.

    Any error raised by ``page.goto`` is retried. After ``max_attempts``
    failures a :class:`NavigationError` carrying the last error's message is raised.
    """
    attempt = 0
    while True:
        attempt += 1
        logger.info("page load attempt", extra={"attempt": attempt, "url": url})
        try:
            await page.goto(url, wait_until=wait_until, timeout=timeout_ms)
            return
        except Exception as exc:
            logger.warning(
                "page load failed (attempt %d/%d): %s",
                attempt, max_attempts, exc,
                extra={"url": url},
            )
            if attempt >= max_attempts:
                raise NavigationError(url, attempt, str(exc)) from exc
            await asyncio.sleep(backoff_seconds)
