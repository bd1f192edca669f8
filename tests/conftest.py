"""Fixtures — fake Playwright stack, zero-delay settings."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from mugshot_scraper.config import Settings
from mugshot_scraper.scrape.extractor import EXTRACT_MUGSHOTS_JS
from mugshot_scraper.scrape.popups import DISMISS_POPUP_JS


def make_page() -> MagicMock:
    page = MagicMock()
    page.goto = AsyncMock(return_value=None)
    page.wait_for_selector = AsyncMock(return_value=None)
    page.evaluate = AsyncMock(return_value=None)
    page.set_extra_http_headers = AsyncMock(return_value=None)
    return page


def raw_mugshot(i: int = 1, **overrides) -> dict:
    item = {
        "img": f"https://wakenc.mugshots.zone/wp-content/uploads/{i}.jpg",
        "name": f"PERSON NUMBER {i}",
        "crime": "DWI",
        "link": f"https://wakenc.mugshots.zone/person-{i}/",
    }
    item.update(overrides)
    return item


def scripted_evaluate(records: list[dict] | None = None, closed: str | None = None):
    """Answer the popup and extraction scripts the way a rendered page would."""

    async def _evaluate(script, arg=None):
        if script == DISMISS_POPUP_JS:
            return closed
        if script == EXTRACT_MUGSHOTS_JS:
            return records or []
        raise AssertionError(f"unexpected script: {script[:40]}")

    return _evaluate


class FakePlaywright:
    """async_playwright() -> driver -> chromium -> browser -> context -> page."""

    def __init__(self, page: MagicMock) -> None:
        self.page = page

        self.context = MagicMock()
        self.context.new_page = AsyncMock(return_value=page)

        self.browser = MagicMock()
        self.browser.new_context = AsyncMock(return_value=self.context)
        self.browser.close = AsyncMock(return_value=None)

        self.driver = MagicMock()
        self.driver.chromium.launch = AsyncMock(return_value=self.browser)
        self.driver.stop = AsyncMock(return_value=None)

        manager = MagicMock()
        manager.start = AsyncMock(return_value=self.driver)
        self.factory = MagicMock(return_value=manager)

    @property
    def launches(self) -> int:
        return self.driver.chromium.launch.await_count

    @property
    def closes(self) -> int:
        return self.browser.close.await_count


@pytest.fixture
def page() -> MagicMock:
    return make_page()


@pytest.fixture
def fake_playwright(page):
    fake = FakePlaywright(page)
    with patch("mugshot_scraper.scrape.browser.async_playwright", fake.factory):
        yield fake


@pytest.fixture
def settings() -> Settings:
    return Settings(retry_backoff_seconds=0, settle_delay_seconds=0)
