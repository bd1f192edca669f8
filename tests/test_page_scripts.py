"""In-page script tests against a real Chromium page.

Skipped when no Playwright browser is installed (``playwright install chromium``).
"""

import pytest
import pytest_asyncio
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from mugshot_scraper.scrape.browser import CHROME_ARGS
from mugshot_scraper.scrape.extractor import CHARGES_PLACEHOLDER, extract_mugshots
from mugshot_scraper.scrape.popups import dismiss_popups

pytestmark = pytest.mark.asyncio

LISTING_HTML = """
<html><body>
  <article id="complete">
    <div class="post-image"><img src="https://wakenc.mugshots.zone/img/1.jpg"></div>
    <h2 class="entry-title"><a href="https://wakenc.mugshots.zone/jane-doe/">  JANE DOE  </a></h2>
    <div class="entry-summary">  Assault on a female  </div>
  </article>
  <article id="no-image">
    <h2 class="entry-title"><a href="https://wakenc.mugshots.zone/no-image/">NO IMAGE</a></h2>
  </article>
  <article id="no-title">
    <div class="post-image"><img src="https://wakenc.mugshots.zone/img/3.jpg"></div>
    <div class="entry-summary">Larceny</div>
  </article>
  <article id="no-summary">
    <div class="post-image"><img src="https://wakenc.mugshots.zone/img/4.jpg"></div>
    <h2 class="entry-title"><a>JOHN ROE</a></h2>
  </article>
</body></html>
"""

POPUP_SCRIPT = "<script>window.clicked = [];</script>"


@pytest_asyncio.fixture
async def live_page():
    pw = await async_playwright().start()
    try:
        browser = await pw.chromium.launch(headless=True, args=CHROME_ARGS)
    except PlaywrightError as exc:
        await pw.stop()
        pytest.skip(f"chromium not available: {exc.message}")
    page = await browser.new_page()
    yield page
    await browser.close()
    await pw.stop()


async def _set_html(page, body: str) -> None:
    await page.set_content(f"<html><body>{body}</body></html>", wait_until="domcontentloaded")


# --- extraction ---


async def test_only_complete_articles_are_extracted(live_page):
    await live_page.set_content(LISTING_HTML, wait_until="domcontentloaded")

    records = await extract_mugshots(live_page)

    assert len(records) == 2
    jane, john = records
    assert jane.img == "https://wakenc.mugshots.zone/img/1.jpg"
    assert jane.name == "JANE DOE"
    assert jane.crime == "Assault on a female"
    assert jane.link == "https://wakenc.mugshots.zone/jane-doe/"
    assert john.name == "JOHN ROE"
    assert john.crime == CHARGES_PLACEHOLDER
    assert john.link == ""


async def test_page_without_articles(live_page):
    await _set_html(live_page, "<div>Nothing here</div>")

    assert await extract_mugshots(live_page) == []


# --- popup dismissal ---


async def test_highest_priority_overlay_wins(live_page):
    await _set_html(
        live_page,
        POPUP_SCRIPT
        + """
        <div class="modal"><button onclick="window.clicked.push('modal')">x</button></div>
        <div class="popup"><span class="close" onclick="window.clicked.push('popup')">x</span></div>
        """,
    )

    closed = await dismiss_popups(live_page)

    assert closed == ".popup"
    assert await live_page.evaluate("window.clicked") == ["popup"]


async def test_only_first_close_control_is_clicked(live_page):
    await _set_html(
        live_page,
        POPUP_SCRIPT
        + """
        <div id="gdpr-modal">
          <button onclick="window.clicked.push('accept')">Accept</button>
          <button onclick="window.clicked.push('reject')">Reject</button>
        </div>
        """,
    )

    closed = await dismiss_popups(live_page)

    assert closed == "#gdpr-modal"
    assert await live_page.evaluate("window.clicked") == ["accept"]


async def test_first_overlay_without_close_control_stops_search(live_page):
    await _set_html(
        live_page,
        POPUP_SCRIPT
        + """
        <div class="popup">Subscribe!</div>
        <div class="modal"><button onclick="window.clicked.push('modal')">x</button></div>
        """,
    )

    assert await dismiss_popups(live_page) is None
    assert await live_page.evaluate("window.clicked") == []


async def test_no_overlay(live_page):
    await _set_html(live_page, POPUP_SCRIPT + "<article>plain</article>")

    assert await dismiss_popups(live_page) is None
