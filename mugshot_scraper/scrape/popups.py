"""Best-effort dismissal of consent banners and modal overlays."""

from __future__ import annotations

import logging

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

logger = logging.getLogger(__name__)

# Checked in this order; only the first overlay found is handled
OVERLAY_SELECTORS = (
    ".popup",
    ".modal",
    "#gdpr-modal",
    ".fc-consent-root",
    ".truste_box_overlay",
)

CLOSE_CONTROL_SELECTOR = 'button, .close, [title="Close"], [aria-label="Close"]'

DISMISS_POPUP_JS = """
({overlays, closeControls}) => {
  for (const selector of overlays) {
    const overlay = document.querySelector(selector);
    if (!overlay) continue;
    const control = overlay.querySelector(closeControls);
    if (!control) return null;
    control.click();
    return selector;
  }
  return null;
}
"""


async def dismiss_popups(page: Page) -> str | None:
    """Click the close control of the highest-priority overlay on the page.

    Returns the overlay selector that was acted on, or ``None``. Script
    failures are logged and swallowed.
    """
    try:
        closed = await page.evaluate(
            DISMISS_POPUP_JS,
            {"overlays": list(OVERLAY_SELECTORS), "closeControls": CLOSE_CONTROL_SELECTOR},
        )
    except PlaywrightError:
        logger.warning("popup dismissal script failed", exc_info=True)
        return None

    if closed:
        logger.info("closed popup", extra={"selector": closed})
    return closed
