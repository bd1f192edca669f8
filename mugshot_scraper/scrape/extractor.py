"""Extraction of mugshot records from the rendered listing page."""

from __future__ import annotations

import logging
from typing import Any

from playwright.async_api import Page

from .models import MugshotRecord

logger = logging.getLogger(__name__)

ARTICLE_SELECTOR = "article"
IMAGE_SELECTOR = ".post-image img"
TITLE_SELECTOR = ".entry-title a"
SUMMARY_SELECTOR = ".entry-summary"

CHARGES_PLACEHOLDER = "Charges not specified"

EXTRACT_MUGSHOTS_JS = """
({article, image, title, summary, placeholder}) => {
  const results = [];
  for (const node of document.querySelectorAll(article)) {
    const imgEl = node.querySelector(image);
    const titleEl = node.querySelector(title);
    if (!imgEl || !titleEl) continue;
    const summaryEl = node.querySelector(summary);
    results.push({
      img: imgEl.src,
      name: titleEl.innerText.trim(),
      crime: summaryEl ? summaryEl.innerText.trim() : placeholder,
      link: titleEl.href || '',
    });
  }
  return results;
}
"""


def to_records(raw: list[dict[str, Any]]) -> list[MugshotRecord]:
    """Convert the plain objects returned by the page into records, keeping order."""
    return [
        MugshotRecord(
            img=item["img"],
            name=item["name"],
            crime=item.get("crime", CHARGES_PLACEHOLDER),
            link=item.get("link") or "",
        )
        for item in raw
    ]


async def extract_mugshots(page: Page) -> list[MugshotRecord]:
    """Read every article that has both a photo and a title link.

    An empty list is a normal outcome (out-of-range page, layout change).
    """
    raw = await page.evaluate(
        EXTRACT_MUGSHOTS_JS,
        {
            "article": ARTICLE_SELECTOR,
            "image": IMAGE_SELECTOR,
            "title": TITLE_SELECTOR,
            "summary": SUMMARY_SELECTOR,
            "placeholder": CHARGES_PLACEHOLDER,
        },
    )
    records = to_records(raw or [])
    logger.debug("articles extracted", extra={"records": len(records)})
    return records
