"""Service layer — request parsing and result-to-response mapping for the routes."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict

from fastapi import status
from fastapi.responses import JSONResponse

from mugshot_scraper.api.schemas import Mugshot, MugshotPage, NoResultsBody, ScrapeErrorBody
from mugshot_scraper.scrape import FailureKind, ScrapePipeline, ScrapeResult, ScrapeSuccess

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_page_number(raw: str | None) -> int:
    """Read the leading integer of ``raw``, falling back to page 1.

    Trailing junk is ignored ("3abc" -> 3). Missing, unparsable, zero or
    negative values all yield 1.
    """
    if raw is None:
        return DEFAULT_PAGE
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return DEFAULT_PAGE
    value = int(match.group(1))
    return value if value >= 1 else DEFAULT_PAGE


def to_response(result: ScrapeResult) -> JSONResponse:
    """Map a pipeline result onto the 200 / 404 / 500 JSON contract."""
    if isinstance(result, ScrapeSuccess):
        body = MugshotPage(
            page=result.page_number,
            totalPages=result.total_pages,
            mugshots=[Mugshot(**asdict(record)) for record in result.records],
        )
        return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())

    if result.kind is FailureKind.NO_RESULTS:
        body = NoResultsBody(page=result.page_number)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump())

    body = ScrapeErrorBody(details=result.message, page=result.page_number)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


async def scrape_page(pipeline: ScrapePipeline, raw_page: str | None) -> JSONResponse:
    """Run the pipeline for the requested page and build the HTTP response."""
    page_number = parse_page_number(raw_page)
    result = await pipeline.run(page_number)
    if not isinstance(result, ScrapeSuccess):
        logger.info(
            "scrape request failed",
            extra={"page": page_number, "kind": result.kind.value},
        )
    return to_response(result)
