"""GET /wakenc endpoint handler."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from mugshot_scraper.api.schemas import MugshotPage, NoResultsBody, ScrapeErrorBody
from mugshot_scraper.api.service import scrape_page
from mugshot_scraper.scrape import ScrapePipeline

router = APIRouter()


def _get_pipeline(request: Request) -> ScrapePipeline:
    return request.app.state.pipeline


@router.get(
    "/wakenc",
    response_model=MugshotPage,
    responses={404: {"model": NoResultsBody}, 500: {"model": ScrapeErrorBody}},
)
async def get_wakenc(
    # Kept as a string so non-numeric values fall back to page 1 instead of 422
    page: str | None = Query(default=None),
    pipeline: ScrapePipeline = Depends(_get_pipeline),
):
    return await scrape_page(pipeline, page)
