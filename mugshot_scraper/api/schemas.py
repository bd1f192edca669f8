"""Response Pydantic models."""

from pydantic import BaseModel


class Mugshot(BaseModel):
    img: str
    name: str
    crime: str
    link: str = ""


class MugshotPage(BaseModel):
    page: int
    totalPages: int
    mugshots: list[Mugshot]


class NoResultsBody(BaseModel):
    error: str = "No mugshots found"
    debug: str = "Check server logs for details"
    page: int


class ScrapeErrorBody(BaseModel):
    error: str = "Scraping failed"
    details: str
    page: int
