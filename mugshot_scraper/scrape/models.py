"""Data models for the scrape submodule."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_TOTAL_PAGES = 10


@dataclass
class MugshotRecord:
    """One booking entry extracted from a listing article."""

    img: str
    name: str
    crime: str
    link: str = ""


class FailureKind(str, Enum):
    BROWSER_LAUNCH = "BrowserLaunchError"
    NAVIGATION = "NavigationError"
    NO_RESULTS = "NoResultsError"
    UNEXPECTED = "UnexpectedError"


@dataclass
class ScrapeSuccess:
    page_number: int
    records: list[MugshotRecord] = field(default_factory=list)
    total_pages: int = DEFAULT_TOTAL_PAGES


@dataclass
class ScrapeFailure:
    kind: FailureKind
    message: str
    page_number: int


ScrapeResult = ScrapeSuccess | ScrapeFailure
