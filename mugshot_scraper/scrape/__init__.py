"""Fetch-render-extract pipeline for the mugshot listing."""

from .browser import BrowserSession, open_session
from .errors import BrowserLaunchError, NavigationError, ScrapeError
from .models import FailureKind, MugshotRecord, ScrapeFailure, ScrapeResult, ScrapeSuccess
from .pipeline import ScrapePipeline, build_target_url

__all__ = [
    "BrowserLaunchError",
    "BrowserSession",
    "FailureKind",
    "MugshotRecord",
    "NavigationError",
    "ScrapeError",
    "ScrapeFailure",
    "ScrapePipeline",
    "ScrapeResult",
    "ScrapeSuccess",
    "build_target_url",
    "open_session",
]
