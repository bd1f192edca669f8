"""Exceptions raised inside the scrape pipeline."""


class ScrapeError(Exception):
    """Base class for failures the pipeline knows how to classify."""


class BrowserLaunchError(ScrapeError):
    """Chromium (or the Playwright driver) could not be started."""


class NavigationError(ScrapeError):
    """Every navigation attempt to the listing page failed."""

    def __init__(self, url: str, attempts: int, message: str) -> None:
        super().__init__(message)
        self.url = url
        self.attempts = attempts
