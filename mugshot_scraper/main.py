"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mugshot_scraper.api.routes import router
from mugshot_scraper.config import get_settings
from mugshot_scraper.logging_config import setup_logging
from mugshot_scraper.scrape import ScrapePipeline

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    setup_logging(settings.log_level)

    # Browsers are launched per request; the pipeline itself holds no resources
    app.state.settings = settings
    app.state.pipeline = ScrapePipeline(settings)

    logger.info(
        "mugshot scraper ready",
        extra={
            "target_url_template": settings.target_url_template,
            "headless": settings.headless,
            "max_navigation_attempts": settings.max_navigation_attempts,
        },
    )

    yield

    logger.info("shutting down mugshot scraper")


app = FastAPI(title="Mugshot Scraper", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


def run() -> None:
    """Serve the app with uvicorn on the configured port."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("server running", extra={"url": f"http://localhost:{settings.port}"})
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    run()
