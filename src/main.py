"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import router
from src.complaints import build_client, build_scraper
from src.config import get_settings
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting complaint scraper")

    scraper = build_scraper(settings)

    # Attach to app state for dependency injection
    app.state.settings = settings
    app.state.scraper = scraper
    app.state.client = build_client(settings, scraper)

    logger.info(
        "complaint scraper ready",
        extra={
            "port": settings.port,
            "concurrency": settings.concurrency,
            "failure_policy": settings.failure_policy,
            "scrape_timeout_seconds": settings.scrape_timeout_seconds,
        },
    )

    yield

    logger.info("shutting down complaint scraper")


app = FastAPI(title="Complaint Scraper", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}


def run(host: str | None = None, port: int | None = None) -> None:
    """Serve the app with uvicorn on the configured (or given) address."""
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
