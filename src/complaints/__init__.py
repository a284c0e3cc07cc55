"""Complaint scraping: link collection, batch analysis and export."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .client import ComplaintSource, HttpComplaintSource, ScrapeClient
from .errors import BatchAbortedError, ComplaintError, ScrapeError, TransportError
from .export import build_rows, render_xlsx, write_xlsx
from .links import MAX_LINKS, LinkList
from .models import ComplaintResult, ScrapedComplaint, ScrapeOutcome
from .scraper import ComplaintScraper
from .session import AnalysisSession

if TYPE_CHECKING:
    from src.config import Settings

__all__ = [
    "MAX_LINKS",
    "AnalysisSession",
    "BatchAbortedError",
    "ComplaintError",
    "ComplaintResult",
    "ComplaintScraper",
    "ComplaintSource",
    "HttpComplaintSource",
    "LinkList",
    "ScrapeClient",
    "ScrapeError",
    "ScrapeOutcome",
    "ScrapedComplaint",
    "TransportError",
    "build_rows",
    "build_scraper",
    "build_client",
    "render_xlsx",
    "write_xlsx",
]


def build_scraper(settings: Settings) -> ComplaintScraper:
    """Build the in-process scraper from configured selectors and timeout."""
    return ComplaintScraper(
        title_selector=settings.title_selector,
        body_selector=settings.body_selector,
        date_selector=settings.date_selector,
        timeout_seconds=settings.scrape_timeout_seconds,
        headless=settings.headless,
    )


def build_client(settings: Settings, source: ComplaintSource | None = None) -> ScrapeClient:
    """Build a batch client; defaults to the in-process scraper as source."""
    return ScrapeClient(
        source if source is not None else build_scraper(settings),
        concurrency=settings.concurrency,
        failure_policy=settings.failure_policy,
    )
