"""Exceptions raised while scraping and aggregating complaints."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ScrapeOutcome


class ComplaintError(Exception):
    """Base class for complaint scraping failures."""


class ScrapeError(ComplaintError):
    """Browser launch, navigation or extraction failed for a URL."""

    def __init__(self, url: str, reason: str = "scrape failed") -> None:
        super().__init__(f"{reason}: {url}")
        self.url = url
        self.reason = reason


class TransportError(ComplaintError):
    """The scrape service could not be reached or answered with non-2xx."""

    def __init__(self, url: str, status_code: int | None = None) -> None:
        detail = f"status {status_code}" if status_code is not None else "unreachable"
        super().__init__(f"scrape service {detail} for {url}")
        self.url = url
        self.status_code = status_code


class BatchAbortedError(ComplaintError):
    """A URL failed under the ``abort`` policy; no results are kept."""

    def __init__(self, failed_url: str, outcomes: list[ScrapeOutcome]) -> None:
        super().__init__(f"batch aborted after failure on {failed_url}")
        self.failed_url = failed_url
        self.outcomes = outcomes
