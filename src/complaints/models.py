"""Data models for scraped complaints."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScrapedComplaint:
    """The three text fields read from a single complaint page."""

    title: str = ""
    complaint_text: str = ""
    date: str = ""


@dataclass(frozen=True)
class ComplaintResult:
    """A scraped complaint together with the URL it came from."""

    url: str
    title: str = ""
    complaint_text: str = ""
    date: str = ""

    @classmethod
    def from_scraped(cls, url: str, scraped: ScrapedComplaint) -> ComplaintResult:
        return cls(
            url=url,
            title=scraped.title,
            complaint_text=scraped.complaint_text,
            date=scraped.date,
        )


@dataclass(frozen=True)
class ScrapeOutcome:
    """Per-URL status of a batch: exactly one of ``result`` / ``error`` is set."""

    url: str
    result: ComplaintResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None
