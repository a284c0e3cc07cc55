"""Service layer — orchestrates scrape, analyze and export for the API routes."""

from __future__ import annotations

import logging

from src.api.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    ComplaintRecord,
    ExportRequest,
    OutcomeRecord,
    ScrapeResponse,
)
from src.complaints import AnalysisSession, ComplaintSource, LinkList, ScrapeClient, render_xlsx

logger = logging.getLogger(__name__)


async def scrape_complaint(source: ComplaintSource, url: str) -> ScrapeResponse:
    """Scrape a single page. Propagates ``ScrapeError`` to the caller."""
    scraped = await source.scrape(url)
    logger.info("complaint scraped", extra={"url": url, "title": scraped.title[:80]})
    return ScrapeResponse.from_scraped(scraped)


async def analyze_links(client: ScrapeClient, body: AnalyzeRequest) -> AnalyzeResponse:
    """Run a request-scoped session over the submitted links.

    Propagates ``BatchAbortedError`` under the abort policy.
    """
    session = AnalysisSession(client, LinkList(body.urls))
    await session.analyze()
    return AnalyzeResponse(
        results=[ComplaintRecord.from_result(r) for r in session.results],
        outcomes=[OutcomeRecord.from_outcome(o) for o in session.outcomes],
    )


def export_results(body: ExportRequest, sheet_name: str) -> bytes:
    """Render the submitted results as XLSX bytes."""
    results = [record.to_result() for record in body.results]
    return render_xlsx(results, sheet_name=sheet_name)
