"""POST /api/scrape, POST /api/analyze, POST /api/export endpoint handlers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from src.api import service
from src.api.schemas import (
    AnalyzeErrorResponse,
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    ExportRequest,
    OutcomeRecord,
    ScrapeRequest,
    ScrapeResponse,
)
from src.complaints import BatchAbortedError, ComplaintError, ComplaintSource, ScrapeClient
from src.complaints.export import XLSX_MEDIA_TYPE
from src.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

SCRAPE_FAILED = "Failed to scrape the complaint"
ANALYZE_FAILED = "Failed to analyze the complaints"


def _get_scraper(request: Request) -> ComplaintSource:
    return request.app.state.scraper


def _get_client(request: Request) -> ScrapeClient:
    return request.app.state.client


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post(
    "/scrape",
    response_model=ScrapeResponse,
    responses={500: {"model": ErrorResponse}},
)
async def scrape(
    body: ScrapeRequest,
    scraper: ComplaintSource = Depends(_get_scraper),
):
    try:
        return await service.scrape_complaint(scraper, body.url)
    except ComplaintError:
        logger.exception("scraping error", extra={"url": body.url})
        return JSONResponse(status_code=500, content={"error": SCRAPE_FAILED})


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={500: {"model": AnalyzeErrorResponse}},
)
async def analyze(
    body: AnalyzeRequest,
    client: ScrapeClient = Depends(_get_client),
):
    try:
        return await service.analyze_links(client, body)
    except BatchAbortedError as exc:
        logger.exception("analysis aborted", extra={"failed_url": exc.failed_url})
        payload = AnalyzeErrorResponse(
            error=ANALYZE_FAILED,
            outcomes=[OutcomeRecord.from_outcome(o) for o in exc.outcomes],
        )
        return JSONResponse(status_code=500, content=payload.model_dump())


@router.post("/export", responses={200: {"content": {XLSX_MEDIA_TYPE: {}}}})
async def export(
    body: ExportRequest,
    settings: Settings = Depends(_get_settings),
):
    data = service.export_results(body, sheet_name=settings.export_sheet_name)
    return Response(
        content=data,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{settings.export_filename}"'},
    )
