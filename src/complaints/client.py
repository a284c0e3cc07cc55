"""Batch orchestration: send each link to a complaint source, collect results."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Literal, Protocol

import httpx

from .errors import BatchAbortedError, ComplaintError, TransportError
from .events import EventCallback, emit_event
from .models import ComplaintResult, ScrapedComplaint, ScrapeOutcome

logger = logging.getLogger(__name__)

FailurePolicy = Literal["abort", "skip"]


class ComplaintSource(Protocol):
    """Anything that can scrape one complaint page."""

    async def scrape(self, url: str) -> ScrapedComplaint: ...


class HttpComplaintSource:
    """Calls a running scrape service's ``POST /api/scrape`` endpoint."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def scrape(self, url: str) -> ScrapedComplaint:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                resp = await client.post("/api/scrape", json={"url": url})
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "scrape service returned error",
                extra={"url": url, "status_code": exc.response.status_code},
            )
            raise TransportError(url, exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            logger.warning("scrape service unreachable", extra={"url": url}, exc_info=True)
            raise TransportError(url) from exc
        except ValueError as exc:
            logger.warning("scrape service sent a non-JSON body", extra={"url": url}, exc_info=True)
            raise TransportError(url) from exc

        if not isinstance(data, dict):
            logger.warning("scrape service sent an unexpected payload", extra={"url": url})
            raise TransportError(url)

        return ScrapedComplaint(
            title=data.get("title", ""),
            complaint_text=data.get("complaintText", ""),
            date=data.get("date", ""),
        )


class ScrapeClient:
    """Runs a batch of links through a worker pool, preserving input order.

    With ``concurrency=1`` (the default) each scrape is awaited before the
    next one starts.
    """

    def __init__(
        self,
        source: ComplaintSource,
        *,
        concurrency: int = 1,
        failure_policy: FailurePolicy = "abort",
    ) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        if failure_policy not in ("abort", "skip"):
            raise ValueError(f"unknown failure policy: {failure_policy!r}")
        self._source = source
        self._concurrency = concurrency
        self._failure_policy = failure_policy

    @property
    def failure_policy(self) -> FailurePolicy:
        return self._failure_policy

    async def analyze(
        self,
        urls: Iterable[str],
        on_event: EventCallback | None = None,
    ) -> list[ComplaintResult]:
        """Scrape every non-blank URL and return the results in input order.

        Raises:
            BatchAbortedError: Under the ``abort`` policy, when any URL fails.
        """
        outcomes = await self.analyze_outcomes(urls, on_event=on_event)
        return [o.result for o in outcomes if o.result is not None]

    async def analyze_outcomes(
        self,
        urls: Iterable[str],
        on_event: EventCallback | None = None,
    ) -> list[ScrapeOutcome]:
        """Like :meth:`analyze` but report success or failure for every URL."""
        targets = [u.strip() for u in urls if u and u.strip()]
        logger.info(
            "batch started",
            extra={
                "url_count": len(targets),
                "concurrency": self._concurrency,
                "failure_policy": self._failure_policy,
            },
        )
        await emit_event(on_event, "started", {"url_count": len(targets)})

        queue: asyncio.Queue[tuple[int, str]] = asyncio.Queue()
        for item in enumerate(targets):
            queue.put_nowait(item)
        slots: list[ScrapeOutcome | None] = [None] * len(targets)
        failed: list[str] = []

        async def worker() -> None:
            while True:
                try:
                    index, url = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return
                outcome = await self._scrape_one(url)
                slots[index] = outcome
                if outcome.ok:
                    await emit_event(
                        on_event, "scraped", {"index": index, "url": url, "title": outcome.result.title}
                    )
                    continue
                failed.append(url)
                await emit_event(on_event, "failed", {"index": index, "url": url, "error": outcome.error})
                if self._failure_policy == "abort":
                    # Stop the other workers from picking up new URLs.
                    while not queue.empty():
                        queue.get_nowait()
                    return

        workers = min(self._concurrency, len(targets))
        await asyncio.gather(*(worker() for _ in range(workers)))

        outcomes = [o for o in slots if o is not None]
        if failed and self._failure_policy == "abort":
            logger.warning(
                "batch aborted",
                extra={"failed_url": failed[0], "completed": len(outcomes), "url_count": len(targets)},
            )
            await emit_event(on_event, "done", {"aborted": True, "result_count": 0})
            raise BatchAbortedError(failed[0], outcomes)

        result_count = sum(1 for o in outcomes if o.ok)
        logger.info(
            "batch complete",
            extra={"url_count": len(targets), "result_count": result_count, "failed": len(failed)},
        )
        await emit_event(on_event, "done", {"aborted": False, "result_count": result_count})
        return outcomes

    async def _scrape_one(self, url: str) -> ScrapeOutcome:
        try:
            scraped = await self._source.scrape(url)
        except ComplaintError as exc:
            return ScrapeOutcome(url=url, error=str(exc))
        return ScrapeOutcome(url=url, result=ComplaintResult.from_scraped(url, scraped))
