"""Headless-browser scraper for a single complaint page.

Each call to :meth:`ComplaintScraper.scrape` launches its own Chromium
instance through Playwright, navigates with ``wait_until="networkidle"``,
reads three fixed selectors in one ``page.evaluate`` round trip and closes
the page, context and browser before returning.  Nothing is shared between
calls, so two scrapes of the same URL hit the site twice.

Install the browser binary once per environment::

    playwright install chromium
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from playwright.async_api import Page, async_playwright

from .errors import ScrapeError
from .models import ScrapedComplaint

logger = logging.getLogger(__name__)

_LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

# Returns null for a selector that matches nothing; Python maps it to "".
_EXTRACT_JS = """
(selectors) => selectors.map((selector) => {
    const el = document.querySelector(selector);
    return el ? el.textContent : null;
})
"""


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _is_html(content_type: str | None) -> bool:
    # A missing header is treated as HTML; file:// and about: pages have none.
    if not content_type:
        return True
    return "html" in content_type.lower()


class ComplaintScraper:
    """Scrapes title, body and date from complaint pages."""

    def __init__(
        self,
        *,
        title_selector: str = ".complaint-title",
        body_selector: str = ".complaint-body",
        date_selector: str = ".complaint-date",
        timeout_seconds: int = 30,
        headless: bool = True,
    ) -> None:
        self._selectors = [title_selector, body_selector, date_selector]
        self._timeout_ms = timeout_seconds * 1000
        self._headless = headless

    @asynccontextmanager
    async def open_page(self) -> AsyncIterator[Page]:
        """Yield a fresh page; page, context and browser close on every exit."""
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=self._headless, args=_LAUNCH_ARGS)
            try:
                context = await browser.new_context()
                page = await context.new_page()
                try:
                    yield page
                finally:
                    await page.close()
                    await context.close()
            finally:
                await browser.close()

    async def scrape(self, url: str) -> ScrapedComplaint:
        """Load *url* and return its complaint fields.

        Raises:
            ScrapeError: On launch, navigation, timeout, non-HTML response or
                evaluation failure.  No partial result is returned.
        """
        logger.debug("scraping complaint", extra={"url": url})
        try:
            async with self.open_page() as page:
                response = await page.goto(
                    url,
                    wait_until="networkidle",
                    timeout=self._timeout_ms,
                )
                if response is not None:
                    content_type = response.headers.get("content-type")
                    if not _is_html(content_type):
                        raise ScrapeError(url, f"non-HTML response ({content_type})")
                values = await page.evaluate(_EXTRACT_JS, self._selectors)
            title, complaint_text, date = (_clean(v) for v in values)
        except ScrapeError:
            logger.warning("scrape rejected", extra={"url": url}, exc_info=True)
            raise
        except Exception as exc:
            logger.warning("scrape failed", extra={"url": url}, exc_info=True)
            raise ScrapeError(url) from exc

        scraped = ScrapedComplaint(title=title, complaint_text=complaint_text, date=date)
        logger.debug(
            "complaint scraped",
            extra={
                "url": url,
                "title": title[:80],
                "text_length": len(complaint_text),
                "missing_fields": [
                    name
                    for name, value in (("title", title), ("complaint_text", complaint_text), ("date", date))
                    if not value
                ],
            },
        )
        return scraped
