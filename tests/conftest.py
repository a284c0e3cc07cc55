"""Fixtures: fake complaint source, mocked Playwright, sample results."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.complaints import ComplaintResult, ScrapedComplaint, ScrapeError


class FakeSource:
    """Records scrape calls; URLs in ``failing`` raise ScrapeError."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.calls: list[str] = []
        self.failing = failing or set()

    async def scrape(self, url: str) -> ScrapedComplaint:
        self.calls.append(url)
        if url in self.failing:
            raise ScrapeError(url)
        return ScrapedComplaint(
            title=f"Title for {url}",
            complaint_text=f"Body for {url}",
            date="19/10/2026",
        )


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo handlers installed by setup_logging() during a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fake_source() -> FakeSource:
    return FakeSource()


@pytest.fixture
def sample_results() -> list[ComplaintResult]:
    return [
        ComplaintResult(
            url="https://www.reclameaqui.com.br/empresa/a/1",
            title="Cobrança indevida",
            complaint_text="Fui cobrado duas vezes pelo mesmo pedido.",
            date="01/02/2026",
        ),
        ComplaintResult(
            url="https://www.reclameaqui.com.br/empresa/b/2",
            title="Produto não entregue",
            complaint_text="",
            date="03/02/2026",
        ),
    ]


@pytest.fixture
def mock_playwright():
    """Patchable stand-in for ``async_playwright()`` and its object graph.

    Returns a namespace exposing the factory plus the browser, context,
    page and navigation response mocks.
    """
    response = MagicMock()
    response.headers = {"content-type": "text/html; charset=utf-8"}

    page = MagicMock()
    page.goto = AsyncMock(return_value=response)
    page.evaluate = AsyncMock(return_value=["  A title ", "\n Body text \n", " 10/10/2026 "])
    page.close = AsyncMock()

    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)
    context.close = AsyncMock()

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    p = MagicMock()
    p.chromium.launch = AsyncMock(return_value=browser)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=p)
    manager.__aexit__ = AsyncMock(return_value=False)

    ns = MagicMock()
    ns.factory = MagicMock(return_value=manager)
    ns.playwright = p
    ns.browser = browser
    ns.context = context
    ns.page = page
    ns.response = response
    return ns
