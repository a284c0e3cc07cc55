"""Analysis session tests: analyzing flag, submit gating, result replacement."""

import asyncio

import pytest

from conftest import FakeSource
from src.complaints import AnalysisSession, BatchAbortedError, LinkList, ScrapeClient, ScrapedComplaint


def test_cannot_submit_when_first_link_blank(fake_source):
    session = AnalysisSession(ScrapeClient(fake_source), LinkList(["", "https://x/2"]))
    assert not session.can_submit


def test_can_submit_with_first_link_set(fake_source):
    session = AnalysisSession(ScrapeClient(fake_source), LinkList(["https://x/1"]))
    assert session.can_submit
    assert not session.can_export


def test_default_session_has_one_blank_link(fake_source):
    session = AnalysisSession(ScrapeClient(fake_source))
    assert session.links.links == [""]
    assert not session.can_submit


@pytest.mark.asyncio
async def test_analyze_stores_results(fake_source):
    session = AnalysisSession(ScrapeClient(fake_source), LinkList(["https://x/1", "", "https://x/2"]))
    results = await session.analyze()

    assert [r.url for r in results] == ["https://x/1", "https://x/2"]
    assert session.results == results
    assert session.can_export
    assert not session.analyzing


@pytest.mark.asyncio
async def test_analyzing_flag_set_during_batch():
    observed: list[tuple[bool, bool]] = []
    session: AnalysisSession

    class ObservingSource:
        async def scrape(self, url):
            observed.append((session.analyzing, session.can_submit))
            return ScrapedComplaint(title=url)

    session = AnalysisSession(ScrapeClient(ObservingSource()), LinkList(["https://x/1"]))
    await session.analyze()

    assert observed == [(True, False)]
    assert session.analyzing is False


@pytest.mark.asyncio
async def test_second_batch_rejected_while_running():
    release = asyncio.Event()

    class BlockingSource:
        async def scrape(self, url):
            await release.wait()
            return ScrapedComplaint()

    session = AnalysisSession(ScrapeClient(BlockingSource()), LinkList(["https://x/1"]))
    first = asyncio.create_task(session.analyze())
    await asyncio.sleep(0)

    with pytest.raises(RuntimeError):
        await session.analyze()

    release.set()
    await first
    assert len(session.results) == 1


@pytest.mark.asyncio
async def test_abort_policy_session_results_empty_and_flag_reset():
    source = FakeSource(failing={"https://x/2"})
    session = AnalysisSession(
        ScrapeClient(source, failure_policy="abort"),
        LinkList(["https://x/1", "https://x/2", "https://x/3"]),
    )

    with pytest.raises(BatchAbortedError):
        await session.analyze()

    assert session.results == []
    assert not session.can_export
    assert session.analyzing is False
    assert [o.url for o in session.outcomes] == ["https://x/1", "https://x/2"]


@pytest.mark.asyncio
async def test_new_batch_replaces_previous_results(fake_source):
    session = AnalysisSession(ScrapeClient(fake_source), LinkList(["https://x/1"]))
    await session.analyze()
    session.links.update(0, "https://x/9")
    await session.analyze()

    assert [r.url for r in session.results] == ["https://x/9"]
