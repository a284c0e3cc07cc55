"""Per-user analysis session: links in, results out."""

from __future__ import annotations

import logging

from .client import ScrapeClient
from .errors import BatchAbortedError
from .events import EventCallback
from .links import LinkList
from .models import ComplaintResult, ScrapeOutcome

logger = logging.getLogger(__name__)


class AnalysisSession:
    """Holds the link list, the last result set and the ``analyzing`` flag.

    Results live only as long as the session object.
    """

    def __init__(self, client: ScrapeClient, links: LinkList | None = None) -> None:
        self._client = client
        self.links = links if links is not None else LinkList()
        self.results: list[ComplaintResult] = []
        self.outcomes: list[ScrapeOutcome] = []
        self.analyzing = False

    @property
    def can_submit(self) -> bool:
        return not self.analyzing and not self.links.first_is_blank

    @property
    def can_export(self) -> bool:
        return bool(self.results)

    async def analyze(self, on_event: EventCallback | None = None) -> list[ComplaintResult]:
        """Run the current links as one batch and store the results.

        An aborted batch leaves ``results`` empty and re-raises
        :class:`BatchAbortedError`.
        """
        if self.analyzing:
            raise RuntimeError("analysis already in progress")

        self.analyzing = True
        self.results = []
        self.outcomes = []
        try:
            outcomes = await self._client.analyze_outcomes(self.links, on_event=on_event)
        except BatchAbortedError as exc:
            self.outcomes = exc.outcomes
            raise
        finally:
            self.analyzing = False

        self.outcomes = outcomes
        self.results = [o.result for o in outcomes if o.result is not None]
        return self.results
