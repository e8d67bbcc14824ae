from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from eprints.arxiv.constants import ARXIV_QUERY_ROUTE
from eprints.arxiv.errors import EprintNotFoundError, NoMatchingEprintsError
from eprints.arxiv.parser import parse_eprints_feed
from eprints.arxiv.types import Eprint, EprintListOptions, EprintsFeed
from eprints.logging_utils import structured_log

if TYPE_CHECKING:
    from eprints.arxiv.client import ArxivClient

logger = logging.getLogger(__name__)


class EprintsService:
    """E-print lookups against the ``query`` endpoint of the arXiv API."""

    def __init__(self, client: ArxivClient) -> None:
        self._client = client

    async def get(self, eprint_id: str) -> Eprint:
        """Fetch one e-print by arXiv id.

        The id is sent as-is. Raises ``EprintNotFoundError`` when arXiv
        returns no entry for it.
        """
        feed = await self.feed(EprintListOptions(id_list=(eprint_id,)))
        if not feed.entries:
            structured_log(logger, "info", "arxiv.eprint_not_found", eprint_id=eprint_id)
            raise EprintNotFoundError(f"e-print not found: {eprint_id}")
        return feed.entries[0]

    async def list(self, options: EprintListOptions | None = None) -> list[Eprint]:
        """Fetch a single page of e-prints matching ``options``.

        Raises ``NoMatchingEprintsError`` (an ``EprintNotFoundError``) when the
        page is empty.
        """
        feed = await self.feed(options)
        if not feed.entries:
            structured_log(logger, "info", "arxiv.list_empty", total_results=feed.opensearch.total_results)
            raise NoMatchingEprintsError()
        return list(feed.entries)

    async def feed(self, options: EprintListOptions | None = None) -> EprintsFeed:
        url = self._client.url(ARXIV_QUERY_ROUTE, options)
        structured_log(logger, "debug", "arxiv.list_request", url=url)
        request = self._client.new_request("GET", url)
        feed = await self._client.do(request, parse_eprints_feed)
        structured_log(
            logger,
            "debug",
            "arxiv.feed_decoded",
            entry_count=len(feed.entries),
            total_results=feed.opensearch.total_results,
        )
        return feed
