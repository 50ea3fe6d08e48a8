"""Interactive search sessions: a newer search supersedes the one in flight."""

import asyncio
import logging

from models.schemas.candidate import SearchResult
from models.schemas.profile import ProfileRecord
from services.pipeline.orchestrator import RankingPipeline

logger = logging.getLogger(__name__)


class SearchCoordinator:
    """Runs at most one search at a time for a session.

    Starting a search cancels any search still running. A superseded search
    returns None and never replaces ``latest``.
    """

    def __init__(self, pipeline: RankingPipeline) -> None:
        self.pipeline = pipeline
        self.latest: SearchResult | None = None
        self._generation = 0
        self._task: asyncio.Task | None = None

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    async def search(
        self,
        user_id: str,
        query: str,
        k: int | None = None,
        searcher: ProfileRecord | None = None,
        force_refresh: bool = False,
    ) -> SearchResult | None:
        self._generation += 1
        generation = self._generation
        self._cancel_in_flight()

        task = asyncio.ensure_future(
            self.pipeline.search(
                user_id, query, k=k, searcher=searcher, force_refresh=force_refresh
            )
        )
        self._task = task
        try:
            result = await task
        except asyncio.CancelledError:
            if generation != self._generation:
                logger.debug("Search %d superseded: %r", generation, query)
                return None
            raise

        if generation != self._generation:
            logger.debug("Discarding stale result of search %d: %r", generation, query)
            return None
        self.latest = result
        return result

    def cancel(self) -> None:
        """Abandon the current search, if any."""
        self._generation += 1
        self._cancel_in_flight()

    def _cancel_in_flight(self) -> None:
        if self.in_flight:
            self._task.cancel()
