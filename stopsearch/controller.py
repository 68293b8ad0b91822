"""Search-as-you-type controller for the stop lookup screen."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Mapping, Protocol

import httpx

from stopsearch.config import SearchSettings, get_settings
from stopsearch.domain.models import ResultSet, StopCandidate
from stopsearch.logging import configure_logging, logger
from stopsearch.services.exceptions import StopSearchError
from stopsearch.services.query import DEFAULT_SHORTCUTS, normalize_query
from stopsearch.services.stop_search import StopSearchService


class ResultsListener(Protocol):
    """Presentation hooks; both are called on the event loop."""

    def results_changed(self, results: ResultSet) -> None: ...

    def candidate_selected(self, candidate: StopCandidate) -> None: ...


class SearchController:
    """Turns text changes into lookups and keeps the latest ResultSet.

    Each call to :meth:`on_query_changed` clears the current results and
    schedules a lookup task without waiting for it. When
    ``discard_stale_responses`` is enabled, a response is applied only if it
    belongs to the most recent query; otherwise whichever response lands last
    wins, even if it was issued earlier.
    """

    def __init__(
        self,
        service: StopSearchService,
        listener: ResultsListener | None = None,
        *,
        discard_stale_responses: bool = True,
        shortcuts: Mapping[str, str] = DEFAULT_SHORTCUTS,
    ) -> None:
        self._service = service
        self._listener = listener
        self._discard_stale = discard_stale_responses
        self._shortcuts = shortcuts
        self._results: ResultSet = ()
        self._sequence = 0
        self._pending: set[asyncio.Task[None]] = set()
        self._closed = False
        self.last_query: str | None = None
        self.last_failure: StopSearchError | None = None

    @property
    def results(self) -> ResultSet:
        return self._results

    @property
    def pending(self) -> int:
        return len(self._pending)

    def on_query_changed(self, raw_text: str) -> asyncio.Task[None]:
        if self._closed:
            raise RuntimeError("SearchController is closed.")

        self._replace_results(())
        query = normalize_query(raw_text, self._shortcuts)
        self._sequence += 1
        self.last_query = query

        task = asyncio.get_running_loop().create_task(self._lookup(self._sequence, query))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def select(self, position: int) -> StopCandidate:
        if position < 0:
            raise IndexError(position)
        candidate = self._results[position]
        logger.info("stop_candidate_selected", name=candidate.name, stop_id=candidate.id)
        if self._listener is not None:
            self._listener.candidate_selected(candidate)
        return candidate

    async def wait_idle(self) -> None:
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        self._closed = True
        pending = list(self._pending)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._results = ()

    async def __aenter__(self) -> "SearchController":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _lookup(self, sequence: int, query: str) -> None:
        try:
            results = await self._service.search(query)
        except StopSearchError as exc:
            if self._is_stale(sequence, query):
                return
            logger.warning(
                "stop_search_failed",
                query=query,
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            self.last_failure = exc
            self._replace_results(())
            return

        if self._is_stale(sequence, query):
            return
        self.last_failure = None
        self._replace_results(results)
        logger.info("stop_search_results_applied", query=query, count=len(results))

    def _is_stale(self, sequence: int, query: str) -> bool:
        if not self._discard_stale or sequence == self._sequence:
            return False
        logger.info(
            "stop_search_stale_response_dropped",
            query=query,
            sequence=sequence,
            latest_sequence=self._sequence,
        )
        return True

    def _replace_results(self, results: ResultSet) -> None:
        self._results = tuple(results)
        if self._listener is not None:
            self._listener.results_changed(self._results)


@asynccontextmanager
async def search_session(
    settings: SearchSettings | None = None,
    listener: ResultsListener | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[SearchController]:
    """Configure logging, then open an HTTP client and a controller bound to it.

    Both are closed on exit.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level)
    async with httpx.AsyncClient(transport=transport) as client:
        service = StopSearchService(client, settings=settings)
        controller = SearchController(
            service,
            listener,
            discard_stale_responses=settings.discard_stale_responses,
        )
        async with controller:
            yield controller


__all__ = ["ResultsListener", "SearchController", "search_session"]
