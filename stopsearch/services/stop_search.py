"""Client for the remote stop autocomplete API."""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import ValidationError

from stopsearch.config import SearchSettings
from stopsearch.domain.models import ResultSet, StopCandidate
from stopsearch.logging import logger
from stopsearch.services.exceptions import HttpStatusFailure, NetworkFailure, ParseFailure


class StopSearchService:
    """Fetch and parse autocomplete matches for a normalized query."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: SearchSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or SearchSettings()

    def build_url(self, query: str) -> str:
        return f"{self._settings.autocomplete_url}{query}"

    async def fetch(self, query: str) -> str:
        url = self.build_url(query)
        logger.debug("stop_search_request", url=url)
        try:
            response = await self._client.get(
                url,
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.RequestError as exc:
            raise NetworkFailure(f"Failed to contact stop search API: {exc}") from exc
        except httpx.InvalidURL as exc:
            raise NetworkFailure(f"Cannot build stop search request: {exc}") from exc

        if response.status_code != 200:
            raise HttpStatusFailure(response.status_code, response.text[:500])
        return response.text

    async def search(self, query: str) -> ResultSet:
        body = await self.fetch(query)
        return parse_candidates(body)


def parse_candidates(body: str) -> ResultSet:
    """Parse a JSON array of ``{"n": name, "i": id}`` objects.

    The whole batch fails on the first bad entry.
    """

    try:
        payload: Any = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise ParseFailure(f"Stop search response is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise ParseFailure("Stop search response must be a JSON array.")

    candidates: list[StopCandidate] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ParseFailure(f"Entry {index} is not an object.")
        try:
            candidates.append(StopCandidate.model_validate(item, by_alias=True, by_name=False))
        except ValidationError as exc:
            raise ParseFailure(f"Entry {index} is malformed: {exc}") from exc
    return tuple(candidates)


__all__ = ["StopSearchService", "parse_candidates"]
