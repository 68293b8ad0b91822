"""Search-as-you-type lookup of bus stops against a remote autocomplete API."""

from stopsearch.controller import ResultsListener, SearchController, search_session
from stopsearch.domain.models import ResultSet, StopCandidate
from stopsearch.services.query import normalize_query
from stopsearch.services.stop_search import StopSearchService, parse_candidates

__all__ = [
    "ResultSet",
    "ResultsListener",
    "SearchController",
    "StopCandidate",
    "StopSearchService",
    "normalize_query",
    "parse_candidates",
    "search_session",
]
