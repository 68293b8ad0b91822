"""Shared fixtures for stop search tests."""

from __future__ import annotations

import pytest

from stopsearch.config import SearchSettings

BASE_URL = "https://stops.example/search?query="


class RecordingListener:
    def __init__(self) -> None:
        self.snapshots = []
        self.selected = []

    def results_changed(self, results) -> None:
        self.snapshots.append(results)

    def candidate_selected(self, candidate) -> None:
        self.selected.append(candidate)


@pytest.fixture
def settings(monkeypatch) -> SearchSettings:
    for name in (
        "STOPSEARCH_AUTOCOMPLETE_URL",
        "STOPSEARCH_REQUEST_TIMEOUT_SECONDS",
        "STOPSEARCH_DISCARD_STALE_RESPONSES",
        "STOPSEARCH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return SearchSettings(_env_file=None, autocomplete_url=BASE_URL)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()
