"""Tests for logging configuration."""

from __future__ import annotations

import logging

import structlog

from stopsearch.logging import configure_logging


def test_configure_logging_outputs_json(capsys):
    configure_logging()
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    out = capsys.readouterr().out
    assert "unit-test" in out
    assert "foo" in out


def test_configure_logging_accepts_level_names(capsys):
    configure_logging("warning")
    logger = structlog.get_logger()
    logger.info("hidden-event")
    logger.warning("visible-event")
    out = capsys.readouterr().out
    assert "hidden-event" not in out
    assert "visible-event" in out
    configure_logging(logging.INFO)
