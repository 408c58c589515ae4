r"""Unit tests for the observer interfaces."""

from __future__ import annotations

import asyncio
import logging
import threading
from unittest.mock import Mock

import pytest

from aresfetch.observer import AbortSignal, LoggingObserver, RetryObserver

#####################################
#     Tests for LoggingObserver     #
#####################################


def test_logging_observer_default_logger() -> None:
    assert LoggingObserver().logger.name == "aresfetch.retry"


def test_logging_observer_is_retry_observer() -> None:
    assert isinstance(LoggingObserver(), RetryObserver)


def test_logging_observer_warn(caplog: pytest.LogCaptureFixture) -> None:
    observer = LoggingObserver(logging.getLogger("test_aresfetch_observer"))
    with caplog.at_level(logging.WARNING, logger="test_aresfetch_observer"):
        observer.warn(
            "Request failed, retrying",
            {"status": 503, "attempt": 1, "max_retries": 3, "delay_ms": 500, "url": "u"},
        )

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "Request failed, retrying"
    assert record.status == 503
    assert record.delay_ms == 500


def test_logging_observer_custom_logger() -> None:
    logger = Mock(spec=logging.Logger)
    LoggingObserver(logger).warn("Network request failed, retrying", {"error": "boom"})
    logger.log.assert_called_once_with(
        logging.WARNING, "Network request failed, retrying", extra={"error": "boom"}
    )


#################################
#     Tests for AbortSignal     #
#################################


@pytest.mark.parametrize("event_cls", [threading.Event, asyncio.Event])
def test_events_are_abort_signals(event_cls: type) -> None:
    assert isinstance(event_cls(), AbortSignal)
