r"""Observer notification for retry events.

This module provides the ObserverManager class that turns a retriable
outcome into a structured event for the configured observer.
"""

from __future__ import annotations

__all__ = ["ObserverManager"]

import logging
import math
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aresfetch.observer import RetryObserver
    from aresfetch.retry.outcome import RetriableFailure

logger: logging.Logger = logging.getLogger(__name__)


class ObserverManager:
    """Delivers retry events to an optional observer.

    Delivery is synchronous and best-effort: an exception raised by the
    observer is logged and does not reach the retry loop.

    Args:
        observer: The observer to notify, or None to disable events.
    """

    def __init__(self, observer: RetryObserver | None) -> None:
        self.observer = observer

    def on_retry(
        self,
        outcome: RetriableFailure,
        attempt: int,
        max_retries: int,
        delay: float,
        url: str,
    ) -> None:
        """Notify the observer that a failed attempt will be retried.

        Args:
            outcome: The retriable outcome of the failed attempt.
            attempt: The failed attempt number (0-indexed). The observer
                receives it 1-indexed.
            max_retries: Maximum number of retries.
            delay: The wait in seconds before the next attempt.
            url: The target URL.
        """
        if self.observer is None:
            return

        delay_ms = delay * 1000
        fields: dict[str, Any] = {}
        if outcome.response is not None:
            message = "Request failed, retrying"
            fields["status"] = outcome.response.status_code
        else:
            message = "Network request failed, retrying"
            fields["error"] = str(outcome.error)
        fields.update(
            attempt=attempt + 1,
            max_retries=max_retries,
            delay_ms=round(delay_ms) if math.isfinite(delay_ms) else delay_ms,
            url=url,
        )

        try:
            self.observer.warn(message, fields)
        except Exception:
            logger.exception(f"Retry observer failed while handling event for {url}")
