r"""Shared core logic for retry executors.

This module provides helpers used by both the synchronous and the
asynchronous retry executors, so both loops take exactly the same
decisions.
"""

from __future__ import annotations

__all__ = ["MAX_WAIT", "BaseRetryExecutor", "check_abort"]

import logging
from typing import TYPE_CHECKING

from aresfetch.exceptions import AbortError
from aresfetch.retry.decider import RetryDecider
from aresfetch.retry.manager import ObserverManager
from aresfetch.retry.state import AttemptState
from aresfetch.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from aresfetch.core.config import RetryConfig
    from aresfetch.observer import AbortSignal
    from aresfetch.retry.outcome import RetriableFailure

logger: logging.Logger = logging.getLogger(__name__)

# Longest single wait in seconds, accepted by time.sleep even with a 32-bit time_t
MAX_WAIT = float(2**31 - 1)


def check_abort(abort_signal: AbortSignal | None, url: str, attempt: int) -> None:
    """Raise ``AbortError`` if cancellation was requested.

    Args:
        abort_signal: The optional cancellation flag.
        url: The URL being requested.
        attempt: The failed attempt number (0-indexed).

    Raises:
        AbortError: If the signal is set.
    """
    if abort_signal is not None and abort_signal.is_set():
        logger.debug(f"Request to {url} aborted after {attempt + 1} attempts")
        raise AbortError(url=url, attempt=attempt + 1)


class BaseRetryExecutor:
    """Retry policy shared by the sync and async executors.

    This class owns the components that take the retry decisions; the
    subclasses only add the loop itself, with blocking or cooperative
    waits.

    Attributes:
        config: Retry configuration.
        decider: Logic for classifying each attempt.
        strategy: Strategy for calculating retry delays.
        observer_manager: Manager notifying the configured observer.
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config
        self.decider: RetryDecider = RetryDecider(config.max_retries)
        self.strategy: RetryStrategy = RetryStrategy()
        self.observer_manager: ObserverManager = ObserverManager(config.observer)

    def new_state(self) -> AttemptState:
        """Create the state of a new invocation."""
        return AttemptState(current_delay=self.config.initial_delay)

    def prepare_wait(
        self,
        outcome: RetriableFailure,
        state: AttemptState,
        url: str,
        abort_signal: AbortSignal | None,
    ) -> float:
        """Compute the next wait, honour cancellation, and notify the
        observer.

        Args:
            outcome: The retriable outcome of the last attempt.
            state: The state of the current invocation.
            url: The URL being requested.
            abort_signal: The optional cancellation flag.

        Returns:
            The number of seconds to sleep, clamped to
            ``[0, MAX_WAIT]``.

        Raises:
            AbortError: If the signal is set.
        """
        delay = self.strategy.calculate_delay(state, outcome)
        check_abort(abort_signal, url, state.attempt_count)
        self.observer_manager.on_retry(
            outcome,
            attempt=state.attempt_count,
            max_retries=self.config.max_retries,
            delay=delay,
            url=url,
        )
        reason = (
            f"status {outcome.response.status_code}"
            if outcome.response is not None
            else type(outcome.error).__name__
        )
        logger.debug(
            f"Request to {url} will retry ({reason}), attempt "
            f"{state.attempt_count + 1}/{self.config.max_retries + 1}, waiting {delay:.2f}s"
        )
        return min(max(delay, 0.0), MAX_WAIT)

    def advance(self, state: AttemptState) -> None:
        """Move the invocation to its next attempt."""
        state.advance(self.config.backoff_factor, self.config.max_delay)
