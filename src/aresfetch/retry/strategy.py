r"""Retry strategy for calculating the wait before the next attempt."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aresfetch.retry.outcome import RetriableFailure
    from aresfetch.retry.state import AttemptState

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Strategy for calculating retry delays.

    The wait is the exponential delay tracked by the attempt state,
    unless the server sent a Retry-After hint, which replaces it. A hint
    is not capped by ``max_delay`` and does not alter the exponential
    progression of later attempts.

    Example:
        ```pycon
        >>> from aresfetch.retry import AttemptState, RetryStrategy
        >>> from aresfetch.retry.outcome import RetriableFailure
        >>> strategy = RetryStrategy()
        >>> state = AttemptState(current_delay=4.0)
        >>> strategy.calculate_delay(state, RetriableFailure())
        4.0
        >>> strategy.calculate_delay(state, RetriableFailure(hinted_delay=2.0))
        2.0

        ```
    """

    def calculate_delay(self, state: AttemptState, outcome: RetriableFailure) -> float:
        """Calculate the delay in seconds before the next attempt.

        Args:
            state: The state of the current invocation.
            outcome: The retriable outcome of the last attempt.

        Returns:
            The delay in seconds. May be zero or negative if the server
            sent such a Retry-After value.
        """
        if outcome.hinted_delay is not None:
            logger.debug(f"Using Retry-After header value: {outcome.hinted_delay:.2f}s")
            return outcome.hinted_delay
        return state.current_delay
