r"""Retry decision logic for classifying the outcome of an attempt.

This module provides the RetryDecider class that maps a response or a
transport error to a ``Success``, ``RetriableFailure`` or
``TerminalFailure`` outcome.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

from aresfetch.core.config import is_retryable_status
from aresfetch.retry.outcome import RetriableFailure, Success, TerminalFailure
from aresfetch.utils.retry_after import parse_retry_after

if TYPE_CHECKING:
    import httpx

    from aresfetch.retry.outcome import Outcome
    from aresfetch.retry.state import AttemptState

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether an attempt should be retried.

    Args:
        max_retries: Maximum number of retries.

    Example:
        ```pycon
        >>> import httpx
        >>> from aresfetch.retry import AttemptState, RetryDecider
        >>> decider = RetryDecider(max_retries=3)
        >>> state = AttemptState(current_delay=0.5)
        >>> decider.evaluate_response(httpx.Response(404), state)
        Success(response=<Response [404 Not Found]>)
        >>> decider.evaluate_response(httpx.Response(429, headers={"Retry-After": "2"}), state)
        RetriableFailure(response=<Response [429 Too Many Requests]>, error=None, hinted_delay=2.0)

        ```
    """

    def __init__(self, max_retries: int) -> None:
        self.max_retries = max_retries

    def evaluate_response(self, response: httpx.Response, state: AttemptState) -> Outcome:
        """Classify a response returned by the transport.

        Args:
            response: The HTTP response to evaluate.
            state: The state of the current invocation.

        Returns:
            ``Success`` for any status other than 429/5xx,
            ``TerminalFailure`` if the retry budget is exhausted,
            ``RetriableFailure`` otherwise.
        """
        if not is_retryable_status(response.status_code):
            return Success(response=response)
        if state.is_exhausted(self.max_retries):
            logger.debug(
                f"Status {response.status_code} after {state.attempt_count + 1} attempts, "
                "retries exhausted"
            )
            return TerminalFailure(response=response)
        return RetriableFailure(
            response=response,
            hinted_delay=parse_retry_after(response.headers.get("Retry-After")),
        )

    def evaluate_error(self, error: Exception, state: AttemptState) -> Outcome:
        """Classify a transport error.

        Transport errors carry no status code and are always transient.

        Args:
            error: The exception raised by the transport.
            state: The state of the current invocation.

        Returns:
            ``TerminalFailure`` if the retry budget is exhausted,
            ``RetriableFailure`` otherwise.
        """
        if state.is_exhausted(self.max_retries):
            logger.debug(
                f"{type(error).__name__} after {state.attempt_count + 1} attempts, "
                "retries exhausted"
            )
            return TerminalFailure(error=error)
        return RetriableFailure(error=error)
