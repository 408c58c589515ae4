r"""Synchronous retry executor for HTTP requests.

This module provides the RetryExecutor class that re-issues a request
through a blocking transport until it gets a final answer.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import time
from typing import TYPE_CHECKING, Any

from aresfetch.core.config import RetryConfig
from aresfetch.request import to_descriptor
from aresfetch.retry.executor_core import BaseRetryExecutor
from aresfetch.retry.outcome import RetriableFailure, TerminalFailure

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from aresfetch.observer import AbortSignal
    from aresfetch.request import RequestInput


class RetryExecutor(BaseRetryExecutor):
    """Executes HTTP requests with automatic retry logic.

    The executor calls the transport with a fresh ``httpx.Request`` for
    every attempt and retries 429/5xx responses and transport errors with
    exponential backoff, honouring Retry-After hints. When the retry
    budget is exhausted, the last response is returned or the last error
    is re-raised unchanged.

    Args:
        transport: Function sending one ``httpx.Request`` and returning the
            ``httpx.Response``, e.g. ``httpx.Client.send``.
        config: Retry configuration. Defaults to ``RetryConfig()``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aresfetch.retry import RetryExecutor
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     executor = RetryExecutor(client.send)
        ...     response = executor.execute("https://api.example.com/data")
        ...

        ```
    """

    def __init__(
        self,
        transport: Callable[..., httpx.Response],
        config: RetryConfig | None = None,
    ) -> None:
        super().__init__(config if config is not None else RetryConfig())
        self.transport = transport

    def execute(
        self,
        request: RequestInput,
        abort_signal: AbortSignal | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Execute a request with automatic retry logic.

        Args:
            request: The request to send: a URL (sent as GET), an
                ``httpx.Request`` or a ``RequestDescriptor``.
            abort_signal: Optional cancellation flag, checked before every
                wait. It is not forwarded to the transport.
            **kwargs: Additional keyword arguments passed to the transport
                on every attempt.

        Returns:
            The first response that is not 429/5xx, or the last response if
            the retries are exhausted.

        Raises:
            AbortError: If the signal is set when a wait is about to start.
            Exception: The last transport error if the retries are
                exhausted, or any error not listed in ``retry_exceptions``.
        """
        descriptor = to_descriptor(request)
        state = self.new_state()
        while True:
            response: httpx.Response | None = None
            try:
                response = self.transport(descriptor.build(), **kwargs)
            except self.config.retry_exceptions as exc:
                outcome = self.decider.evaluate_error(exc, state)
                if isinstance(outcome, TerminalFailure):
                    raise
            else:
                outcome = self.decider.evaluate_response(response, state)
                if not isinstance(outcome, RetriableFailure):
                    return response

            if response is not None:
                response.close()
            delay = self.prepare_wait(outcome, state, descriptor.url, abort_signal)
            time.sleep(delay)
            self.advance(state)
