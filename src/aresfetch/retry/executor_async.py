r"""Asynchronous retry executor for HTTP requests.

This module provides the AsyncRetryExecutor class that re-issues a
request through an async transport until it gets a final answer. Waits
use ``asyncio.sleep`` so only the current task is suspended.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
from typing import TYPE_CHECKING, Any

from aresfetch.core.config import RetryConfig
from aresfetch.request import to_descriptor_async
from aresfetch.retry.executor_core import BaseRetryExecutor
from aresfetch.retry.outcome import RetriableFailure, TerminalFailure

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from aresfetch.observer import AbortSignal
    from aresfetch.request import RequestInput


class AsyncRetryExecutor(BaseRetryExecutor):
    """Executes async HTTP requests with automatic retry logic.

    This is the asyncio counterpart of ``RetryExecutor`` and takes the
    same decisions. Concurrent calls to ``execute`` are independent: each
    call owns its attempt state and only the configuration is shared.

    Args:
        transport: Coroutine function sending one ``httpx.Request`` and
            returning the ``httpx.Response``, e.g. ``httpx.AsyncClient.send``.
        config: Retry configuration. Defaults to ``RetryConfig()``.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aresfetch.retry import AsyncRetryExecutor
        >>>
        >>> async def main():
        ...     async with httpx.AsyncClient() as client:
        ...         executor = AsyncRetryExecutor(client.send)
        ...         return await executor.execute("https://api.example.com/data")
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        transport: Callable[..., Awaitable[httpx.Response]],
        config: RetryConfig | None = None,
    ) -> None:
        super().__init__(config if config is not None else RetryConfig())
        self.transport = transport

    async def execute(
        self,
        request: RequestInput,
        abort_signal: AbortSignal | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Execute an async request with automatic retry logic.

        Note:
            Cancellation through ``abort_signal`` is only observed before a
            wait. Cancelling the surrounding asyncio task interrupts the
            transport call or the sleep as usual.

        Args:
            request: The request to send: a URL (sent as GET), an
                ``httpx.Request`` or a ``RequestDescriptor``.
            abort_signal: Optional cancellation flag (e.g. ``asyncio.Event``),
                checked before every wait. It is not forwarded to the
                transport.
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
        descriptor = await to_descriptor_async(request)
        state = self.new_state()
        while True:
            response: httpx.Response | None = None
            try:
                response = await self.transport(descriptor.build(), **kwargs)
            except self.config.retry_exceptions as exc:
                outcome = self.decider.evaluate_error(exc, state)
                if isinstance(outcome, TerminalFailure):
                    raise
            else:
                outcome = self.decider.evaluate_response(response, state)
                if not isinstance(outcome, RetriableFailure):
                    return response

            if response is not None:
                await response.aclose()
            delay = self.prepare_wait(outcome, state, descriptor.url, abort_signal)
            await asyncio.sleep(delay)
            self.advance(state)
