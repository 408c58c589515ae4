r"""httpx transports applying the retry policy to every request.

These transports wrap another httpx transport, so any ``httpx.Client``
or ``httpx.AsyncClient`` can retry transparently:

```python
import httpx
from aresfetch import RetryTransport

with httpx.Client(transport=RetryTransport(max_retries=5)) as client:
    response = client.get("https://api.example.com/data")
```

A per-request cancellation flag can be passed through the
``"abort_signal"`` request extension.
"""

from __future__ import annotations

__all__ = ["ABORT_SIGNAL_EXTENSION", "AsyncRetryTransport", "RetryTransport"]

from typing import Any

import httpx

from aresfetch.core.config import RetryConfig
from aresfetch.retry import AsyncRetryExecutor, RetryExecutor

# Name of the request extension carrying the optional abort signal
ABORT_SIGNAL_EXTENSION = "abort_signal"


class RetryTransport(httpx.BaseTransport):
    """Synchronous httpx transport with automatic retry logic.

    Args:
        transport: The transport sending each attempt. Defaults to a new
            ``httpx.HTTPTransport``.
        config: Base retry configuration. Defaults to ``RetryConfig()``.
        **overrides: Retry parameters overriding ``config``
            (e.g. ``max_retries=5``).

    Example:
        ```pycon
        >>> import httpx
        >>> from aresfetch import RetryTransport
        >>> inner = httpx.MockTransport(lambda request: httpx.Response(200))
        >>> with httpx.Client(transport=RetryTransport(inner, max_retries=1)) as client:
        ...     client.get("https://api.example.com/data").status_code
        ...
        200

        ```
    """

    def __init__(
        self,
        transport: httpx.BaseTransport | None = None,
        config: RetryConfig | None = None,
        **overrides: Any,
    ) -> None:
        self._transport = transport if transport is not None else httpx.HTTPTransport()
        self._executor = RetryExecutor(
            self._transport.handle_request,
            (config if config is not None else RetryConfig()).merge(**overrides),
        )

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self._executor.execute(
            request, abort_signal=request.extensions.get(ABORT_SIGNAL_EXTENSION)
        )

    def close(self) -> None:
        self._transport.close()


class AsyncRetryTransport(httpx.AsyncBaseTransport):
    """Asynchronous httpx transport with automatic retry logic.

    Args:
        transport: The transport sending each attempt. Defaults to a new
            ``httpx.AsyncHTTPTransport``.
        config: Base retry configuration. Defaults to ``RetryConfig()``.
        **overrides: Retry parameters overriding ``config``.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        config: RetryConfig | None = None,
        **overrides: Any,
    ) -> None:
        self._transport = transport if transport is not None else httpx.AsyncHTTPTransport()
        self._executor = AsyncRetryExecutor(
            self._transport.handle_async_request,
            (config if config is not None else RetryConfig()).merge(**overrides),
        )

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self._executor.execute(
            request, abort_signal=request.extensions.get(ABORT_SIGNAL_EXTENSION)
        )

    async def aclose(self) -> None:
        await self._transport.aclose()
