r"""aresfetch - Retrying wrapper for single-request HTTP transports.

This package turns any function that sends one HTTP request into an
equivalent function that retries transient failures. Built on top of
the httpx library, it retries 429 and 5xx responses as well as network
errors with exponential backoff, honours server-provided Retry-After
hints, and stops early when the caller cancels.

Key Features:
    - Retries on 429 Too Many Requests, 5xx responses and httpx transport errors
    - Exponential backoff with configurable initial delay, factor and cap
    - Retry-After header support (integer seconds)
    - Cancellation through an abort signal checked before every wait
    - Sync and async executors, plus httpx transports for existing clients
    - Observer hook for structured retry events (logging, metrics, alerting)

Example:
    ```pycon
    >>> import httpx
    >>> from aresfetch import create_retry_fetch
    >>> with httpx.Client() as client:  # doctest: +SKIP
    ...     fetch = create_retry_fetch(client.send, max_retries=5, initial_delay=1.0)
    ...     response = fetch("https://api.example.com/data")
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "AbortError",
    "AbortSignal",
    "AsyncRetryExecutor",
    "AsyncRetryTransport",
    "LoggingObserver",
    "RequestDescriptor",
    "RetryConfig",
    "RetryExecutor",
    "RetryObserver",
    "RetryTransport",
    "__version__",
    "create_retry_fetch",
    "create_retry_fetch_async",
]

from importlib.metadata import PackageNotFoundError, version

from aresfetch.core.config import RetryConfig
from aresfetch.exceptions import AbortError
from aresfetch.fetch import create_retry_fetch, create_retry_fetch_async
from aresfetch.observer import AbortSignal, LoggingObserver, RetryObserver
from aresfetch.request import RequestDescriptor
from aresfetch.retry import AsyncRetryExecutor, RetryExecutor
from aresfetch.transport import AsyncRetryTransport, RetryTransport

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
