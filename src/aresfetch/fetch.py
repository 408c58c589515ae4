r"""Factories wrapping a single-request transport with the retry
policy."""

from __future__ import annotations

__all__ = ["create_retry_fetch", "create_retry_fetch_async"]

from typing import TYPE_CHECKING

from aresfetch.core.config import RetryConfig
from aresfetch.retry import AsyncRetryExecutor, RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from aresfetch.observer import RetryObserver


def _resolve_config(
    config: RetryConfig | None,
    max_retries: int | None,
    initial_delay: float | None,
    max_delay: float | None,
    backoff_factor: float | None,
    observer: RetryObserver | None,
) -> RetryConfig:
    return (config if config is not None else RetryConfig()).merge(
        max_retries=max_retries,
        initial_delay=initial_delay,
        max_delay=max_delay,
        backoff_factor=backoff_factor,
        observer=observer,
    )


def create_retry_fetch(
    transport: Callable[..., httpx.Response],
    config: RetryConfig | None = None,
    *,
    max_retries: int | None = None,
    initial_delay: float | None = None,
    max_delay: float | None = None,
    backoff_factor: float | None = None,
    observer: RetryObserver | None = None,
) -> Callable[..., httpx.Response]:
    r"""Create a function that sends requests with automatic retries.

    The returned function has the signature
    ``fetch(request, abort_signal=None, **kwargs) -> httpx.Response``.
    It retries 429/5xx responses and transport errors with exponential
    backoff, honours Retry-After hints, and raises ``AbortError`` if
    ``abort_signal`` is set when a wait is about to start.

    Args:
        transport: Function sending one ``httpx.Request``, e.g.
            ``httpx.Client.send``.
        config: Base retry configuration. Defaults to ``RetryConfig()``.
        max_retries: Overrides ``config.max_retries`` if provided.
        initial_delay: Overrides ``config.initial_delay`` (seconds) if provided.
        max_delay: Overrides ``config.max_delay`` (seconds) if provided.
        backoff_factor: Overrides ``config.backoff_factor`` if provided.
        observer: Overrides ``config.observer`` if provided.

    Returns:
        The retrying fetch function.

    Raises:
        ValueError: If the resulting configuration is invalid.

    Example:
        ```pycon
        >>> import httpx
        >>> from aresfetch import create_retry_fetch
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     fetch = create_retry_fetch(client.send, max_retries=5)
        ...     response = fetch("https://api.example.com/data")
        ...

        ```
    """
    executor = RetryExecutor(
        transport,
        _resolve_config(config, max_retries, initial_delay, max_delay, backoff_factor, observer),
    )
    return executor.execute


def create_retry_fetch_async(
    transport: Callable[..., Awaitable[httpx.Response]],
    config: RetryConfig | None = None,
    *,
    max_retries: int | None = None,
    initial_delay: float | None = None,
    max_delay: float | None = None,
    backoff_factor: float | None = None,
    observer: RetryObserver | None = None,
) -> Callable[..., Awaitable[httpx.Response]]:
    r"""Create a coroutine function that sends requests with automatic
    retries.

    This is the asyncio counterpart of ``create_retry_fetch``; see its
    documentation for the retry behavior and the arguments.

    Args:
        transport: Coroutine function sending one ``httpx.Request``, e.g.
            ``httpx.AsyncClient.send``.
        config: Base retry configuration. Defaults to ``RetryConfig()``.
        max_retries: Overrides ``config.max_retries`` if provided.
        initial_delay: Overrides ``config.initial_delay`` (seconds) if provided.
        max_delay: Overrides ``config.max_delay`` (seconds) if provided.
        backoff_factor: Overrides ``config.backoff_factor`` if provided.
        observer: Overrides ``config.observer`` if provided.

    Returns:
        The retrying fetch coroutine function.

    Raises:
        ValueError: If the resulting configuration is invalid.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aresfetch import create_retry_fetch_async
        >>>
        >>> async def main():
        ...     async with httpx.AsyncClient() as client:
        ...         fetch = create_retry_fetch_async(client.send)
        ...         return await fetch("https://api.example.com/data")
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """
    executor = AsyncRetryExecutor(
        transport,
        _resolve_config(config, max_retries, initial_delay, max_delay, backoff_factor, observer),
    )
    return executor.execute
