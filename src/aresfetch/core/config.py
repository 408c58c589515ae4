r"""Configuration dataclass and defaults for the retry executors.

This module provides configuration constants and a frozen dataclass
holding the retry policy shared by every invocation of a wrapped
transport.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_FACTOR",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_EXCEPTIONS",
    "RetryConfig",
    "is_retryable_status",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

import httpx

from aresfetch.core.validation import validate_retry_params

if TYPE_CHECKING:
    from aresfetch.observer import RetryObserver


# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Delay in seconds before the first retry
DEFAULT_INITIAL_DELAY = 0.5

# Upper bound in seconds for the exponential delay
DEFAULT_MAX_DELAY = 30.0

# Multiplier applied to the delay after each retry
# With the defaults: 0.5s, 1s, 2s, 4s, ... capped at 30s
DEFAULT_BACKOFF_FACTOR = 2.0

# Exceptions raised by httpx for network-level failures
# (connect/read errors, timeouts, protocol errors)
DEFAULT_RETRY_EXCEPTIONS: tuple[type[Exception], ...] = (httpx.RequestError,)


def is_retryable_status(status_code: int) -> bool:
    """Indicate if an HTTP status code denotes a transient server
    condition.

    Only 429 (Too Many Requests) and the 5xx range are transient. Every
    other status, including the other 4xx codes, is a final answer.

    Args:
        status_code: The HTTP status code to check.

    Returns:
        ``True`` if the status code should trigger a retry.

    Example:
        ```pycon
        >>> from aresfetch.core import is_retryable_status
        >>> is_retryable_status(429)
        True
        >>> is_retryable_status(503)
        True
        >>> is_retryable_status(404)
        False
        >>> is_retryable_status(600)
        False

        ```
    """
    return status_code == 429 or 500 <= status_code < 600


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for the retry executors.

    The configuration is created once, when a transport is wrapped, and is
    shared read-only by every invocation of the wrapper.

    Args:
        max_retries: Maximum number of retry attempts. Must be >= 0.
            Total attempts = max_retries + 1.
        initial_delay: Delay in seconds before the first retry. Must be > 0.
        max_delay: Cap in seconds for the exponential delay.
            Must be > 0 and >= ``initial_delay``.
        backoff_factor: Multiplier applied to the delay after each retry.
            Values <= 1 are accepted but keep the delay constant or let it
            shrink.
        observer: Optional sink notified before every wait.
        retry_exceptions: Exception types raised by the transport that are
            treated as transient network failures.

    Example:
        ```pycon
        >>> from aresfetch.core import RetryConfig
        >>> config = RetryConfig()
        >>> config.max_retries
        3
        >>> config.initial_delay, config.max_delay
        (0.5, 30.0)
        >>> config.merge(max_retries=5).max_retries
        5
        >>> config.max_retries
        3

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    initial_delay: float = DEFAULT_INITIAL_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    backoff_factor: float = DEFAULT_BACKOFF_FACTOR
    observer: RetryObserver | None = None
    retry_exceptions: tuple[type[Exception], ...] = DEFAULT_RETRY_EXCEPTIONS

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_retry_params(
            max_retries=self.max_retries,
            initial_delay=self.initial_delay,
            max_delay=self.max_delay,
        )

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied, so keyword arguments
        left at their ``None`` default keep the current values.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from aresfetch.core import RetryConfig
            >>> config = RetryConfig(max_retries=3)
            >>> config.merge(max_retries=None, max_delay=10.0).max_delay
            10.0

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
