r"""Parameter validation utilities for the retry configuration.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used by the retry
executors.
"""

from __future__ import annotations

__all__ = ["validate_retry_params"]


def validate_retry_params(
    max_retries: int,
    initial_delay: float,
    max_delay: float,
) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retry attempts for failed requests.
            Must be >= 0. A value of 0 means no retries (only the initial attempt).
        initial_delay: Delay in seconds before the first retry. Must be > 0.
        max_delay: Upper bound in seconds for the exponential delay.
            Must be > 0 and >= ``initial_delay``.

    Raises:
        ValueError: If max_retries is negative, if a delay is non-positive,
            or if max_delay is smaller than initial_delay.

    Example:
        ```pycon
        >>> from aresfetch.core import validate_retry_params
        >>> validate_retry_params(max_retries=3, initial_delay=0.5, max_delay=30.0)
        >>> validate_retry_params(max_retries=0, initial_delay=1.0, max_delay=1.0)
        >>> validate_retry_params(max_retries=-1, initial_delay=0.5, max_delay=30.0)
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if initial_delay <= 0:
        msg = f"initial_delay must be > 0, got {initial_delay}"
        raise ValueError(msg)
    if max_delay <= 0:
        msg = f"max_delay must be > 0, got {max_delay}"
        raise ValueError(msg)
    if max_delay < initial_delay:
        msg = f"max_delay must be >= initial_delay ({initial_delay}), got {max_delay}"
        raise ValueError(msg)
