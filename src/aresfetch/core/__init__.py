r"""Configuration and validation shared by the sync and async
executors."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_FACTOR",
    "DEFAULT_INITIAL_DELAY",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_EXCEPTIONS",
    "RetryConfig",
    "is_retryable_status",
    "validate_retry_params",
]

from aresfetch.core.config import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_DELAY,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_EXCEPTIONS,
    RetryConfig,
    is_retryable_status,
)
from aresfetch.core.validation import validate_retry_params
