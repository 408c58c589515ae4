r"""Unit tests for RetryConfig and the retryable status helper."""

from __future__ import annotations

import dataclasses

import httpx
import pytest

from aresfetch.core import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_DELAY,
    DEFAULT_MAX_RETRIES,
    RetryConfig,
    is_retryable_status,
)
from aresfetch.observer import LoggingObserver

#################################
#     Tests for RetryConfig     #
#################################


def test_retry_config_defaults() -> None:
    """Test that RetryConfig uses the documented default values."""
    config = RetryConfig()
    assert config.max_retries == DEFAULT_MAX_RETRIES == 3
    assert config.initial_delay == DEFAULT_INITIAL_DELAY == 0.5
    assert config.max_delay == DEFAULT_MAX_DELAY == 30.0
    assert config.backoff_factor == DEFAULT_BACKOFF_FACTOR == 2.0
    assert config.observer is None
    assert config.retry_exceptions == (httpx.RequestError,)


def test_retry_config_custom_values() -> None:
    """Test that RetryConfig accepts custom values."""
    observer = LoggingObserver()
    config = RetryConfig(
        max_retries=0, initial_delay=1.0, max_delay=5.0, backoff_factor=3.0, observer=observer
    )
    assert config.max_retries == 0
    assert config.initial_delay == 1.0
    assert config.max_delay == 5.0
    assert config.backoff_factor == 3.0
    assert config.observer is observer


@pytest.mark.parametrize("backoff_factor", [1.0, 0.5, 0.0])
def test_retry_config_backoff_factor_not_validated(backoff_factor: float) -> None:
    """Test that backoff factors defeating growth are accepted."""
    assert RetryConfig(backoff_factor=backoff_factor).backoff_factor == backoff_factor


def test_retry_config_invalid_max_retries() -> None:
    """Test that RetryConfig validates max_retries."""
    with pytest.raises(ValueError, match=r"max_retries must be >= 0"):
        RetryConfig(max_retries=-1)


def test_retry_config_invalid_max_delay() -> None:
    """Test that RetryConfig validates max_delay against
    initial_delay."""
    with pytest.raises(ValueError, match=r"max_delay must be >= initial_delay"):
        RetryConfig(initial_delay=2.0, max_delay=1.0)


def test_retry_config_is_frozen() -> None:
    """Test that RetryConfig cannot be mutated."""
    config = RetryConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_retries = 10  # type: ignore[misc]


def test_retry_config_merge() -> None:
    """Test that merge overrides values without changing the
    original."""
    config = RetryConfig(max_retries=3)
    merged = config.merge(max_retries=5, max_delay=10.0)
    assert merged.max_retries == 5
    assert merged.max_delay == 10.0
    assert config.max_retries == 3
    assert config.max_delay == 30.0


def test_retry_config_merge_ignores_none() -> None:
    """Test that None overrides keep the current values."""
    config = RetryConfig(max_retries=7)
    assert config.merge(max_retries=None, observer=None) == config


def test_retry_config_merge_validates() -> None:
    """Test that merge validates the new configuration."""
    with pytest.raises(ValueError, match=r"initial_delay must be > 0"):
        RetryConfig().merge(initial_delay=-1.0)


#########################################
#     Tests for is_retryable_status     #
#########################################


@pytest.mark.parametrize("status_code", [429, 500, 502, 503, 504, 599])
def test_is_retryable_status_true(status_code: int) -> None:
    assert is_retryable_status(status_code)


@pytest.mark.parametrize("status_code", [200, 201, 204, 301, 304, 400, 401, 404, 428, 430, 600])
def test_is_retryable_status_false(status_code: int) -> None:
    assert not is_retryable_status(status_code)
