r"""Unit tests for retry parameter validation."""

from __future__ import annotations

import pytest

from aresfetch.core import validate_retry_params

###########################################
#     Tests for validate_retry_params     #
###########################################


@pytest.mark.parametrize(
    ("max_retries", "initial_delay", "max_delay"),
    [(0, 0.5, 30.0), (3, 0.5, 30.0), (10, 1.0, 1.0), (1, 0.001, 0.002)],
)
def test_validate_retry_params_valid(
    max_retries: int, initial_delay: float, max_delay: float
) -> None:
    """Test that valid parameters are accepted."""
    validate_retry_params(max_retries=max_retries, initial_delay=initial_delay, max_delay=max_delay)


@pytest.mark.parametrize("max_retries", [-1, -10])
def test_validate_retry_params_negative_max_retries(max_retries: int) -> None:
    """Test that negative max_retries raises ValueError."""
    with pytest.raises(ValueError, match=r"max_retries must be >= 0"):
        validate_retry_params(max_retries=max_retries, initial_delay=0.5, max_delay=30.0)


@pytest.mark.parametrize("initial_delay", [0, -0.5])
def test_validate_retry_params_non_positive_initial_delay(initial_delay: float) -> None:
    """Test that non-positive initial_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"initial_delay must be > 0"):
        validate_retry_params(max_retries=3, initial_delay=initial_delay, max_delay=30.0)


def test_validate_retry_params_non_positive_max_delay() -> None:
    """Test that non-positive max_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"max_delay must be > 0"):
        validate_retry_params(max_retries=3, initial_delay=0.5, max_delay=0)


def test_validate_retry_params_max_delay_below_initial_delay() -> None:
    """Test that max_delay smaller than initial_delay raises
    ValueError."""
    with pytest.raises(ValueError, match=r"max_delay must be >= initial_delay"):
        validate_retry_params(max_retries=3, initial_delay=5.0, max_delay=1.0)
