r"""Unit tests for Retry-After header parsing utilities."""

from __future__ import annotations

import pytest

from aresfetch.utils import parse_retry_after

#######################################
#     Tests for parse_retry_after     #
#######################################


@pytest.mark.parametrize(
    ("header", "seconds"),
    [("1", 1.0), ("0", 0.0), ("2", 2.0), ("120", 120.0), (" 30 ", 30.0), ("-5", -5.0)],
)
def test_parse_retry_after_integer(header: str, seconds: float) -> None:
    """Test parsing Retry-After header with integer seconds."""
    assert parse_retry_after(header) == seconds


@pytest.mark.parametrize(
    "header",
    [
        None,
        "",
        "invalid",
        "not a number",
        "1.5",
        "1.2.3",
        "1_000",
        "\u0663",
        "Wed, 21 Oct 2015 07:28:00 GMT",
    ],
)
def test_parse_retry_after_none(header: str | None) -> None:
    """Test that missing or non-integer values are ignored."""
    assert parse_retry_after(header) is None


def test_parse_retry_after_beyond_float_range() -> None:
    """Test that a digit string too long for a float does not raise."""
    assert parse_retry_after("9" * 5000) == float("inf")
