from __future__ import annotations

from aresfetch.exceptions import AbortError


def test_abort_error_defaults() -> None:
    error = AbortError()
    assert str(error) == "The operation was aborted"
    assert error.url is None
    assert error.attempt is None


def test_abort_error_details() -> None:
    error = AbortError(url="https://example.com", attempt=3, message="cancelled")
    assert str(error) == "cancelled"
    assert error.url == "https://example.com"
    assert error.attempt == 3
