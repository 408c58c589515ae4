r"""Shared test helpers for the retry executor tests."""

from __future__ import annotations

__all__ = ["TEST_URL", "make_response", "sleep_delays"]

from typing import TYPE_CHECKING
from unittest.mock import Mock

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

TEST_URL = "https://api.example.com/data"


def make_response(status_code: int, headers: Mapping[str, str] | None = None) -> Mock:
    """Create a mock httpx.Response with the given status and
    headers."""
    return Mock(spec=httpx.Response, status_code=status_code, headers=httpx.Headers(headers))


def sleep_delays(mock_sleep: Mock) -> list[float]:
    """Return the delays passed to a patched sleep function."""
    return [call.args[0] for call in mock_sleep.call_args_list]
