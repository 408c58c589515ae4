r"""Retry-After header parsing utilities.

This module provides the function used to extract a server-provided
delay hint from an HTTP response.
"""

from __future__ import annotations

__all__ = ["parse_retry_after"]

import logging
import re

logger: logging.Logger = logging.getLogger(__name__)

# RFC 9110 delay-seconds, optionally signed; ASCII digits only
_DELAY_SECONDS = re.compile(r"[+-]?[0-9]+")


def parse_retry_after(retry_after_header: str | None) -> float | None:
    """Parse the Retry-After header value from an HTTP response.

    Only the delay-seconds form (e.g. ``"120"``) is honoured. Any other
    value, including the HTTP-date form and fractional numbers, is
    ignored so the caller falls back to its exponential delay. Zero and
    negative values are returned as-is.

    Args:
        retry_after_header: The value of the Retry-After header as a string,
            or None if the header is not present in the response.

    Returns:
        The number of seconds to wait before retrying, or None if the
        header is absent or is not an integer. Values beyond the float
        range are returned as ``inf``.

    Example:
        ```pycon
        >>> from aresfetch.utils import parse_retry_after
        >>> parse_retry_after("120")
        120.0
        >>> parse_retry_after("0")
        0.0
        >>> parse_retry_after(None) is None
        True
        >>> parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") is None
        True

        ```
    """
    if retry_after_header is None:
        return None
    value = retry_after_header.strip()
    if _DELAY_SECONDS.fullmatch(value) is None:
        logger.debug(f"Ignoring non-integer Retry-After header: {retry_after_header!r}")
        return None
    return float(value)
