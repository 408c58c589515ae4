r"""Classified results of a single attempt.

Each attempt ends in exactly one of three outcomes:

- ``Success``: a response that is not a transient server condition.
- ``RetriableFailure``: a 429/5xx response or a transport error with
  retry budget left, optionally carrying the server's delay hint.
- ``TerminalFailure``: a transient failure with no retry budget left.
"""

from __future__ import annotations

__all__ = ["Outcome", "RetriableFailure", "Success", "TerminalFailure"]

from dataclasses import dataclass
from typing import Union

import httpx


@dataclass(frozen=True)
class Success:
    """Final response returned to the caller as-is."""

    response: httpx.Response


@dataclass(frozen=True)
class RetriableFailure:
    """Transient failure that will be retried after a wait.

    Attributes:
        response: The retried response, or None on the error path.
        error: The retried transport error, or None on the response path.
        hinted_delay: Delay in seconds requested by a Retry-After header.
    """

    response: httpx.Response | None = None
    error: Exception | None = None
    hinted_delay: float | None = None


@dataclass(frozen=True)
class TerminalFailure:
    """Transient failure with the retry budget exhausted."""

    response: httpx.Response | None = None
    error: Exception | None = None


Outcome = Union[Success, RetriableFailure, TerminalFailure]
