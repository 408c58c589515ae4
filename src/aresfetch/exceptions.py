r"""Exceptions raised by the retry executors.

Exhausted retries never produce a new exception type: the final
response is returned and the final transport error is re-raised as-is.
The only error raised by this package during execution is the
cancellation signal below.
"""

from __future__ import annotations

__all__ = ["AbortError"]


class AbortError(Exception):
    """Raised when a request is cancelled before a retry wait.

    Args:
        url: The URL of the request that was cancelled.
        attempt: The number of attempts performed before cancelling.
        message: The error message.

    Example:
        ```pycon
        >>> from aresfetch.exceptions import AbortError
        >>> error = AbortError(url="https://api.example.com/data", attempt=2)
        >>> str(error)
        'The operation was aborted'
        >>> error.attempt
        2

        ```
    """

    def __init__(
        self,
        url: str | None = None,
        attempt: int | None = None,
        message: str = "The operation was aborted",
    ) -> None:
        super().__init__(message)
        self.url = url
        self.attempt = attempt
