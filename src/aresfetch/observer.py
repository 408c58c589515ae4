r"""Observer interface for retry notifications.

An observer is a fire-and-forget sink: it is told about every retried
failure just before the executor waits, and nothing it does can change
the retry decision.
"""

from __future__ import annotations

__all__ = ["AbortSignal", "LoggingObserver", "RetryObserver"]

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from aresfetch.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class RetryObserver(Protocol):
    """Sink receiving one event per retried failure.

    The ``fields`` mapping contains ``status`` (retried response) or
    ``error`` (retried transport error), plus ``attempt`` (1-based),
    ``max_retries``, ``delay_ms`` and ``url``.
    """

    def warn(self, message: str, fields: Mapping[str, Any]) -> None: ...


@runtime_checkable
class AbortSignal(Protocol):
    """Cancellation flag checked before every retry wait.

    ``threading.Event`` and ``asyncio.Event`` both satisfy this protocol.
    """

    def is_set(self) -> bool: ...


class LoggingObserver:
    """Observer forwarding retry events to a standard library logger.

    Events are logged at WARNING level and the event fields are attached
    to the log record through ``extra``, so they show up as top-level keys
    when the handler uses ``StructuredFormatter``.

    Args:
        logger: The logger to write to. Defaults to the ``aresfetch.retry``
            logger.

    Example:
        ```pycon
        >>> from aresfetch import LoggingObserver, create_retry_fetch
        >>> observer = LoggingObserver()
        >>> fetch = create_retry_fetch(lambda request: ..., observer=observer)

        ```
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger if logger is not None else logging.getLogger("aresfetch.retry")

    def warn(self, message: str, fields: Mapping[str, Any]) -> None:
        log_structured(self.logger, logging.WARNING, message, **fields)
