r"""Per-invocation retry state."""

from __future__ import annotations

__all__ = ["AttemptState"]

from dataclasses import dataclass


@dataclass
class AttemptState:
    """Mutable state owned by a single in-flight invocation.

    A new instance is created for every call to a wrapped transport, so
    concurrent invocations never share it.

    Attributes:
        current_delay: The exponential delay in seconds used for the next
            wait unless the server provides a Retry-After hint.
        attempt_count: The number of retries already performed
            (0 during the initial attempt).

    Example:
        ```pycon
        >>> from aresfetch.retry import AttemptState
        >>> state = AttemptState(current_delay=0.5)
        >>> state.advance(backoff_factor=2.0, max_delay=30.0)
        >>> state
        AttemptState(current_delay=1.0, attempt_count=1)

        ```
    """

    current_delay: float
    attempt_count: int = 0

    def is_exhausted(self, max_retries: int) -> bool:
        """Indicate if no retry budget is left."""
        return self.attempt_count >= max_retries

    def advance(self, backoff_factor: float, max_delay: float) -> None:
        """Move to the next attempt and grow the delay.

        Args:
            backoff_factor: Multiplier applied to the current delay.
            max_delay: Cap for the new delay.
        """
        self.attempt_count += 1
        self.current_delay = min(self.current_delay * backoff_factor, max_delay)
