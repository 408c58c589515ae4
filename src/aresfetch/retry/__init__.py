r"""Retry package implementing the retry/backoff decision loop.

Public API:
    - AttemptState: Per-invocation mutable state
    - RetryDecider: Classification of each attempt
    - RetryStrategy: Calculation of the wait before the next attempt
    - ObserverManager: Delivery of retry events to the observer
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptState",
    "ObserverManager",
    "RetriableFailure",
    "RetryDecider",
    "RetryExecutor",
    "RetryStrategy",
    "Success",
    "TerminalFailure",
]

from aresfetch.retry.decider import RetryDecider
from aresfetch.retry.executor import RetryExecutor
from aresfetch.retry.executor_async import AsyncRetryExecutor
from aresfetch.retry.manager import ObserverManager
from aresfetch.retry.outcome import RetriableFailure, Success, TerminalFailure
from aresfetch.retry.state import AttemptState
from aresfetch.retry.strategy import RetryStrategy
