r"""Utility functions for retry delay hints and structured logging."""

from __future__ import annotations

__all__ = ["StructuredFormatter", "log_structured", "parse_retry_after"]

from aresfetch.utils.retry_after import parse_retry_after
from aresfetch.utils.structured_logging import StructuredFormatter, log_structured
