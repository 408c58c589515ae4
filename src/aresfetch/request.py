r"""Reusable request descriptors.

An ``httpx.Request`` is a single-use object once its body stream has
been consumed, so the executors never hand the caller's request to the
transport directly. Instead the request is captured once as an
immutable ``RequestDescriptor`` and a fresh ``httpx.Request`` is built
from it for every attempt.
"""

from __future__ import annotations

__all__ = ["RequestDescriptor", "RequestInput", "to_descriptor", "to_descriptor_async"]

from dataclasses import dataclass, field
from typing import Any, Union

import httpx

# Recomputed by httpx from the captured body on every attempt
_FRAMING_HEADERS = frozenset({"content-length", "transfer-encoding"})


@dataclass(frozen=True)
class RequestDescriptor:
    """Immutable description of an HTTP request.

    Args:
        method: The HTTP method (e.g., "GET", "POST").
        url: The target URL.
        headers: Request headers as a sequence of ``(name, value)`` pairs.
        content: The raw request body, or None for an empty body.
        extensions: httpx request extensions (e.g. ``timeout``) copied onto
            every materialized request.

    Example:
        ```pycon
        >>> from aresfetch.request import RequestDescriptor
        >>> descriptor = RequestDescriptor(
        ...     method="POST", url="https://api.example.com/items", content=b'{"a": 1}'
        ... )
        >>> first = descriptor.build()
        >>> second = descriptor.build()
        >>> first is second
        False
        >>> second.content
        b'{"a": 1}'

        ```
    """

    method: str
    url: str
    headers: tuple[tuple[str, str], ...] = ()
    content: bytes | None = None
    extensions: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_request(cls, request: httpx.Request) -> RequestDescriptor:
        """Capture an ``httpx.Request``, reading its body into memory.

        Args:
            request: The request to capture. Its body must be readable
                synchronously.

        Returns:
            The descriptor equivalent to ``request``.
        """
        return cls._from_read_request(request, request.read())

    @classmethod
    async def from_request_async(cls, request: httpx.Request) -> RequestDescriptor:
        """Capture an ``httpx.Request`` whose body may be an async stream.

        Args:
            request: The request to capture.

        Returns:
            The descriptor equivalent to ``request``.
        """
        return cls._from_read_request(request, await request.aread())

    @classmethod
    def _from_read_request(cls, request: httpx.Request, content: bytes) -> RequestDescriptor:
        return cls(
            method=request.method,
            url=str(request.url),
            headers=tuple(
                (name, value)
                for name, value in request.headers.multi_items()
                if name.lower() not in _FRAMING_HEADERS
            ),
            content=content or None,
            extensions=dict(request.extensions),
        )

    def build(self) -> httpx.Request:
        """Materialize a fresh ``httpx.Request`` for one attempt."""
        return httpx.Request(
            self.method,
            self.url,
            headers=list(self.headers),
            content=self.content,
            extensions=dict(self.extensions),
        )


RequestInput = Union[str, httpx.URL, httpx.Request, RequestDescriptor]


def to_descriptor(request: RequestInput) -> RequestDescriptor:
    r"""Convert any supported request input to a descriptor.

    Strings and ``httpx.URL`` objects are treated as GET requests.

    Args:
        request: A URL, an ``httpx.Request`` or a descriptor.

    Returns:
        The request descriptor.

    Raises:
        TypeError: If the input type is not supported.

    Example:
        ```pycon
        >>> from aresfetch.request import to_descriptor
        >>> to_descriptor("https://api.example.com/data").method
        'GET'

        ```
    """
    if isinstance(request, RequestDescriptor):
        return request
    if isinstance(request, httpx.Request):
        return RequestDescriptor.from_request(request)
    if isinstance(request, (str, httpx.URL)):
        return RequestDescriptor(method="GET", url=str(request))
    msg = f"Unsupported request type: {type(request).__name__}"
    raise TypeError(msg)


async def to_descriptor_async(request: RequestInput) -> RequestDescriptor:
    r"""Async counterpart of ``to_descriptor`` for streamed request
    bodies.

    Args:
        request: A URL, an ``httpx.Request`` or a descriptor.

    Returns:
        The request descriptor.

    Raises:
        TypeError: If the input type is not supported.
    """
    if isinstance(request, httpx.Request):
        return await RequestDescriptor.from_request_async(request)
    return to_descriptor(request)
