from __future__ import annotations

from typing import Any
from typing import Optional


class ApiError(Exception):
    pass


class TransportError(ApiError):
    """The request failed on the wire, or the server answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class ResponseShapeError(ApiError):
    """The response was not JSON, or lacked a field the caller expected."""


class AuthenticationError(ApiError):
    pass


class PagingError(ApiError):
    pass
