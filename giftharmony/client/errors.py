"""Errors raised by the API client."""

from __future__ import annotations


class RequestFailed(Exception):
    """A call did not produce a successful response.

    ``str(exc)`` is the server-supplied ``message`` when the error body had
    one, otherwise ``"HTTP error! status: <code>"``. ``status`` is the HTTP
    status code, or ``None`` when no response was received.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class NetworkError(RequestFailed):
    """The transport failed before any HTTP response arrived."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status=None)
