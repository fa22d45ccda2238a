"""Errors raised by the Bybit client."""

from __future__ import annotations


class BybitError(Exception):
    """Base class for every error raised by this package."""


class HttpError(BybitError):
    """The HTTP request failed or the server answered with an error status."""

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"http error: {error}")


class JsonError(BybitError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"json error: {error}")


class ApiError(BybitError):
    """The API answered with a non-zero return code."""

    def __init__(self, code: int, msg: str) -> None:
        self.code = code
        self.msg = msg
        super().__init__(f"api error: {code} {msg}")


class MissingFieldError(BybitError):
    """A field the caller needs was absent from an otherwise valid response."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing field: {field}")