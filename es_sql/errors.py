"""
Exception types raised by the SQL client.

Transport exceptions from httpx or the elasticsearch client are not wrapped;
they reach the caller unchanged.
"""

from typing import Any, Dict, Optional


class EsSqlError(Exception):
    """Base class for errors raised by this package."""


class SqlValidationError(EsSqlError, ValueError):
    """A mandatory request field is missing. Raised before any network call."""


class FilterSerializationError(EsSqlError):
    """A filter predicate failed to produce its source."""


class ResponseDecodeError(EsSqlError):
    """The SQL response body could not be decoded."""

    def __init__(self, message: str, body: bytes = b""):
        super().__init__(message)
        self.body = body


class ApiError(EsSqlError):
    """
    Non-2xx response returned by Elasticsearch.

    Args:
        status_code: HTTP status of the response
        body: Raw response body
        error: The "error" object of the Elasticsearch error envelope, if any
    """

    def __init__(
        self,
        status_code: int,
        body: bytes = b"",
        error: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.error = error or {}
        super().__init__(self._format_message())

    @property
    def error_type(self) -> Optional[str]:
        return self.error.get("type")

    @property
    def reason(self) -> Optional[str]:
        return self.error.get("reason")

    def _format_message(self) -> str:
        if self.error_type or self.reason:
            return f"elastic: Error {self.status_code} ({self.error_type}): {self.reason}"
        return f"elastic: Error {self.status_code}"
