"""
Abstract interfaces for the SQL client.

These protocols define the contracts the request builders depend on: a filter
predicate that can render itself, and an HTTP executor that performs a request.
"""

from typing import Any, Awaitable, Protocol

from es_sql.core.models import HttpResponse, PerformRequestOptions


class IQuery(Protocol):
    """
    A filter predicate attached to a SQL request.

    Implementations are opaque to the builders; only their source is used.
    """

    def source(self) -> Any:
        """
        Return the JSON-serializable representation of the predicate.

        Raises:
            Exception: Any failure while rendering the predicate
        """
        ...


class IHttpExecutor(Protocol):
    """
    Perform an HTTP request against Elasticsearch.

    Connection handling, timeouts and retries are owned by the implementation.
    """

    def perform_request(self, options: PerformRequestOptions) -> HttpResponse:
        """
        Execute the request described by options.

        Args:
            options: Method, path, query parameters, body, headers and timeout

        Returns:
            The raw HTTP response
        """
        ...


class IAsyncHttpExecutor(Protocol):
    """Async counterpart of IHttpExecutor."""

    def perform_request(self, options: PerformRequestOptions) -> Awaitable[HttpResponse]:
        """Execute the request described by options."""
        ...
