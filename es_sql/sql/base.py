"""
Shared plumbing for the SQL request builders.

Holds the transport-level options (pretty, human, error_trace, filter_path,
headers) and the body fields common to the query and translate endpoints.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, TypeVar, Union

from es_sql.core.interfaces import IAsyncHttpExecutor, IHttpExecutor, IQuery
from es_sql.core.models import HttpResponse, PerformRequestOptions, SqlRequestBody
from es_sql.errors import FilterSerializationError

logger = logging.getLogger(__name__)

HeaderValues = Union[str, Sequence[str]]
S = TypeVar("S", bound="SqlServiceBase")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


class SqlServiceBase(ABC):
    """
    Base class of the SQL request builders.

    A builder serves exactly one logical request. Setters mutate the builder
    and return it so calls can be chained.
    """

    def __init__(self, executor: Union[IHttpExecutor, IAsyncHttpExecutor]):
        """
        Initialize the builder.

        Args:
            executor: HTTP executor used to send the request
        """
        self.executor = executor

        self._pretty: Optional[bool] = None
        self._human: Optional[bool] = None
        self._error_trace: Optional[bool] = None
        self._filter_path: List[str] = []
        self._headers: Dict[str, List[str]] = {}

        self._filter_clauses: List[IQuery] = []
        self._fetch_size = 0
        self._sql = ""
        self._request_timeout = ""
        self._page_timeout = ""
        self._time_zone = ""
        self._field_multi_value_leniency = False

    # Transport options

    def pretty(self: S, pretty: bool) -> S:
        """Ask Elasticsearch to return a formatted JSON response."""
        self._pretty = pretty
        return self

    def human(self: S, human: bool) -> S:
        """Ask for human readable values in the response, e.g. "7.5mb"."""
        self._human = human
        return self

    def error_trace(self: S, error_trace: bool) -> S:
        """Include the stack trace of returned errors."""
        self._error_trace = error_trace
        return self

    def filter_path(self: S, *filter_path: str) -> S:
        """Set the filters used to reduce the response."""
        self._filter_path = list(filter_path)
        return self

    def header(self: S, name: str, value: str) -> S:
        """Add a value to a request header."""
        self._headers.setdefault(name, []).append(value)
        return self

    def headers(self: S, headers: Mapping[str, HeaderValues]) -> S:
        """Replace all request headers."""
        self._headers = {
            name: [values] if isinstance(values, str) else list(values)
            for name, values in headers.items()
        }
        return self

    # Body fields

    def sql(self: S, sql: str) -> S:
        self._sql = sql
        return self

    def filter(self: S, *filters: IQuery) -> S:
        """Append filter predicates."""
        self._filter_clauses.extend(filters)
        return self

    def fetch_size(self: S, size: int) -> S:
        self._fetch_size = size
        return self

    def request_timeout(self: S, timeout: str) -> S:
        self._request_timeout = timeout
        return self

    def page_timeout(self: S, timeout: str) -> S:
        self._page_timeout = timeout
        return self

    def time_zone(self: S, zone: str) -> S:
        self._time_zone = zone
        return self

    def field_multi_value_leniency(self: S, leniency: bool) -> S:
        self._field_multi_value_leniency = leniency
        return self

    # Request building

    def validate(self) -> None:
        """Check pre-conditions. Body fields are checked by build_body()."""

    def _sql_body(self) -> SqlRequestBody:
        """Build the SQL body from the configured fields, omitting defaults."""
        return SqlRequestBody(
            query=self._sql,
            fetch_size=self._fetch_size if self._fetch_size > 0 else None,
            page_timeout=self._page_timeout or None,
            request_timeout=self._request_timeout or None,
            time_zone=self._time_zone or None,
            field_multi_value_leniency=self._field_multi_value_leniency or None,
            filter=self._filter_source(),
        )

    def _filter_source(self) -> Any:
        """Render the filters: one is inlined, several become a list."""
        if len(self._filter_clauses) == 1:
            return self._render_filter(self._filter_clauses[0])
        if len(self._filter_clauses) > 1:
            return [self._render_filter(clause) for clause in self._filter_clauses]
        return None

    @staticmethod
    def _render_filter(clause: IQuery) -> Any:
        try:
            return clause.source()
        except Exception as e:
            raise FilterSerializationError(
                f"failed to serialize filter {type(clause).__name__}: {e}"
            ) from e

    def _url_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self._pretty is not None:
            params["pretty"] = _format_bool(self._pretty)
        if self._human is not None:
            params["human"] = _format_bool(self._human)
        if self._error_trace is not None:
            params["error_trace"] = _format_bool(self._error_trace)
        if self._filter_path:
            params["filter_path"] = ",".join(self._filter_path)
        return params

    @abstractmethod
    def build_url(self) -> Tuple[str, Dict[str, str]]:
        """Return the endpoint path and query string parameters."""

    @abstractmethod
    def build_body(self) -> Dict[str, Any]:
        """Return the JSON request body."""

    def _request_options(self, timeout: Optional[float]) -> PerformRequestOptions:
        self.validate()
        path, params = self.build_url()
        body = self.build_body()
        logger.debug("POST %s params=%s body=%s", path, params, body)
        return PerformRequestOptions(
            method="POST",
            path=path,
            params=params,
            body=body,
            headers=self._headers,
            timeout=timeout,
        )

    def _perform(self, timeout: Optional[float]) -> HttpResponse:
        options = self._request_options(timeout)
        try:
            response = self.executor.perform_request(options)
        except Exception as e:
            logger.warning("POST %s failed: %s", options.path, e)
            raise

        if inspect.isawaitable(response):
            close = getattr(response, "close", None)
            if close is not None:
                close()
            raise TypeError(
                f"{type(self.executor).__name__} is asynchronous; use execute_async()"
            )
        return response

    async def _perform_async(self, timeout: Optional[float]) -> HttpResponse:
        options = self._request_options(timeout)
        try:
            return await self.executor.perform_request(options)
        except Exception as e:
            logger.warning("POST %s failed: %s", options.path, e)
            raise
