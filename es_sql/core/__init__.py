"""Core interfaces and models for the SQL client."""

from es_sql.core.interfaces import (
    IQuery,
    IHttpExecutor,
    IAsyncHttpExecutor,
)
from es_sql.core.models import (
    PerformRequestOptions,
    HttpResponse,
    SqlCursorBody,
    SqlRequestBody,
    Column,
    SqlQueryResponse,
)

__all__ = [
    "IQuery",
    "IHttpExecutor",
    "IAsyncHttpExecutor",
    "PerformRequestOptions",
    "HttpResponse",
    "SqlCursorBody",
    "SqlRequestBody",
    "Column",
    "SqlQueryResponse",
]
