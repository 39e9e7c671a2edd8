"""
SQL query service.

Runs a SQL statement, or fetches the next page of a previous one through its
cursor, against the Elasticsearch SQL endpoint.
See https://www.elastic.co/guide/en/elasticsearch/reference/current/sql-search-api.html.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from es_sql.core.models import HttpResponse, SqlCursorBody, SqlQueryResponse
from es_sql.errors import ResponseDecodeError, SqlValidationError
from es_sql.sql.base import SqlServiceBase

logger = logging.getLogger(__name__)


class SqlQueryService(SqlServiceBase):
    """
    Builds and executes a request against POST /_sql.

    Example:
        response = (
            SqlQueryService(executor)
            .sql("SELECT name FROM library")
            .fetch_size(5)
            .execute()
        )
    """

    def __init__(self, executor):
        super().__init__(executor)
        self._cursor = ""

    def cursor(self, cursor: str) -> "SqlQueryService":
        """
        Continue a previous query.

        When a cursor is set every other body field is ignored.
        """
        self._cursor = cursor
        return self

    def build_body(self) -> Dict[str, Any]:
        """
        Build the request body.

        Returns:
            {"cursor": ...} when a cursor is set, otherwise the query body
            with every unset optional field omitted

        Raises:
            SqlValidationError: If both query and cursor are empty
            FilterSerializationError: If a filter predicate fails to render
        """
        if self._cursor:
            return SqlCursorBody(cursor=self._cursor).model_dump()

        if not self._sql:
            raise SqlValidationError("query and cursor must not both be empty")
        return self._sql_body().to_source()

    def build_url(self) -> Tuple[str, Dict[str, str]]:
        """Return the path and query string parameters."""
        params = self._url_params()
        # Only the JSON response format is supported
        params["format"] = "json"
        return "/_sql", params

    def execute(self, timeout: Optional[float] = None) -> SqlQueryResponse:
        """
        Run the query.

        Args:
            timeout: Per-call timeout in seconds, handled by the executor

        Returns:
            Columns, rows and the cursor of the next page, if any
        """
        response = self._perform(timeout)
        return self._decode(response)

    async def execute_async(self, timeout: Optional[float] = None) -> SqlQueryResponse:
        """Run the query with an async executor."""
        response = await self._perform_async(timeout)
        return self._decode(response)

    @staticmethod
    def _decode(response: HttpResponse) -> SqlQueryResponse:
        try:
            result = SqlQueryResponse.model_validate_json(response.body)
        except ValidationError as e:
            logger.warning("Failed to decode SQL response: %s", e)
            raise ResponseDecodeError(
                f"failed to decode SQL response: {e}", body=response.body
            ) from e

        logger.debug(
            "SQL response: %d columns, %d rows, cursor=%s",
            len(result.columns),
            len(result.rows),
            bool(result.cursor),
        )
        return result
