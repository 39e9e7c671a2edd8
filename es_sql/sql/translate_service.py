"""
SQL translate service.

Translates a SQL statement into Elasticsearch query DSL.
See https://www.elastic.co/guide/en/elasticsearch/reference/current/sql-translate-api.html.
"""

from typing import Any, Dict, Optional, Tuple

from es_sql.errors import SqlValidationError
from es_sql.sql.base import SqlServiceBase


def _body_text(body: bytes) -> str:
    # Bytes that are not valid UTF-8 become U+FFFD instead of failing
    return body.decode("utf-8", errors="replace")


class SqlTranslateService(SqlServiceBase):
    """Builds and executes a request against POST /_sql/translate."""

    def build_body(self) -> Dict[str, Any]:
        """
        Build the request body.

        Raises:
            SqlValidationError: If the query is empty
            FilterSerializationError: If a filter predicate fails to render
        """
        if not self._sql:
            raise SqlValidationError("query must not be empty")
        return self._sql_body().to_source()

    def build_url(self) -> Tuple[str, Dict[str, str]]:
        return "/_sql/translate", self._url_params()

    def execute(self, timeout: Optional[float] = None) -> str:
        """
        Translate the query.

        Returns:
            The query DSL document as returned by Elasticsearch, unparsed
        """
        response = self._perform(timeout)
        return _body_text(response.body)

    async def execute_async(self, timeout: Optional[float] = None) -> str:
        """Translate the query with an async executor."""
        response = await self._perform_async(timeout)
        return _body_text(response.body)
