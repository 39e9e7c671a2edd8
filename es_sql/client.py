"""
SQL client - main entry point.

Owns an HTTP executor and hands out request builders bound to it.
"""

import logging
from typing import Any, Optional, Union

from es_sql.config import ClientConfig
from es_sql.core.interfaces import IAsyncHttpExecutor, IHttpExecutor
from es_sql.sql.query_service import SqlQueryService
from es_sql.sql.translate_service import SqlTranslateService

logger = logging.getLogger(__name__)


class SqlClient:
    """
    Entry point for the Elasticsearch SQL endpoints.

    Each call to query() or translate() returns a fresh builder; builders
    share only the executor.
    """

    def __init__(self, executor: Union[IHttpExecutor, IAsyncHttpExecutor]):
        """
        Initialize the client.

        Args:
            executor: HTTP executor used by every builder
        """
        self.executor = executor

    @classmethod
    def from_host(
        cls, es_host: str, timeout: float = 30.0, **kwargs: Any
    ) -> "SqlClient":
        """
        Create a client talking to es_host over httpx.

        Args:
            es_host: Elasticsearch URL
            timeout: Default request timeout in seconds
            **kwargs: Extra HttpxExecutor arguments (headers, transport)
        """
        from es_sql.adapters.httpx_executor import HttpxExecutor

        return cls(HttpxExecutor(es_host, timeout=timeout, **kwargs))

    @classmethod
    def from_host_async(
        cls, es_host: str, timeout: float = 30.0, **kwargs: Any
    ) -> "SqlClient":
        """Create a client using the async httpx executor."""
        from es_sql.adapters.httpx_executor import AsyncHttpxExecutor

        return cls(AsyncHttpxExecutor(es_host, timeout=timeout, **kwargs))

    @classmethod
    def from_elasticsearch(cls, es_client: Any) -> "SqlClient":
        """
        Create a client reusing an existing Elasticsearch client.

        Args:
            es_client: elasticsearch.Elasticsearch instance
        """
        from es_sql.adapters.elasticsearch_executor import ESClientExecutor

        return cls(ESClientExecutor(es_client))

    @classmethod
    def from_config(cls, config: Optional[ClientConfig] = None) -> "SqlClient":
        """
        Create a client from configuration.

        Args:
            config: Client configuration; read from the environment if omitted
        """
        config = config or ClientConfig.from_env()
        logger.info("Connecting to %s using %s", config.es_host, config.transport)

        if config.transport == "elasticsearch":
            from es_sql.adapters.elasticsearch_executor import ESClientExecutor

            return cls(
                ESClientExecutor.from_host(config.es_host, request_timeout=config.timeout)
            )
        return cls.from_host(config.es_host, timeout=config.timeout)

    def query(self, sql: Optional[str] = None) -> SqlQueryService:
        """Return a builder for POST /_sql, optionally preset with sql."""
        service = SqlQueryService(self.executor)
        if sql:
            service.sql(sql)
        return service

    def next_page(self, cursor: str) -> SqlQueryService:
        """Return a builder fetching the page behind cursor."""
        return SqlQueryService(self.executor).cursor(cursor)

    def translate(self, sql: Optional[str] = None) -> SqlTranslateService:
        """Return a builder for POST /_sql/translate, optionally preset with sql."""
        service = SqlTranslateService(self.executor)
        if sql:
            service.sql(sql)
        return service

    def close(self) -> None:
        close = getattr(self.executor, "close", None)
        if close is not None:
            close()

    async def aclose(self) -> None:
        aclose = getattr(self.executor, "aclose", None)
        if aclose is not None:
            await aclose()
