"""HTTP executors for the SQL request builders."""

from es_sql.adapters.httpx_executor import HttpxExecutor, AsyncHttpxExecutor
from es_sql.adapters.elasticsearch_executor import ESClientExecutor

__all__ = ["HttpxExecutor", "AsyncHttpxExecutor", "ESClientExecutor"]
