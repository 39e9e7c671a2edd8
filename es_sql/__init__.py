"""
Elasticsearch SQL client.

Fluent request builders for running SQL queries and translating SQL into
Elasticsearch query DSL.
"""

from es_sql.client import SqlClient
from es_sql.sql import SqlQueryService, SqlTranslateService

__all__ = ["SqlClient", "SqlQueryService", "SqlTranslateService"]
