"""Request builders for the Elasticsearch SQL endpoints."""

from es_sql.sql.query_service import SqlQueryService
from es_sql.sql.translate_service import SqlTranslateService

__all__ = ["SqlQueryService", "SqlTranslateService"]
