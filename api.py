"""
FastAPI REST API for the Elasticsearch SQL client.

Runs SQL queries and translates SQL into Elasticsearch query DSL.
"""

import json
import logging
import os
from functools import lru_cache
from typing import Any, Dict, List, Optional, Union

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from es_sql import SqlClient
from es_sql.config import ClientConfig
from es_sql.core.models import Column
from es_sql.errors import ApiError, FilterSerializationError, SqlValidationError
from es_sql.execution import ResultFormatter
from es_sql.logging_config import configure_logging
from es_sql.query import RawQuery
from es_sql.sql.base import SqlServiceBase

load_dotenv()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Elasticsearch SQL API",
    description="Run SQL queries and translate SQL into Elasticsearch query DSL",
    version="1.0.0",
)


class SqlRequest(BaseModel):
    """Request model shared by both endpoints."""
    query: Optional[str] = Field(None, description="SQL statement")
    fetch_size: int = Field(0, description="Maximum number of rows per page")
    page_timeout: Optional[str] = Field(None, description="Cursor keep-alive, e.g. 45s")
    request_timeout: Optional[str] = Field(None, description="Query timeout, e.g. 90s")
    time_zone: Optional[str] = Field(None, description="Time zone, e.g. Europe/Paris")
    field_multi_value_leniency: bool = False
    filter: Optional[Union[Dict[str, Any], List[Dict[str, Any]]]] = Field(
        None, description="Query DSL filter, or a list of filters"
    )


class SqlQueryRequest(SqlRequest):
    """Request model for /sql."""
    cursor: Optional[str] = Field(None, description="Cursor of the next page")
    columns: Optional[List[Column]] = Field(
        None, description="Columns of the first page, used for records on continuation pages"
    )


@lru_cache(maxsize=1)
def get_client() -> SqlClient:
    """Create the shared client from environment configuration."""
    config = ClientConfig.from_env()
    configure_logging(config.log_level)
    return SqlClient.from_config(config)


def _apply(service: SqlServiceBase, request: SqlRequest) -> None:
    service.sql(request.query or "").fetch_size(request.fetch_size)
    service.page_timeout(request.page_timeout or "")
    service.request_timeout(request.request_timeout or "")
    service.time_zone(request.time_zone or "")
    service.field_multi_value_leniency(request.field_multi_value_leniency)

    if isinstance(request.filter, list):
        service.filter(*[RawQuery(clause) for clause in request.filter])
    elif request.filter is not None:
        service.filter(RawQuery(request.filter))


def _http_error(e: Exception) -> HTTPException:
    if isinstance(e, (SqlValidationError, FilterSerializationError)):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, ApiError):
        return HTTPException(status_code=e.status_code, detail=e.error or str(e))
    logger.exception("SQL request failed")
    return HTTPException(status_code=502, detail=f"SQL request failed: {str(e)}")


@app.post("/sql")
def run_query(
    request: SqlQueryRequest,
    records: bool = Query(False, description="Return rows as records"),
    client: SqlClient = Depends(get_client),
) -> Dict[str, Any]:
    """Run a SQL query, or fetch the next page when a cursor is given."""
    service = client.query()
    _apply(service, request)
    service.cursor(request.cursor or "")

    try:
        response = service.execute()
    except Exception as e:
        raise _http_error(e) from e

    if records:
        try:
            return ResultFormatter.format_result(response, request.columns)
        except ValueError as e:
            raise HTTPException(
                status_code=422,
                detail=f"cannot build records: {e}; pass the columns of the first page",
            ) from e

    payload = response.model_dump()
    if payload["cursor"] is None:
        del payload["cursor"]
    return payload


@app.post("/sql/translate")
def translate_query(
    request: SqlRequest,
    client: SqlClient = Depends(get_client),
) -> Any:
    """Translate a SQL query into Elasticsearch query DSL."""
    service = client.translate()
    _apply(service, request)

    try:
        translated = service.execute()
    except Exception as e:
        raise _http_error(e) from e

    return json.loads(translated)


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("API_PORT", "8000"))
    host = os.getenv("API_HOST", "0.0.0.0")

    uvicorn.run(app, host=host, port=port)
