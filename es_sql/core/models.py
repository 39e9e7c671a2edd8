"""
Shared data models for the SQL client.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PerformRequestOptions(BaseModel):
    """Everything an HTTP executor needs to send one request."""

    method: str = "POST"
    path: str
    params: Dict[str, str] = Field(default_factory=dict)
    body: Any = None
    headers: Dict[str, List[str]] = Field(default_factory=dict)
    timeout: Optional[float] = None  # seconds, None means executor default


class HttpResponse(BaseModel):
    """Raw HTTP response returned by an executor."""

    status_code: int = 200
    body: bytes = b""
    headers: Dict[str, str] = Field(default_factory=dict)


class SqlCursorBody(BaseModel):
    """Request body for fetching the next page of a paginated query."""

    cursor: str


class SqlRequestBody(BaseModel):
    """
    Request body for running or translating a SQL statement.

    Optional fields left as None are omitted when serialized.
    """

    query: str
    fetch_size: Optional[int] = None
    page_timeout: Optional[str] = None
    request_timeout: Optional[str] = None
    time_zone: Optional[str] = None
    field_multi_value_leniency: Optional[bool] = None
    filter: Optional[Any] = None  # single predicate source or list of them

    def to_source(self) -> Dict[str, Any]:
        # filter is passed through untouched so None values inside it survive
        source = self.model_dump(exclude={"filter"}, exclude_none=True)
        if self.filter is not None:
            source["filter"] = self.filter
        return source


class Column(BaseModel):
    """A column descriptor of a SQL result set."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    type: str = ""


class SqlQueryResponse(BaseModel):
    """
    Response of a SQL query.

    Continuation pages carry rows and cursor but no columns.
    """

    model_config = ConfigDict(extra="ignore")

    columns: List[Column] = Field(default_factory=list)
    rows: List[List[Any]] = Field(default_factory=list)
    cursor: Optional[str] = None
