"""Pytest configuration and shared fakes.

The package uses a flat layout. The repo root is put on `sys.path` so tests also run without an
editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from es_sql.core.models import HttpResponse, PerformRequestOptions  # noqa: E402


class FakeExecutor:
    """Records requests and replays a canned response or error."""

    def __init__(self, body: bytes = b"{}", error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.requests: list[PerformRequestOptions] = []

    def perform_request(self, options: PerformRequestOptions) -> HttpResponse:
        self.requests.append(options)
        if self.error is not None:
            raise self.error
        return HttpResponse(status_code=200, body=self.body)


class FakeAsyncExecutor(FakeExecutor):
    async def perform_request(self, options: PerformRequestOptions) -> HttpResponse:  # type: ignore[override]
        return FakeExecutor.perform_request(self, options)


class StaticQuery:
    """Filter predicate returning a fixed source."""

    def __init__(self, source: Any) -> None:
        self._source = source
        self.calls = 0

    def source(self) -> Any:
        self.calls += 1
        return self._source


class FailingQuery:
    def __init__(self, message: str = "boom") -> None:
        self.message = message

    def source(self) -> Any:
        raise RuntimeError(self.message)


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()
