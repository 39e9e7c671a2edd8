"""Tests for SqlClient wiring and configuration loading."""

from __future__ import annotations

import logging
import os

import httpx
import pytest
from conftest import FakeAsyncExecutor, FakeExecutor
from pydantic import ValidationError

from es_sql import SqlClient, SqlQueryService, SqlTranslateService
from es_sql.adapters.elasticsearch_executor import ESClientExecutor
from es_sql.adapters.httpx_executor import AsyncHttpxExecutor, HttpxExecutor
from es_sql.config import ClientConfig
from es_sql.logging_config import configure_logging


def test_builders_share_executor(executor: FakeExecutor) -> None:
    client = SqlClient(executor)

    query = client.query("SELECT 1")
    translate = client.translate("SELECT 2")

    assert isinstance(query, SqlQueryService)
    assert isinstance(translate, SqlTranslateService)
    assert query.executor is translate.executor is executor
    assert query.build_body() == {"query": "SELECT 1"}
    assert translate.build_body() == {"query": "SELECT 2"}


def test_each_call_returns_a_fresh_builder(executor: FakeExecutor) -> None:
    client = SqlClient(executor)

    first = client.query().fetch_size(10)
    second = client.query("SELECT 1")

    assert first is not second
    assert "fetch_size" not in second.build_body()


def test_next_page(executor: FakeExecutor) -> None:
    assert SqlClient(executor).next_page("abc").build_body() == {"cursor": "abc"}


def test_from_host_uses_httpx() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"rows": []}))
    client = SqlClient.from_host("http://es:9200", timeout=5.0, transport=transport)

    assert isinstance(client.executor, HttpxExecutor)
    assert client.executor.timeout == 5.0
    assert client.query("SELECT 1").execute().rows == []
    client.close()
    assert client.executor.client.is_closed


@pytest.mark.asyncio
async def test_from_host_async() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"{}"))
    client = SqlClient.from_host_async("http://es:9200", transport=transport)

    assert isinstance(client.executor, AsyncHttpxExecutor)
    assert await client.translate("SELECT 1").execute_async() == "{}"
    await client.aclose()


@pytest.mark.asyncio
async def test_aclose_without_async_executor() -> None:
    await SqlClient(FakeAsyncExecutor()).aclose()


def test_from_elasticsearch() -> None:
    es = object()
    client = SqlClient.from_elasticsearch(es)

    assert isinstance(client.executor, ESClientExecutor)
    assert client.executor.es_client is es


def test_from_config_selects_httpx() -> None:
    client = SqlClient.from_config(ClientConfig(es_host="http://es:9200", timeout=3))

    assert isinstance(client.executor, HttpxExecutor)
    assert client.executor.base_url == "http://es:9200"
    client.close()


def test_from_config_selects_elasticsearch() -> None:
    client = SqlClient.from_config(
        ClientConfig(es_host="http://es:9200", transport="elasticsearch")
    )

    assert isinstance(client.executor, ESClientExecutor)
    client.close()


def test_config_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("ES_HOST", "http://search:9200")
    monkeypatch.setenv("ES_TIMEOUT", "12.5")
    monkeypatch.setenv("ES_SQL_TRANSPORT", "elasticsearch")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    config = ClientConfig.from_env(str(tmp_path / "missing.env"))

    assert config.es_host == "http://search:9200"
    assert config.timeout == 12.5
    assert config.transport == "elasticsearch"
    assert config.log_level == "INFO"


def test_config_reads_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # load_dotenv writes to os.environ, so give it a throwaway copy
    names = {"ES_HOST", "ES_TIMEOUT", "ES_SQL_TRANSPORT", "LOG_LEVEL"}
    monkeypatch.setattr(os, "environ", {k: v for k, v in os.environ.items() if k not in names})
    env_file = tmp_path / ".env"
    env_file.write_text("ES_HOST=http://from-dotenv:9200\nLOG_LEVEL=DEBUG\n")

    config = ClientConfig.from_env(str(env_file))

    assert config.es_host == "http://from-dotenv:9200"
    assert config.log_level == "DEBUG"
    assert config.transport == "httpx"


def test_config_rejects_unknown_transport(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("ES_SQL_TRANSPORT", "grpc")

    with pytest.raises(ValidationError):
        ClientConfig.from_env(str(tmp_path / "missing.env"))


def test_configure_logging_quiets_http_loggers(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configure_logging()

    assert calls[0]["level"] == "DEBUG"
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("elastic_transport").level == logging.WARNING
