"""Tests for the query DSL filter predicates."""

from __future__ import annotations

import pytest
from conftest import FakeExecutor

from es_sql.errors import FilterSerializationError
from es_sql.query import (
    BoolQuery,
    ExistsQuery,
    MatchQuery,
    RangeQuery,
    RawQuery,
    TermQuery,
    TermsQuery,
    WildcardQuery,
)
from es_sql.sql.query_service import SqlQueryService


def test_leaf_queries() -> None:
    assert TermQuery("status.keyword", "active").source() == {"term": {"status.keyword": "active"}}
    assert TermsQuery("currency", "USD", "EUR").source() == {"terms": {"currency": ["USD", "EUR"]}}
    assert ExistsQuery("email").source() == {"exists": {"field": "email"}}
    assert MatchQuery("title", "space opera").source() == {"match": {"title": "space opera"}}
    assert MatchQuery("title", "space opera", operator="and").source() == {
        "match": {"title": {"query": "space opera", "operator": "and"}}
    }
    assert RawQuery({"match_all": {}}).source() == {"match_all": {}}


def test_wildcard_query() -> None:
    assert WildcardQuery("name", "*phone*").source() == {"wildcard": {"name": {"value": "*phone*"}}}
    assert WildcardQuery("name", "*phone*", case_insensitive=True).source() == {
        "wildcard": {"name": {"value": "*phone*", "case_insensitive": True}}
    }


def test_range_query_only_sends_set_bounds() -> None:
    query = RangeQuery("release_date", gte="2020-01-01", lt="2021-01-01", format="yyyy-MM-dd")

    assert query.source() == {
        "range": {
            "release_date": {"gte": "2020-01-01", "lt": "2021-01-01", "format": "yyyy-MM-dd"}
        }
    }


def test_range_query_keeps_zero_bound() -> None:
    assert RangeQuery("amount", gt=0).source() == {"range": {"amount": {"gt": 0}}}


def test_range_query_without_bounds_fails() -> None:
    with pytest.raises(ValueError, match="no bounds"):
        RangeQuery("amount").source()


def test_bool_query_inlines_single_clause_and_lists_many() -> None:
    query = (
        BoolQuery()
        .must(TermQuery("a", 1))
        .filter(TermQuery("b", 2), ExistsQuery("c"))
        .must_not(TermQuery("d", 4))
        .should(MatchQuery("e", "x"))
        .minimum_should_match(1)
    )

    assert query.source() == {
        "bool": {
            "must": {"term": {"a": 1}},
            "filter": [{"term": {"b": 2}}, {"exists": {"field": "c"}}],
            "should": {"match": {"e": "x"}},
            "must_not": {"term": {"d": 4}},
            "minimum_should_match": 1,
        }
    }


def test_empty_bool_query() -> None:
    assert BoolQuery().source() == {"bool": {}}


def test_bool_query_propagates_nested_failure(executor: FakeExecutor) -> None:
    service = (
        SqlQueryService(executor)
        .sql("SELECT 1")
        .filter(BoolQuery().must(RangeQuery("amount")))
    )

    with pytest.raises(FilterSerializationError) as exc_info:
        service.build_body()

    assert isinstance(exc_info.value.__cause__, ValueError)


def test_raw_query_keeps_null_values(executor: FakeExecutor) -> None:
    body = (
        SqlQueryService(executor)
        .sql("SELECT 1")
        .filter(RawQuery({"term": {"parent": None}}))
        .build_body()
    )

    assert body["filter"] == {"term": {"parent": None}}
