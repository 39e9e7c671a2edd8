"""Filter predicates that can be attached to SQL requests."""

from es_sql.query.filters import (
    TermQuery,
    TermsQuery,
    RangeQuery,
    ExistsQuery,
    WildcardQuery,
    MatchQuery,
    BoolQuery,
    RawQuery,
)

__all__ = [
    "TermQuery",
    "TermsQuery",
    "RangeQuery",
    "ExistsQuery",
    "WildcardQuery",
    "MatchQuery",
    "BoolQuery",
    "RawQuery",
]
