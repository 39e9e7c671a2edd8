"""
Elasticsearch query DSL predicates.

Each predicate renders itself through source() and can be attached to a SQL
request as a filter.
"""

from typing import Any, Dict, List, Optional

from es_sql.core.interfaces import IQuery


class TermQuery:
    """Exact match on a single value."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value

    def source(self) -> Dict[str, Any]:
        return {"term": {self.field: self.value}}


class TermsQuery:
    """Exact match on any of several values."""

    def __init__(self, field: str, *values: Any):
        self.field = field
        self.values = list(values)

    def source(self) -> Dict[str, Any]:
        return {"terms": {self.field: self.values}}


class RangeQuery:
    """
    Range predicate on a numeric or date field.

    Bounds left as None are not sent. At least one bound is required.
    """

    def __init__(
        self,
        field: str,
        gt: Any = None,
        gte: Any = None,
        lt: Any = None,
        lte: Any = None,
        format: Optional[str] = None,
        time_zone: Optional[str] = None,
    ):
        self.field = field
        self.gt = gt
        self.gte = gte
        self.lt = lt
        self.lte = lte
        self.format = format
        self.time_zone = time_zone

    def source(self) -> Dict[str, Any]:
        bounds = {
            key: value
            for key, value in (
                ("gt", self.gt),
                ("gte", self.gte),
                ("lt", self.lt),
                ("lte", self.lte),
            )
            if value is not None
        }
        if not bounds:
            raise ValueError(f"range query on {self.field!r} has no bounds")

        params: Dict[str, Any] = dict(bounds)
        if self.format:
            params["format"] = self.format
        if self.time_zone:
            params["time_zone"] = self.time_zone
        return {"range": {self.field: params}}


class ExistsQuery:
    """Matches documents that have a value for the field."""

    def __init__(self, field: str):
        self.field = field

    def source(self) -> Dict[str, Any]:
        return {"exists": {"field": self.field}}


class WildcardQuery:
    """Wildcard pattern match, e.g. "*phone*"."""

    def __init__(self, field: str, pattern: str, case_insensitive: bool = False):
        self.field = field
        self.pattern = pattern
        self.case_insensitive = case_insensitive

    def source(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"value": self.pattern}
        if self.case_insensitive:
            params["case_insensitive"] = True
        return {"wildcard": {self.field: params}}


class MatchQuery:
    """Full-text match."""

    def __init__(self, field: str, text: str, operator: Optional[str] = None):
        self.field = field
        self.text = text
        self.operator = operator

    def source(self) -> Dict[str, Any]:
        if self.operator:
            return {"match": {self.field: {"query": self.text, "operator": self.operator}}}
        return {"match": {self.field: self.text}}


class BoolQuery:
    """
    Compound predicate combining other predicates.

    Clauses are rendered in the order they were added. A clause with a
    single predicate is inlined, several are sent as a list.
    """

    def __init__(self):
        self._must: List[IQuery] = []
        self._filter: List[IQuery] = []
        self._should: List[IQuery] = []
        self._must_not: List[IQuery] = []
        self._minimum_should_match: Optional[Any] = None

    def must(self, *queries: IQuery) -> "BoolQuery":
        self._must.extend(queries)
        return self

    def filter(self, *queries: IQuery) -> "BoolQuery":
        self._filter.extend(queries)
        return self

    def should(self, *queries: IQuery) -> "BoolQuery":
        self._should.extend(queries)
        return self

    def must_not(self, *queries: IQuery) -> "BoolQuery":
        self._must_not.extend(queries)
        return self

    def minimum_should_match(self, value: Any) -> "BoolQuery":
        self._minimum_should_match = value
        return self

    def source(self) -> Dict[str, Any]:
        clauses: Dict[str, Any] = {}
        for name, queries in (
            ("must", self._must),
            ("filter", self._filter),
            ("should", self._should),
            ("must_not", self._must_not),
        ):
            if len(queries) == 1:
                clauses[name] = queries[0].source()
            elif len(queries) > 1:
                clauses[name] = [q.source() for q in queries]

        if self._minimum_should_match is not None:
            clauses["minimum_should_match"] = self._minimum_should_match
        return {"bool": clauses}


class RawQuery:
    """A predicate given as an already-built DSL object."""

    def __init__(self, body: Any):
        self.body = body

    def source(self) -> Any:
        return self.body
