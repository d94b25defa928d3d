"""
Elasticsearch query DSL clauses.

Clauses are plain dictionaries produced by functions. ``BoolQuery``
collects clauses and every add method returns a new instance.
"""

from __future__ import annotations

import copy
from typing import Any

from pydantic import ConfigDict

from searchbridge.core import DataModel


class BoolQuery(DataModel):
    model_config = ConfigDict(frozen=True)

    must: tuple[dict[str, Any], ...] = ()
    should: tuple[dict[str, Any], ...] = ()
    filter: tuple[dict[str, Any], ...] = ()
    must_not: tuple[dict[str, Any], ...] = ()

    def add_must(self, *clauses: dict[str, Any]) -> BoolQuery:
        return self.model_copy(update={"must": self.must + clauses})

    def add_should(self, *clauses: dict[str, Any]) -> BoolQuery:
        return self.model_copy(update={"should": self.should + clauses})

    def add_filter(self, *clauses: dict[str, Any]) -> BoolQuery:
        return self.model_copy(update={"filter": self.filter + clauses})

    def add_must_not(self, *clauses: dict[str, Any]) -> BoolQuery:
        return self.model_copy(
            update={"must_not": self.must_not + clauses}
        )

    def merge(self, other: BoolQuery) -> BoolQuery:
        return BoolQuery(
            must=self.must + other.must,
            should=self.should + other.should,
            filter=self.filter + other.filter,
            must_not=self.must_not + other.must_not,
        )

    def count(self) -> int:
        return (
            len(self.must)
            + len(self.should)
            + len(self.filter)
            + len(self.must_not)
        )

    def is_empty(self) -> bool:
        return self.count() == 0

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        for occur in ("must", "should", "filter", "must_not"):
            clauses = getattr(self, occur)
            if clauses:
                body[occur] = [copy.deepcopy(c) for c in clauses]
        if self.should:
            body["minimum_should_match"] = 1
        return {"bool": body}


def term(field: str, value: Any) -> dict[str, Any]:
    return {"term": {field: {"value": value}}}


def terms(field: str, values: Any) -> dict[str, Any]:
    if not isinstance(values, (list, tuple)):
        values = [values]
    return {"terms": {field: list(values)}}


def range_clause(field: str, **bounds: Any) -> dict[str, Any]:
    return {
        "range": {
            field: {k: v for k, v in bounds.items() if v is not None}
        }
    }


def exists(field: str) -> dict[str, Any]:
    return {"exists": {"field": field}}


def nested(path: str, query: dict[str, Any]) -> dict[str, Any]:
    return {"nested": {"path": path, "query": query}}


def match_all() -> dict[str, Any]:
    return {"match_all": {}}


def negate(clause: dict[str, Any]) -> dict[str, Any]:
    return BoolQuery().add_must_not(clause).to_dict()


def all_of(*clauses: dict[str, Any]) -> dict[str, Any]:
    return BoolQuery().add_filter(*clauses).to_dict()


def any_of(*clauses: dict[str, Any]) -> dict[str, Any]:
    if len(clauses) == 1:
        return clauses[0]
    return BoolQuery().add_should(*clauses).to_dict()


def simple_query_string(
    query: str,
    fields: list[str],
    default_operator: str = "or",
) -> dict[str, Any]:
    return {
        "simple_query_string": {
            "query": query,
            "fields": list(fields),
            "default_operator": default_operator,
        }
    }


def multi_match(
    query: str,
    fields: list[str],
    type: str = "best_fields",
    operator: str = "or",
    fuzziness: str | int | None = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "query": query,
        "fields": list(fields),
        "type": type,
        "operator": operator,
    }
    if fuzziness is not None and type not in ("phrase", "phrase_prefix"):
        body["fuzziness"] = fuzziness
    return {"multi_match": body}
