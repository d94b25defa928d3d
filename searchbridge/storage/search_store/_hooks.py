from __future__ import annotations

from typing import Any

from searchbridge.ql import SearchQuery

from ._models import AssembledQuery, ResultSet


class SearchHooks:
    """Extension seams around query assembly and result mapping.

    Every hook receives the current structure and returns it, or a
    replacement. The default implementation returns its input.
    """

    def alter_query(self, query: SearchQuery) -> SearchQuery:
        return query

    def alter_random_sort(self, params: dict[str, Any]) -> dict[str, Any]:
        return params

    def alter_suggestion_field(self, field: str | None) -> str | None:
        return field

    def alter_compiled_query(
        self,
        assembled: AssembledQuery,
        query: SearchQuery,
    ) -> AssembledQuery:
        return assembled

    def alter_results(
        self,
        result_set: ResultSet,
        query: SearchQuery,
        response: Any,
    ) -> ResultSet:
        return result_set
