from __future__ import annotations

from typing import Any

from searchbridge.core import DataModel
from searchbridge.core.exceptions import BadRequestError
from searchbridge.ql import FacetOperator, FacetQueryType, FacetRequest

from .._catalog import FieldCatalog
from .._helper import Helper
from . import _elasticsearch_dsl as dsl

NESTED_FACET_LIMIT = 1000

DEFAULT_GRANULARITY = "month"

GRANULARITY_SECONDS = {
    "year": 31536000,
    "month": 2592000,
    "day": 86400,
    "hour": 3600,
    "minute": 60,
    "second": 1,
}


class FacetResult(DataModel):
    """Facet conversion result.

    Attributes:
        aggs: Aggregations keyed by facet id.
        post_filters: Post filter clauses keyed by facet id.
        root_filters: Filter clauses added to the root query.
    """

    aggs: dict[str, Any] = dict()
    post_filters: dict[str, Any] = dict()
    root_filters: list[dict[str, Any]] = []


class FacetConverter:
    catalog: FieldCatalog

    def __init__(self, catalog: FieldCatalog) -> None:
        self.catalog = catalog

    def convert(
        self,
        facets: list[FacetRequest],
        post_filters: dict[str, dict[str, Any]] | None = None,
    ) -> FacetResult:
        """Convert facet requests into aggregations.

        Args:
            facets:
                Facet requests.
            post_filters:
                Post filter clauses built from the condition tree,
                keyed by facet id.

        Returns:
            Aggregations with the updated post filters and the
            filters of active nested facet values.
        """
        post_filters = dict(post_filters or {})
        root_filters: list[dict[str, Any]] = []
        converted: list[tuple[FacetRequest, dict[str, Any]]] = []
        for facet in facets:
            self.catalog.resolve(facet.field)
            if self._is_nested(facet):
                aggs, active = self._convert_nested_facet(facet)
                if active is not None:
                    if facet.operator == FacetOperator.OR:
                        post_filters[facet.id] = active
                    else:
                        root_filters.append(active)
            else:
                aggs = self._convert_aggs(
                    facet, Helper.build_nested_field(facet.field)
                )
            converted.append((facet, aggs))

        result: dict[str, Any] = {}
        for facet, aggs in converted:
            if facet.operator == FacetOperator.OR:
                others = [
                    clause
                    for facet_id, clause in post_filters.items()
                    if facet_id != facet.id
                ]
                filter = dsl.all_of(*others)
            else:
                filter = dsl.match_all()
            result[facet.id] = {"filter": filter, "aggs": aggs}
        return FacetResult(
            aggs=result,
            post_filters=post_filters,
            root_filters=root_filters,
        )

    def _is_nested(self, facet: FacetRequest) -> bool:
        if facet.query_type == FacetQueryType.NESTED:
            if facet.nested is None:
                raise BadRequestError(
                    f"Nested facet `{facet.id}` needs nested options."
                )
            return True
        return facet.nested is not None and self.catalog.is_nested_field(
            facet.field
        )

    def _convert_nested_facet(
        self,
        facet: FacetRequest,
    ) -> tuple[dict[str, Any], dict[str, Any] | None]:
        if facet.nested is None:
            raise BadRequestError(
                f"Nested facet `{facet.id}` needs nested options."
            )
        field = Helper.build_nested_field(facet.field)
        path = Helper.build_nested_field(
            facet.nested.path or Helper.get_nested_field(field)
        )
        group_field = Helper.build_nested_field(facet.nested.group_field)
        group_filter = dsl.term(group_field, facet.nested.group_value)
        inner = self._convert_aggs(
            facet, field, limit=NESTED_FACET_LIMIT, source=path
        )
        aggs = {
            facet.id: {
                "nested": {"path": path},
                "aggs": {
                    facet.id: {"filter": group_filter, "aggs": inner},
                },
            }
        }
        if not facet.active_values:
            return aggs, None

        if facet.query_type == FacetQueryType.RANGE:
            bounds = facet.active_values[0]
            if not isinstance(bounds, (list, tuple)):
                bounds = facet.active_values
            lower = bounds[0] if len(bounds) > 0 else None
            upper = bounds[1] if len(bounds) > 1 else None
            value_filter = dsl.range_clause(
                field,
                gte=self._convert_bound(facet.field, lower),
                lte=self._convert_bound(facet.field, upper),
            )
        else:
            value_filter = dsl.terms(field, facet.active_values)
        if facet.exclude:
            value_filter = dsl.negate(value_filter)
        active = dsl.nested(path, dsl.all_of(group_filter, value_filter))
        return aggs, active

    def _convert_aggs(
        self,
        facet: FacetRequest,
        field: str,
        limit: int | None = None,
        source: str | None = None,
    ) -> dict[str, Any]:
        if facet.query_type == FacetQueryType.RANGE:
            return {
                "min": {"min": {"field": field}},
                "max": {"max": {"field": field}},
            }
        if facet.query_type in (FacetQueryType.DATE, FacetQueryType.GRANULAR):
            return {facet.id: self._convert_histogram(facet, field)}

        agg: dict[str, Any] = {
            "field": field,
            "min_doc_count": facet.min_count,
            "size": limit or facet.limit or self.catalog.max_bucket_size,
        }
        if facet.missing:
            agg["missing"] = ""
        terms_agg: dict[str, Any] = {"terms": agg}
        if source is not None:
            terms_agg["aggs"] = {
                facet.id: {"top_hits": {"size": 1, "_source": source}}
            }
        return {facet.id: terms_agg}

    def _convert_histogram(
        self,
        facet: FacetRequest,
        field: str,
    ) -> dict[str, Any]:
        if facet.date_display:
            return {
                "date_histogram": {
                    "field": field,
                    "calendar_interval": self.convert_calendar_interval(
                        facet.granularity
                    ),
                }
            }
        histogram: dict[str, Any] = {
            "field": field,
            "interval": self.convert_interval(facet.granularity),
        }
        min_value = _to_number(facet.min_value)
        max_value = _to_number(facet.max_value)
        if min_value is not None and max_value is not None:
            histogram["extended_bounds"] = {"min": min_value, "max": max_value}
        return {"histogram": histogram}

    @staticmethod
    def convert_calendar_interval(granularity: Any) -> str:
        if isinstance(granularity, str):
            name = granularity.lower()
            if name in GRANULARITY_SECONDS:
                return name
        return DEFAULT_GRANULARITY

    @staticmethod
    def convert_interval(granularity: Any) -> int | float:
        if granularity is None:
            return GRANULARITY_SECONDS[DEFAULT_GRANULARITY]
        if isinstance(granularity, str):
            name = granularity.lower()
            if name in GRANULARITY_SECONDS:
                return GRANULARITY_SECONDS[name]
        number = _to_number(granularity)
        if number is None or number <= 0:
            raise BadRequestError(f"Granularity {granularity!r} not supported")
        return number

    def _convert_bound(self, field_id: str, value: Any) -> Any:
        if value is None or value == "":
            return None
        return self.catalog.coerce_bound(field_id, value)


def _to_number(value: Any) -> int | float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
        return int(number) if number.is_integer() else number
    return None
