from __future__ import annotations

from typing import Any

from searchbridge.core.exceptions import (
    BadRequestError,
    MissingFilterValueError,
    UnsupportedOperatorError,
)
from searchbridge.ql import Condition, ConditionGroup, ConditionOp, Conjunction

from .._catalog import FieldCatalog
from .._helper import Helper
from .._models import SearchFieldType
from . import _elasticsearch_dsl as dsl

_RANGE_OPS = {
    ConditionOp.GT.value: "gt",
    ConditionOp.GTE.value: "gte",
    ConditionOp.LT.value: "lt",
    ConditionOp.LTE.value: "lte",
}

_SUPPORTED_OPS = {op.value for op in ConditionOp}


class FilterConverter:
    """Lower a condition tree into filter clauses.

    Conditions of OR groups tagged as facet selections on flat fields
    are collected per facet into the post filter set instead.
    """

    catalog: FieldCatalog

    def __init__(self, catalog: FieldCatalog) -> None:
        self.catalog = catalog

    def convert(
        self,
        group: ConditionGroup,
    ) -> tuple[dsl.BoolQuery, dict[str, dict[str, Any]]]:
        post_filters: dict[str, list[dict[str, Any]]] = {}
        query = self._convert_group(group, post_filters)
        return query, {
            facet_id: dsl.any_of(*clauses)
            for facet_id, clauses in post_filters.items()
        }

    def _convert_group(
        self,
        group: ConditionGroup,
        post_filters: dict[str, list[dict[str, Any]]],
    ) -> dsl.BoolQuery:
        query = dsl.BoolQuery()
        is_or = group.conjunction == Conjunction.OR
        for condition in group.conditions:
            if isinstance(condition, ConditionGroup):
                clause = self._convert_group(condition, post_filters)
                if clause.is_empty():
                    continue
                if is_or:
                    query = query.add_should(clause.to_dict())
                else:
                    query = query.add_filter(clause.to_dict())
                continue

            self.catalog.resolve(condition.field)
            if not is_or:
                query = query.add_filter(self.convert_condition(condition))
            elif group.has_tag(f"facet:{condition.field}"):
                # Nested facet selections are built with the aggregations
                if self.catalog.is_nested_field(condition.field):
                    continue
                facet_id = group.facet_id or condition.field
                post_filters.setdefault(facet_id, []).append(
                    self.convert_condition(condition)
                )
            else:
                query = query.add_should(self.convert_condition(condition))
        return query

    def convert_condition(self, condition: Condition) -> dict[str, Any]:
        field = Helper.build_nested_field(condition.field)
        value = condition.value
        if self.catalog.type_of(condition.field) == SearchFieldType.BOOLEAN:
            value = self.catalog.coerce(condition.field, value)
        clause = self._convert_comparison(
            condition.field, field, condition.op, value
        )
        if self.catalog.is_nested_field(condition.field):
            clause = dsl.nested(Helper.get_nested_field(field), clause)
        return clause

    def _convert_comparison(
        self,
        field_id: str,
        field: str,
        op: str,
        value: Any,
    ) -> dict[str, Any]:
        if op not in _SUPPORTED_OPS:
            raise UnsupportedOperatorError(field=field_id, operator=op)
        if value is None:
            if op == ConditionOp.NEQ.value:
                return dsl.exists(field)
            if op == ConditionOp.EQ.value:
                return dsl.negate(dsl.exists(field))
            raise MissingFilterValueError(field=field_id, operator=op)

        if op == ConditionOp.EQ.value:
            return dsl.term(field, value)
        if op == ConditionOp.NEQ.value:
            return dsl.negate(dsl.term(field, value))
        if op == ConditionOp.IN.value:
            return dsl.terms(field, value)
        if op == ConditionOp.NIN.value:
            return dsl.negate(dsl.terms(field, value))
        if op in _RANGE_OPS:
            bound = self.catalog.coerce_bound(field_id, value)
            return dsl.range_clause(field, **{_RANGE_OPS[op]: bound})

        clause = self._convert_between(field_id, field, value)
        if op == ConditionOp.NOT_BETWEEN.value:
            return dsl.negate(clause)
        return clause

    def _convert_between(
        self,
        field_id: str,
        field: str,
        value: Any,
    ) -> dict[str, Any]:
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise BadRequestError(
                f"Range condition on field `{field_id}` needs two values."
            )
        lower, upper = value
        return dsl.range_clause(
            field,
            gte=self._convert_bound(field_id, lower),
            lte=self._convert_bound(field_id, upper),
        )

    def _convert_bound(self, field_id: str, value: Any) -> Any:
        if value is None or value == "":
            return None
        return self.catalog.coerce_bound(field_id, value)
