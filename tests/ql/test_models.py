# type: ignore

from typing import Any

import pytest

from searchbridge.ql import (
    Condition,
    ConditionGroup,
    ConditionOp,
    Conjunction,
    FacetOperator,
    FacetQueryType,
    FullTextKeys,
    ParseMode,
    SearchQuery,
    SortDirection,
    ValueKind,
)


@pytest.mark.parametrize(
    "op, expected",
    [
        ("=", "="),
        ("in", "IN"),
        ("not   in", "NOT IN"),
        (" not between ", "NOT BETWEEN"),
        (ConditionOp.GTE, ">="),
        ("like", "LIKE"),
    ],
)
def test_condition_op(op: Any, expected: str):
    assert Condition(field="color", op=op).op == expected


@pytest.mark.parametrize(
    "op, value, expected",
    [
        ("=", None, ValueKind.ABSENT),
        ("=", "red", ValueKind.SCALAR),
        ("=", 0, ValueKind.SCALAR),
        ("=", False, ValueKind.SCALAR),
        ("IN", ["red"], ValueKind.LIST),
        ("BETWEEN", [1, 2], ValueKind.PAIR),
        ("NOT BETWEEN", (1, 2), ValueKind.PAIR),
    ],
)
def test_value_kind(op: str, value: Any, expected: ValueKind):
    assert Condition(field="price", op=op, value=value).value_kind == expected


def test_condition_group_str():
    group = ConditionGroup(conjunction="or")
    group.add_condition("color", "red").add_condition("price", [1, 2], "in")
    assert group.conjunction == Conjunction.OR
    assert str(group) == '(color = "red" OR price IN [1, 2])'


def test_group_tags():
    group = ConditionGroup().add_tag("facet:color").add_tag("facet_id:c")
    assert group.has_tag("facet:color")
    assert not group.has_tag("facet:brand")
    assert group.facet_id == "c"
    assert ConditionGroup().facet_id is None


def test_groups_do_not_share_defaults():
    first = ConditionGroup().add_condition("color", "red")
    second = ConditionGroup()
    assert len(first.conditions) == 1
    assert second.conditions == []


def test_query_from_dict():
    query = SearchQuery.from_dict(
        {
            "collection": "products",
            "keys": ["red", "car"],
            "parse_mode": "phrase",
            "conditions": {
                "conjunction": "AND",
                "conditions": [
                    {"field": "color", "op": "in", "value": ["red"]},
                    {
                        "conjunction": "OR",
                        "tags": ["facet:brand"],
                        "conditions": [{"field": "brand", "value": "acme"}],
                    },
                ],
            },
            "sorts": [{"field": "price", "direction": "DESC"}],
            "facets": [
                {"id": "brand", "field": "brand", "operator": "OR"},
                {"id": "created", "field": "created", "query_type": "date"},
            ],
        }
    )
    assert query.parse_mode == ParseMode.PHRASE
    assert query.keys == FullTextKeys(terms=["red", "car"])
    first, second = query.conditions.conditions
    assert isinstance(first, Condition)
    assert first.op == "IN"
    assert isinstance(second, ConditionGroup)
    assert second.has_tag("facet:brand")
    assert query.sorts[0].direction == SortDirection.DESC
    assert query.facets[0].operator == FacetOperator.OR
    assert query.facets[1].query_type == FacetQueryType.DATE
    assert query.limit is None


def test_query_builders():
    query = SearchQuery(keys="red car")
    query.add_sort("title", "desc").add_facet({"id": "c", "field": "color"})
    assert query.keys == "red car"
    assert query.parse_mode == ParseMode.TERMS
    assert str(query.sorts[0]) == "title desc"
    assert query.facets[0].min_count == 1
    assert query.facets[0].limit == 0


@pytest.mark.parametrize(
    "keys, expected",
    [
        (None, None),
        ("red", FullTextKeys(terms=["red"])),
        (["red", "car"], FullTextKeys(terms=["red", "car"])),
    ],
)
def test_normalize_keys(keys: Any, expected: Any):
    assert FullTextKeys.normalize(keys) == expected


def test_key_groups():
    keys = FullTextKeys(
        terms=["red", FullTextKeys(terms=["car"], negation=True)],
        conjunction="or",
    )
    assert keys.conjunction == Conjunction.OR
    assert keys.flat_terms == ["red"]
    assert keys.groups[0].negation is True
