from __future__ import annotations

import json
from enum import Enum
from typing import Any, Union

from pydantic import field_validator

from searchbridge.core.data_model import DataModel


def _str_value(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool, dict, list)):
        return json.dumps(value)
    return str(value)


Scalar = Union[str, int, float, bool]
Value = Union[Scalar, list, tuple, None]


class ConditionOp(str, Enum):
    """Condition op.

    Attributes:
        EQ: Equals, or "is empty" without a value.
        NEQ: Not equals, or "is not empty" without a value.
        IN: In list.
        NIN: Not in list.
        GT: Greater than.
        GTE: Greater than equals.
        LT: Less than.
        LTE: Less than equals.
        BETWEEN: Between pair, inclusive.
        NOT_BETWEEN: Outside pair.
    """

    EQ = "="
    NEQ = "<>"
    IN = "IN"
    NIN = "NOT IN"
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    BETWEEN = "BETWEEN"
    NOT_BETWEEN = "NOT BETWEEN"


class ValueKind(str, Enum):
    ABSENT = "absent"
    SCALAR = "scalar"
    LIST = "list"
    PAIR = "pair"


class Conjunction(str, Enum):
    AND = "AND"
    OR = "OR"


class Condition(DataModel):
    """Condition.

    Attributes:
        field: Field identifier.
        op: Condition operator.
        value: Condition value.
    """

    field: str
    op: str = ConditionOp.EQ.value
    value: Value = None

    @field_validator("op", mode="before")
    @classmethod
    def _normalize_op(cls, value: Any) -> Any:
        if isinstance(value, ConditionOp):
            return value.value
        if isinstance(value, str):
            return " ".join(value.split()).upper()
        return value

    @property
    def value_kind(self) -> ValueKind:
        if self.value is None:
            return ValueKind.ABSENT
        if isinstance(self.value, (list, tuple)):
            if self.op in (
                ConditionOp.BETWEEN.value,
                ConditionOp.NOT_BETWEEN.value,
            ):
                return ValueKind.PAIR
            return ValueKind.LIST
        return ValueKind.SCALAR

    def __str__(self) -> str:
        return f"{self.field} {self.op} {_str_value(self.value)}"


class ConditionGroup(DataModel):
    """Condition group.

    Attributes:
        conjunction: Conjunction applied to all members.
        conditions: Conditions and nested condition groups.
        tags: Group tags, e.g. ``facet:<field>`` and ``facet_id:<id>``.
    """

    conjunction: Conjunction = Conjunction.AND
    conditions: list[Union[Condition, ConditionGroup]] = []
    tags: set[str] = set()

    @field_validator("conjunction", mode="before")
    @classmethod
    def _normalize_conjunction(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    def add_condition(
        self,
        field: str,
        value: Value = None,
        op: str | ConditionOp = ConditionOp.EQ,
    ) -> ConditionGroup:
        self.conditions.append(Condition(field=field, value=value, op=op))
        return self

    def add_group(self, group: ConditionGroup) -> ConditionGroup:
        self.conditions.append(group)
        return self

    def add_tag(self, tag: str) -> ConditionGroup:
        self.tags.add(tag)
        return self

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    @property
    def facet_id(self) -> str | None:
        for tag in sorted(self.tags):
            if tag.startswith("facet_id:"):
                return tag.split(":", 1)[1]
        return None

    def __str__(self) -> str:
        sep = f" {self.conjunction.value} "
        return f"({sep.join(str(c) for c in self.conditions)})"


class ParseMode(str, Enum):
    """Full-text parse mode.

    Attributes:
        DIRECT: Raw query string.
        PHRASE: Keys matched as a phrase.
        TERMS: Keys matched as separate terms.
    """

    DIRECT = "direct"
    PHRASE = "phrase"
    TERMS = "terms"


class FullTextKeys(DataModel):
    """Full-text keys.

    Attributes:
        terms: Terms or nested key groups.
        conjunction: Conjunction between terms.
        negation: A value indicating whether the group is negated.
    """

    terms: list[Union[str, FullTextKeys]] = []
    conjunction: Conjunction = Conjunction.AND
    negation: bool = False

    @field_validator("conjunction", mode="before")
    @classmethod
    def _normalize_conjunction(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    @property
    def flat_terms(self) -> list[str]:
        return [t for t in self.terms if isinstance(t, str)]

    @property
    def groups(self) -> list[FullTextKeys]:
        return [t for t in self.terms if isinstance(t, FullTextKeys)]

    @staticmethod
    def normalize(
        keys: str | list | FullTextKeys | None,
    ) -> FullTextKeys | None:
        if keys is None or isinstance(keys, FullTextKeys):
            return keys
        if isinstance(keys, str):
            return FullTextKeys(terms=[keys])
        return FullTextKeys(terms=list(keys))


class FacetQueryType(str, Enum):
    STRING = "string"
    RANGE = "range"
    DATE = "date"
    GRANULAR = "granular"
    NESTED = "nested"


class FacetOperator(str, Enum):
    AND = "and"
    OR = "or"


class NestedFacetOptions(DataModel):
    """Nested facet options.

    Attributes:
        path: Nested object path. Defaults to the facet field root.
        group_field: Field inside the nested object to group by.
        group_value: Group field value the bucket is built against.
    """

    path: str | None = None
    group_field: str
    group_value: Scalar


class FacetRequest(DataModel):
    """Facet request.

    Attributes:
        id: Facet identifier, also used as aggregation name.
        field: Field the buckets are computed on.
        query_type: Facet query type.
        operator: Facet operator, ``or`` facets stay multi-selectable.
        limit: Maximum number of buckets, 0 for unlimited.
        min_count: Minimum bucket document count.
        missing: A value indicating whether a missing bucket is returned.
        granularity: Histogram granularity name or interval.
        date_display: A value indicating whether dates are bucketed
            on calendar intervals.
        min_value: Histogram lower bound.
        max_value: Histogram upper bound.
        active_values: Selected values of nested facets.
        exclude: A value indicating whether the selection is negated.
        nested: Nested facet options.
    """

    id: str
    field: str
    query_type: FacetQueryType = FacetQueryType.STRING
    operator: FacetOperator = FacetOperator.AND
    limit: int = 0
    min_count: int = 1
    missing: bool = False
    granularity: str | int | float | None = None
    date_display: bool | None = None
    min_value: Any = None
    max_value: Any = None
    active_values: list[Any] = []
    exclude: bool = False
    nested: NestedFacetOptions | None = None

    @field_validator("operator", mode="before")
    @classmethod
    def _normalize_operator(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortSpec(DataModel):
    """Sort spec.

    Attributes:
        field: Field identifier or special sort field.
        direction: Sort direction.
    """

    field: str
    direction: SortDirection = SortDirection.ASC

    @field_validator("direction", mode="before")
    @classmethod
    def _normalize_direction(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value

    def __str__(self) -> str:
        return f"{self.field} {self.direction.value}"


class MoreLikeThisRequest(DataModel):
    """More like this request.

    Attributes:
        id: Reference entity id.
        fields: Fields used to find similar documents.
        translatable: A value indicating whether the entity has translations.
        translations: Document id per available language.
        default_id: Document id of the entity's default language.
    """

    id: str
    fields: list[str] = []
    translatable: bool = False
    translations: dict[str, str] = dict()
    default_id: str | None = None


class AutocompleteRequest(DataModel):
    """Autocomplete request.

    Attributes:
        field: Full-text field suggestions are built from.
        user_input: Complete user input.
        incomplete_key: Last, incomplete word of the input.
        limit: Maximum number of suggestions.
        live_results: Number of live results returned with suggestions.
    """

    field: str
    user_input: str = ""
    incomplete_key: str | None = None
    limit: int = 10
    live_results: int = 0


class SearchQuery(DataModel):
    """Search query.

    Attributes:
        collection: Collection name.
        conditions: Filter condition tree.
        keys: Full-text keys.
        parse_mode: Full-text parse mode.
        original_keys: Keys as typed by the user.
        fulltext_fields: Full-text fields to search, all when None.
        languages: Languages results are restricted to.
        limit: Page size.
        offset: Page offset.
        sorts: Sort specs.
        facets: Facet requests.
        exclude_source_fields: Fields excluded from returned sources.
        more_like_this: More like this request.
        autocomplete: Autocomplete request.
        random_seed: Seed for random sorting.
    """

    collection: str | None = None
    conditions: ConditionGroup = ConditionGroup()
    keys: str | FullTextKeys | None = None
    parse_mode: ParseMode = ParseMode.TERMS
    original_keys: str | None = None
    fulltext_fields: list[str] | None = None
    languages: list[str] | None = None
    limit: int | None = None
    offset: int | None = None
    sorts: list[SortSpec] = []
    facets: list[FacetRequest] = []
    exclude_source_fields: list[str] = []
    more_like_this: MoreLikeThisRequest | None = None
    autocomplete: AutocompleteRequest | None = None
    random_seed: int | None = None

    @field_validator("keys", mode="before")
    @classmethod
    def _normalize_keys(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return FullTextKeys(terms=list(value))
        return value

    def add_sort(
        self,
        field: str,
        direction: str | SortDirection = SortDirection.ASC,
    ) -> SearchQuery:
        self.sorts.append(SortSpec(field=field, direction=direction))
        return self

    def add_facet(self, facet: FacetRequest | dict) -> SearchQuery:
        if isinstance(facet, dict):
            facet = FacetRequest.from_dict(facet)
        self.facets.append(facet)
        return self


ConditionGroup.model_rebuild()
FullTextKeys.model_rebuild()
