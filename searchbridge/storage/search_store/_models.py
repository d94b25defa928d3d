from __future__ import annotations

import copy
from enum import Enum
from typing import Any

from pydantic import ConfigDict, field_validator

from searchbridge.core import DataModel


class SearchFieldType(str, Enum):
    # Full-text search
    TEXT = "text"
    # Exact match
    STRING = "string"

    BOOLEAN = "boolean"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"

    # Structures
    OBJECT = "object"
    NESTED_OBJECT = "nested_object"

    @classmethod
    def _missing_(cls, value: object) -> SearchFieldType | None:
        if isinstance(value, str):
            value = value.lower()
            for member in cls:
                if member.value == value:
                    return member
            alias = _FIELD_TYPE_ALIASES.get(value)
            if alias is not None:
                return cls(alias)
        return None


_FIELD_TYPE_ALIASES = {
    "keyword": "string",
    "uri": "string",
    "token": "string",
    "duration": "integer",
    "long": "integer",
    "float": "decimal",
    "double": "decimal",
}


class SearchField(DataModel):
    """Search field.

    Attributes:
        id: Field identifier.
        type: Declared field type.
        boost: Full-text boost.
        cardinality: Number of values the field holds,
            None when unknown and -1 when unlimited.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    type: SearchFieldType = SearchFieldType.STRING
    boost: float = 1.0
    cardinality: int | None = None


class AssembledQuery(DataModel):
    """Assembled query.

    Attributes:
        query: Root query clause.
        post_filter: Post filter applied after aggregations.
        sort: Sort list of field to direction pairs.
        size: Page size.
        from_: Page offset.
        source: Source filtering.
        aggs: Aggregations keyed by name.
        suggest: Suggesters keyed by name.
    """

    model_config = ConfigDict(frozen=True)

    query: dict[str, Any]
    post_filter: dict[str, Any] | None = None
    sort: list[dict[str, Any]] = []
    size: int = 10
    from_: int = 0
    source: dict[str, Any] | None = None
    aggs: dict[str, Any] = dict()
    suggest: dict[str, Any] | None = None

    def to_body(self) -> dict[str, Any]:
        """Render the search request body."""
        body = self._render()
        body["from"] = body.pop("from_")
        if "source" in body:
            body["_source"] = body.pop("source")
        return body

    def to_args(self) -> dict[str, Any]:
        """Render keyword arguments for the client search call."""
        return self._render()

    def _render(self) -> dict[str, Any]:
        args: dict[str, Any] = {
            "query": copy.deepcopy(self.query),
            "size": self.size,
            "from_": self.from_,
        }
        if self.sort:
            args["sort"] = copy.deepcopy(self.sort)
        if self.post_filter is not None:
            args["post_filter"] = copy.deepcopy(self.post_filter)
        if self.source is not None:
            args["source"] = copy.deepcopy(self.source)
        if self.aggs:
            args["aggs"] = copy.deepcopy(self.aggs)
        if self.suggest:
            args["suggest"] = copy.deepcopy(self.suggest)
        return args


class ResultItem(DataModel):
    """Result item.

    Attributes:
        id: Document id.
        score: Match score.
        fields: Field values keyed by field id. Nested values use
            ``__`` separated paths. Object fields are also kept
            whole under their own id.
    """

    id: str
    score: float | None = None
    fields: dict[str, list[Any]] = dict()

    @field_validator("id", mode="before")
    @classmethod
    def _convert_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value


class FacetBucket(DataModel):
    """Facet bucket.

    Attributes:
        filter: Quoted bucket key, or ``!`` for the missing bucket.
        count: Document count.
        data: Representative source of nested facet buckets.
    """

    filter: str
    count: int
    data: dict[str, Any] | None = None


class FacetStats(DataModel):
    min: float | None = None
    max: float | None = None
    count: int | None = None


class AutocompleteSuggestion(DataModel):
    """Autocomplete suggestion.

    Attributes:
        suggestion_suffix: Text completing the user input.
        suggested_keys: Complete suggested keys.
        user_input: User input the suggestion extends.
        count: Number of matching documents.
    """

    suggestion_suffix: str | None = None
    suggested_keys: str | None = None
    user_input: str = ""
    count: int | None = None


class ResultSet(DataModel):
    """Result set.

    Attributes:
        total: Total number of matching documents.
        items: Result items.
        facets: Facet buckets keyed by facet id.
        facet_stats: Range facet statistics keyed by facet id.
        suggestions: Spelling suggestions.
        autocomplete: Autocomplete suggestions.
        warnings: Problems met while mapping the response.
    """

    total: int = 0
    items: list[ResultItem] = []
    facets: dict[str, list[FacetBucket]] = dict()
    facet_stats: dict[str, FacetStats] = dict()
    suggestions: list[str] = []
    autocomplete: list[AutocompleteSuggestion] = []
    warnings: list[str] = []
