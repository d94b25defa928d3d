from ._models import (
    AutocompleteRequest,
    Condition,
    ConditionGroup,
    ConditionOp,
    Conjunction,
    FacetOperator,
    FacetQueryType,
    FacetRequest,
    FullTextKeys,
    MoreLikeThisRequest,
    NestedFacetOptions,
    ParseMode,
    Scalar,
    SearchQuery,
    SortDirection,
    SortSpec,
    Value,
    ValueKind,
)

__all__ = [
    "AutocompleteRequest",
    "Condition",
    "ConditionGroup",
    "ConditionOp",
    "Conjunction",
    "FacetOperator",
    "FacetQueryType",
    "FacetRequest",
    "FullTextKeys",
    "MoreLikeThisRequest",
    "NestedFacetOptions",
    "ParseMode",
    "Scalar",
    "SearchQuery",
    "SortDirection",
    "SortSpec",
    "Value",
    "ValueKind",
]
