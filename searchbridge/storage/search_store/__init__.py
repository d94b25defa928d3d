from searchbridge.core.exceptions import (
    BadRequestError,
    MissingFilterValueError,
    TransportFailureError,
    UnresolvedFieldError,
    UnsupportedOperatorError,
)

from ._catalog import FieldCatalog
from ._helper import Helper
from ._hooks import SearchHooks
from ._models import (
    AssembledQuery,
    AutocompleteSuggestion,
    FacetBucket,
    FacetStats,
    ResultItem,
    ResultSet,
    SearchField,
    SearchFieldType,
)
from .component import SearchStore

__all__ = [
    "AssembledQuery",
    "AutocompleteSuggestion",
    "BadRequestError",
    "FacetBucket",
    "FacetStats",
    "FieldCatalog",
    "Helper",
    "MissingFilterValueError",
    "ResultItem",
    "ResultSet",
    "SearchField",
    "SearchFieldType",
    "SearchHooks",
    "SearchStore",
    "TransportFailureError",
    "UnresolvedFieldError",
    "UnsupportedOperatorError",
]
