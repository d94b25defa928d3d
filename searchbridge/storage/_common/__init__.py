from ._attributes import SpecialAttribute, SpecialSortField
from ._component import StoreComponent
from ._operation import StoreOperation
from ._parameter_parser import ParameterParser
from ._provider import StoreProvider

__all__ = [
    "ParameterParser",
    "SpecialAttribute",
    "SpecialSortField",
    "StoreComponent",
    "StoreOperation",
    "StoreProvider",
]
