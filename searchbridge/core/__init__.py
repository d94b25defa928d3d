from ._component import Component
from ._context import Context
from ._decorators import operation
from ._loader import Loader
from ._log_helper import logger, warn
from ._operation import Operation
from ._provider import Provider
from ._response import Response
from ._type_converter import TypeConverter
from .data_model import DataModel
from .manifest import Manifest

__all__ = [
    "Component",
    "Context",
    "DataModel",
    "Loader",
    "Manifest",
    "Operation",
    "Provider",
    "Response",
    "TypeConverter",
    "logger",
    "operation",
    "warn",
]
