import inspect
import json
from typing import Any, get_args, get_origin, get_type_hints

from .data_model import DataModel


class TypeConverter:
    @staticmethod
    def convert_value(value: Any, expected_type: Any) -> Any:
        if expected_type is None:
            return value
        origin = get_origin(expected_type)

        # Unions: pick the first data model type
        if origin is not None and origin not in (list, tuple, dict):
            if isinstance(value, (dict, str)):
                for arg in get_args(expected_type):
                    if isinstance(arg, type) and issubclass(arg, DataModel):
                        return TypeConverter.convert_value(value, arg)
            return value

        if isinstance(value, list) and origin in (list, tuple):
            elem_type = (
                get_args(expected_type)[0] if get_args(expected_type) else Any
            )
            return [TypeConverter.convert_value(v, elem_type) for v in value]

        if hasattr(expected_type, "from_dict") and callable(
            getattr(expected_type, "from_dict")
        ):
            if isinstance(value, dict):
                return expected_type.from_dict(value)
            if isinstance(value, str):
                return expected_type.from_dict(json.loads(value))
        return value

    @staticmethod
    def convert_args(method, args: dict) -> dict:
        sig = inspect.signature(method)
        hints = get_type_hints(method)
        converted_args: dict = {}
        for param_name in sig.parameters:
            if param_name in args:
                converted_args[param_name] = TypeConverter.convert_value(
                    args[param_name], hints.get(param_name, None)
                )
        return args | converted_args
