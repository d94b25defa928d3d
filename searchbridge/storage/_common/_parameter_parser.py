from typing import Any


class ParameterParser:
    @staticmethod
    def get_collection_parameter(
        parameter: Any,
        collection: str | None,
        is_parameter_dict: bool = False,
    ) -> Any:
        """Pick the value configured for a collection.

        A parameter can be given once for every collection or as a
        dictionary keyed by collection name. With ``is_parameter_dict``
        the parameter is itself a dictionary, so it is only treated as
        per-collection when the collection entry is a dictionary too.
        """
        if not isinstance(parameter, dict) or collection not in parameter:
            return parameter
        value = parameter[collection]
        if is_parameter_dict and not isinstance(value, dict):
            return parameter
        return value
