from typing import Any

NESTED_SEPARATOR = "__"


class Helper:
    @staticmethod
    def build_nested_field(field: str) -> str:
        """Convert a ``__`` separated field id into a dotted path."""
        return field.replace(NESTED_SEPARATOR, ".")

    @staticmethod
    def get_nested_field(field: str) -> str:
        """Return the root segment of a nested field path."""
        return Helper.build_nested_field(field).split(".", 1)[0]

    @staticmethod
    def get_nested_field_base_name(field: str) -> str:
        """Return the last segment of a nested field path."""
        return Helper.build_nested_field(field).rsplit(".", 1)[-1]

    @staticmethod
    def flatten(
        source: dict[str, Any],
        separator: str = NESTED_SEPARATOR,
        prefix: str = "",
    ) -> dict[str, Any]:
        """Flatten mappings into one level keyed by joined paths.

        Only mappings are descended into. Lists and scalars are leaves
        and an empty mapping produces no leaf.
        """
        result: dict[str, Any] = {}
        for key, value in source.items():
            path = f"{prefix}{separator}{key}" if prefix else str(key)
            if isinstance(value, dict):
                result.update(Helper.flatten(value, separator, path))
            else:
                result[path] = value
        return result

    @staticmethod
    def as_list(value: Any) -> list[Any]:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]
