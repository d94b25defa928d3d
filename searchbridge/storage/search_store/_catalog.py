from __future__ import annotations

from typing import Any, Iterable

from searchbridge.core._yaml_loader import YamlLoader
from searchbridge.core.exceptions import BadRequestError, UnresolvedFieldError

from ._helper import Helper
from ._models import SearchField, SearchFieldType

_FALSE_VALUES = ("false", "0", "")


class FieldCatalog:
    """Read-only lookup of the fields a collection declares.

    The catalog never changes after construction and can be shared by
    concurrent queries.
    """

    language_field: str
    id_field: str
    datasource_field: str
    current_language: str
    default_language: str
    max_bucket_size: int

    _fields: dict[str, SearchField]

    def __init__(
        self,
        fields: Iterable[SearchField | dict] | dict[str, Any] | None = None,
        language_field: str = "search_api_language",
        id_field: str = "id",
        datasource_field: str = "search_api_datasource",
        current_language: str = "en",
        default_language: str = "und",
        max_bucket_size: int = 10000,
    ):
        """Initialize.

        Args:
            fields:
                Field list, or a dictionary from field id to
                a type name or field definition.
            language_field:
                Field holding the document language.
            id_field:
                Field holding the item id.
            datasource_field:
                Field holding the document datasource.
            current_language:
                Language of the current request.
            default_language:
                Language of items without a language.
            max_bucket_size:
                Bucket size used for unlimited facets.
        """
        self.language_field = language_field
        self.id_field = id_field
        self.datasource_field = datasource_field
        self.current_language = current_language
        self.default_language = default_language
        self.max_bucket_size = max_bucket_size
        self._fields = dict()
        for field in self._convert_fields(fields):
            self._fields[field.id] = field
        for implicit in (language_field, datasource_field):
            if implicit not in self._fields:
                self._fields[implicit] = SearchField(
                    id=implicit, type=SearchFieldType.STRING
                )

    @property
    def fields(self) -> list[SearchField]:
        return list(self._fields.values())

    def get(self, field_id: str) -> SearchField | None:
        return self._fields.get(field_id)

    def require(self, field_id: str) -> SearchField:
        field = self.get(field_id)
        if field is None:
            raise UnresolvedFieldError(field_id)
        return field

    def resolve(self, field_id: str) -> SearchField:
        """Find the field or, for nested paths, its root field.

        Raises:
            UnresolvedFieldError:
                Neither the field nor its root is declared.
        """
        field = self.get(field_id)
        if field is not None:
            return field
        root = self.get(Helper.get_nested_field(field_id))
        if root is not None:
            return root
        raise UnresolvedFieldError(field_id)

    def type_of(self, field_id: str) -> SearchFieldType | None:
        field = self.get(field_id)
        return field.type if field is not None else None

    def is_full_text(self, field_id: str) -> bool:
        return self.type_of(field_id) == SearchFieldType.TEXT

    def fulltext_fields(self) -> list[SearchField]:
        return [
            f for f in self._fields.values() if f.type == SearchFieldType.TEXT
        ]

    def is_list_field(self, field_id: str, values: Any = None) -> bool:
        """Check whether a field holds more than one value.

        Declared cardinality decides first. Without it, the shape of
        the supplied values decides.
        """
        field = self.get(field_id)
        if (
            field is not None
            and field.cardinality is not None
            and field.cardinality != 1
        ):
            return True
        if values is None:
            return False
        if not isinstance(values, (list, tuple)):
            values = [values]
        if len(values) > 1:
            return True
        return len(values) == 1 and isinstance(values[0], (list, tuple, dict))

    def is_nested_field(self, field_id: str) -> bool:
        root = Helper.get_nested_field(field_id)
        return self.type_of(root) == SearchFieldType.NESTED_OBJECT

    def coerce(self, field_id: str, value: Any) -> Any:
        """Convert a value to the declared type of a field.

        Lists and pairs are converted element by element. Values
        that cannot be converted are returned unchanged.
        """
        if isinstance(value, list):
            return [self.coerce(field_id, v) for v in value]
        if isinstance(value, tuple):
            return tuple(self.coerce(field_id, v) for v in value)
        if value is None:
            return None
        field_type = self.type_of(field_id)
        try:
            if field_type == SearchFieldType.BOOLEAN:
                if isinstance(value, str):
                    return value.strip().lower() not in _FALSE_VALUES
                return bool(value)
            if field_type == SearchFieldType.INTEGER:
                return int(value)
            if field_type == SearchFieldType.DECIMAL:
                return float(value)
            if field_type == SearchFieldType.STRING:
                return str(value)
        except (TypeError, ValueError):
            return value
        return value

    def coerce_bound(self, field_id: str, value: Any) -> Any:
        """Convert a range bound to a number.

        Numbers are kept as given and numeric strings are parsed as an
        integer first. Date strings such as ``2020-01-01`` are kept as
        given.
        """
        if not isinstance(value, str):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            return value

    @staticmethod
    def from_dict(obj: dict | None) -> FieldCatalog:
        if obj is None:
            return FieldCatalog()
        if not isinstance(obj, dict):
            raise BadRequestError("Field catalog format error")
        obj = dict(obj)
        fields = obj.pop("fields", None)
        return FieldCatalog(fields=fields, **obj)

    @staticmethod
    def from_file(path: str) -> FieldCatalog:
        return FieldCatalog.from_dict(YamlLoader.load(path=path))

    @staticmethod
    def _convert_fields(
        fields: Iterable[SearchField | dict] | dict[str, Any] | None,
    ) -> list[SearchField]:
        if fields is None:
            return []
        if isinstance(fields, dict):
            converted = []
            for id, definition in fields.items():
                if isinstance(definition, SearchField):
                    converted.append(definition)
                elif isinstance(definition, dict):
                    converted.append(
                        SearchField.from_dict({"id": id, **definition})
                    )
                else:
                    converted.append(SearchField(id=id, type=definition))
            return converted
        converted = []
        for field in fields:
            if isinstance(field, SearchField):
                converted.append(field)
            elif isinstance(field, dict):
                converted.append(SearchField.from_dict(field))
            else:
                raise BadRequestError(
                    f"Field definition {field!r} not supported"
                )
        return converted
