# type: ignore

from typing import Any

import pytest

from searchbridge.storage.search_store import (
    BadRequestError,
    FieldCatalog,
    Helper,
    SearchField,
    SearchFieldType,
    UnresolvedFieldError,
)

from ._data import catalog_definition, get_catalog


def test_field_types():
    catalog = get_catalog()
    assert catalog.type_of("title") == SearchFieldType.TEXT
    assert catalog.type_of("brand") == SearchFieldType.STRING
    assert catalog.type_of("specs") == SearchFieldType.NESTED_OBJECT
    assert catalog.type_of("weight") is None
    assert catalog.get("title").boost == 2.0
    assert [f.id for f in catalog.fulltext_fields()] == ["title", "body"]


def test_implicit_fields():
    catalog = FieldCatalog(fields=[{"id": "title", "type": "text"}])
    assert [f.id for f in catalog.fields] == [
        "title",
        "search_api_language",
        "search_api_datasource",
    ]
    assert catalog.type_of("search_api_language") == SearchFieldType.STRING


@pytest.mark.parametrize(
    "type, expected",
    [
        ("Keyword", SearchFieldType.STRING),
        ("uri", SearchFieldType.STRING),
        ("long", SearchFieldType.INTEGER),
        ("double", SearchFieldType.DECIMAL),
        ("nested_object", SearchFieldType.NESTED_OBJECT),
    ],
)
def test_type_aliases(type: str, expected: SearchFieldType):
    assert SearchField(id="f", type=type).type == expected


def test_resolve():
    catalog = get_catalog()
    assert catalog.resolve("title").id == "title"
    assert catalog.resolve("specs__name").id == "specs"
    assert catalog.resolve("meta.origin").id == "meta"
    with pytest.raises(UnresolvedFieldError) as e:
        catalog.resolve("weight__kg")
    assert e.value.field == "weight__kg"
    with pytest.raises(UnresolvedFieldError):
        catalog.require("specs__name")


def test_nested_fields():
    catalog = get_catalog()
    assert catalog.is_nested_field("specs")
    assert catalog.is_nested_field("specs__value")
    assert not catalog.is_nested_field("meta__origin")
    assert not catalog.is_nested_field("weight")


@pytest.mark.parametrize(
    "field, values, expected",
    [
        ("tags", None, True),
        ("color", None, False),
        ("color", "red", False),
        ("color", ["red"], False),
        ("color", ["red", "blue"], True),
        ("color", [["red"]], True),
        ("weight", [{"kg": 1}], True),
    ],
)
def test_is_list_field(field: str, values: Any, expected: bool):
    assert get_catalog().is_list_field(field, values) is expected


@pytest.mark.parametrize(
    "field, value, expected",
    [
        ("published", "false", False),
        ("published", "0", False),
        ("published", "", False),
        ("published", "yes", True),
        ("published", 0, False),
        ("stock", "12", 12),
        ("stock", "twelve", "twelve"),
        ("price", "2.5", 2.5),
        ("color", 5, "5"),
        ("stock", ["1", "2"], [1, 2]),
        ("price", ("1", "2"), (1.0, 2.0)),
        ("title", 5, 5),
        ("color", None, None),
    ],
)
def test_coerce(field: str, value: Any, expected: Any):
    assert get_catalog().coerce(field, value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("10", 10),
        ("2.5", 2.5),
        (3, 3),
        (2.5, 2.5),
        ("9007199254740993", 9007199254740993),
        (9007199254740993, 9007199254740993),
        ("2020-01-01", "2020-01-01"),
    ],
)
def test_coerce_bound(value: Any, expected: Any):
    assert get_catalog().coerce_bound("price", value) == expected


def test_from_file(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "language_field: langcode\n"
        "current_language: de\n"
        "fields:\n"
        "  title:\n"
        "    type: text\n"
        "    boost: 3\n"
        "  created: date\n"
    )
    catalog = FieldCatalog.from_file(str(path))
    assert catalog.language_field == "langcode"
    assert catalog.current_language == "de"
    assert catalog.get("title").boost == 3.0
    assert catalog.type_of("created") == SearchFieldType.DATE
    assert catalog.type_of("langcode") == SearchFieldType.STRING


def test_from_dict_does_not_change_definition():
    definition = dict(catalog_definition)
    FieldCatalog.from_dict(definition)
    assert definition == catalog_definition


@pytest.mark.parametrize("definition", [["title"], [3]])
def test_bad_field_definition(definition: list):
    with pytest.raises(BadRequestError):
        FieldCatalog(fields=definition)


@pytest.mark.parametrize(
    "field, expected",
    [
        ("title", "title"),
        ("specs__name", "specs.name"),
        ("a__b__c", "a.b.c"),
    ],
)
def test_build_nested_field(field: str, expected: str):
    assert Helper.build_nested_field(field) == expected


def test_nested_field_names():
    assert Helper.get_nested_field("specs__name") == "specs"
    assert Helper.get_nested_field("title") == "title"
    assert Helper.get_nested_field_base_name("a__b__c") == "c"
    assert Helper.get_nested_field_base_name("a.b") == "b"


@pytest.mark.parametrize(
    "source, expected",
    [
        ({"a": {"b": 1}}, {"a__b": 1}),
        ({"a": {}}, {}),
        ({"a": [{"b": 1}, {"b": 2}]}, {"a": [{"b": 1}, {"b": 2}]}),
        (
            {"a": {"b": {"c": "x"}, "d": [1]}, "e": None},
            {"a__b__c": "x", "a__d": [1], "e": None},
        ),
    ],
)
def test_flatten(source: dict, expected: dict):
    assert Helper.flatten(source) == expected


def test_as_list():
    assert Helper.as_list(None) == []
    assert Helper.as_list((1, 2)) == [1, 2]
    assert Helper.as_list("a") == ["a"]
