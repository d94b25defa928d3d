# type: ignore

from typing import Any

import pytest

from searchbridge.ql import FullTextKeys, ParseMode
from searchbridge.storage.search_store import UnresolvedFieldError
from searchbridge.storage.search_store.providers._elasticsearch_fulltext import (
    FullTextConverter,
)

from ._data import get_catalog

fields = ["title^2", "body^1"]


def best_fields(query: str, operator: str = "and") -> dict[str, Any]:
    return {
        "multi_match": {
            "query": query,
            "fields": fields,
            "type": "best_fields",
            "operator": operator,
            "fuzziness": "auto",
        }
    }


def test_terms_require_every_term():
    converter = FullTextConverter(get_catalog(), fuzziness="auto")
    query = converter.convert(["red", "car"], ParseMode.TERMS)
    assert query.to_dict() == {"bool": {"must": [best_fields("red car")]}}


def test_phrase_has_no_fuzziness():
    converter = FullTextConverter(get_catalog(), fuzziness="auto")
    query = converter.convert(["red", "car"], ParseMode.PHRASE)
    assert query.to_dict() == {
        "bool": {
            "must": [
                {
                    "multi_match": {
                        "query": "red car",
                        "fields": fields,
                        "type": "phrase",
                        "operator": "and",
                    }
                }
            ]
        }
    }


def test_direct_query_string():
    converter = FullTextConverter(get_catalog())
    query = converter.convert("red +car", ParseMode.DIRECT)
    assert query.to_dict() == {
        "bool": {
            "must": [
                {
                    "simple_query_string": {
                        "query": "red +car",
                        "fields": fields,
                        "default_operator": "or",
                    }
                }
            ]
        }
    }


@pytest.mark.parametrize(
    "keys, expected",
    [
        (
            FullTextKeys(terms=["red", "car"], conjunction="OR"),
            {"bool": {"must": [best_fields("red car", "or")]}},
        ),
        (
            FullTextKeys(terms=["red"], negation=True),
            {
                "bool": {
                    "must": [{"bool": {"must_not": [best_fields("red")]}}]
                }
            },
        ),
        (
            FullTextKeys(
                terms=[
                    "red",
                    FullTextKeys(terms=["car", "bike"], conjunction="OR"),
                ]
            ),
            {
                "bool": {
                    "must": [
                        best_fields("red"),
                        best_fields("car bike", "or"),
                    ]
                }
            },
        ),
        (
            FullTextKeys(
                terms=[
                    FullTextKeys(terms=["car"]),
                    FullTextKeys(terms=["bike"]),
                ],
                conjunction="OR",
            ),
            {
                "bool": {
                    "should": [best_fields("car"), best_fields("bike")],
                    "minimum_should_match": 1,
                }
            },
        ),
        (
            FullTextKeys(
                terms=[
                    FullTextKeys(terms=["car"]),
                    FullTextKeys(terms=["bike"]),
                ],
                negation=True,
            ),
            {
                "bool": {
                    "must": [
                        {
                            "bool": {
                                "must_not": [
                                    {
                                        "bool": {
                                            "must": [
                                                best_fields("car"),
                                                best_fields("bike"),
                                            ]
                                        }
                                    }
                                ]
                            }
                        }
                    ]
                }
            },
        ),
    ],
)
def test_key_groups(keys: FullTextKeys, expected: dict):
    converter = FullTextConverter(get_catalog())
    assert converter.convert(keys).to_dict() == expected


@pytest.mark.parametrize("keys", [None, [], FullTextKeys()])
def test_empty_keys(keys: Any):
    converter = FullTextConverter(get_catalog())
    assert converter.convert(keys).is_empty()


def test_restricted_fields():
    converter = FullTextConverter(get_catalog(), fuzziness=1)
    query = converter.convert(["red"], fields=["body"])
    assert query.to_dict() == {
        "bool": {
            "must": [
                {
                    "multi_match": {
                        "query": "red",
                        "fields": ["body^1"],
                        "type": "best_fields",
                        "operator": "and",
                        "fuzziness": 1,
                    }
                }
            ]
        }
    }


def test_unknown_field():
    converter = FullTextConverter(get_catalog())
    with pytest.raises(UnresolvedFieldError):
        converter.convert(["red"], fields=["summary"])
