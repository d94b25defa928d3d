# type: ignore

from typing import Any

import pytest

from searchbridge.ql import (
    AutocompleteRequest,
    ConditionGroup,
    FacetRequest,
    MoreLikeThisRequest,
    SearchQuery,
)
from searchbridge.storage.search_store import (
    AssembledQuery,
    SearchHooks,
    UnresolvedFieldError,
)

from ._providers import SearchStoreProvider, get_component


def compile_query(
    query: SearchQuery | dict,
    **parameters: Any,
) -> AssembledQuery:
    store = get_component(SearchStoreProvider.ELASTICSEARCH, **parameters)
    return store.compile(query=query).result


def test_default_size_with_offset():
    assembled = compile_query(SearchQuery(offset=20))
    assert assembled.size == 10
    assert assembled.from_ == 20
    body = assembled.to_body()
    assert body["size"] == 10
    assert body["from"] == 20


def test_empty_query():
    assembled = compile_query(SearchQuery())
    assert assembled.to_args() == {
        "query": {"bool": {}},
        "size": 10,
        "from_": 0,
    }


def test_limit_and_source_excludes():
    query = SearchQuery(limit=25, exclude_source_fields=["body"])
    body = compile_query(query).to_body()
    assert body["size"] == 25
    assert body["_source"] == {"excludes": ["body"]}


def test_dict_query():
    assembled = compile_query(
        {
            "keys": ["red", "car"],
            "conditions": {
                "conjunction": "AND",
                "conditions": [{"field": "color", "op": "=", "value": "red"}],
            },
        }
    )
    assert assembled.query["bool"]["filter"] == [
        {"term": {"color": {"value": "red"}}}
    ]
    assert assembled.query["bool"]["must"][0]["multi_match"]["query"] == (
        "red car"
    )


def test_compile_is_idempotent():
    query = SearchQuery(keys=["red"], languages=["en", "de"])
    query.conditions.add_condition("color", ["red", "blue"], "IN")
    query.add_facet(FacetRequest(id="brand", field="brand", operator="or"))
    store = get_component(SearchStoreProvider.ELASTICSEARCH)
    first = store.compile(query=query).result
    second = store.compile(query=query).result
    assert first.to_args() == second.to_args()
    assert len(query.conditions.conditions) == 1


def test_languages_filter():
    assembled = compile_query(SearchQuery(languages=["en", "und"]))
    assert assembled.query == {
        "bool": {
            "filter": [{"terms": {"search_api_language": ["en", "und"]}}]
        }
    }


def test_languages_filter_with_or_conditions():
    conditions = ConditionGroup(conjunction="OR")
    conditions.add_condition("color", "red").add_condition("color", "blue")
    assembled = compile_query(
        SearchQuery(conditions=conditions, languages=["en"])
    )
    assert assembled.query == {
        "bool": {
            "should": [
                {"term": {"color": {"value": "red"}}},
                {"term": {"color": {"value": "blue"}}},
            ],
            "minimum_should_match": 1,
            "filter": [{"terms": {"search_api_language": ["en"]}}],
        }
    }


def test_facet_post_filter():
    query = SearchQuery()
    facet_group = ConditionGroup(conjunction="OR", tags={"facet:color"})
    facet_group.add_condition("color", "red")
    query.conditions.add_group(facet_group)
    query.add_facet({"id": "color", "field": "color", "operator": "or"})
    query.add_facet({"id": "brand", "field": "brand", "operator": "or"})

    assembled = compile_query(query)
    assert assembled.query == {"bool": {}}
    assert assembled.post_filter == {
        "bool": {"filter": [{"term": {"color": {"value": "red"}}}]}
    }
    assert assembled.aggs["color"]["filter"] == {"bool": {}}
    assert assembled.aggs["brand"]["filter"] == {
        "bool": {"filter": [{"term": {"color": {"value": "red"}}}]}
    }


def test_more_like_this_non_translatable():
    mlt = MoreLikeThisRequest(
        id="42",
        fields=["title", "body"],
        translatable=False,
        translations={"en": "42-en", "de": "42-de"},
        default_id="42-und",
    )
    assembled = compile_query(SearchQuery(more_like_this=mlt))
    assert assembled.query["bool"]["must"] == [
        {
            "more_like_this": {
                "fields": ["title", "body"],
                "like": [{"_index": "products", "_id": "42-und"}],
                "max_query_terms": 3,
                "min_doc_freq": 1,
                "min_term_freq": 1,
            }
        }
    ]


@pytest.mark.parametrize(
    "languages, expected",
    [
        (None, ["42-en", "42-und"]),
        (["de"], ["42-de"]),
        (["fr"], ["42"]),
    ],
)
def test_more_like_this_translations(languages: Any, expected: list):
    mlt = MoreLikeThisRequest(
        id="42",
        fields=["title"],
        translatable=True,
        translations={"en": "42-en", "und": "42-und", "de": "42-de"},
    )
    query = SearchQuery(more_like_this=mlt, languages=languages)
    assembled = compile_query(query)
    like = assembled.query["bool"]["must"][0]["more_like_this"]["like"]
    assert [item["_id"] for item in like] == expected


def test_sorts():
    query = SearchQuery()
    query.add_sort("$score", "desc")
    query.add_sort("title")
    query.add_sort("$id", "DESC")
    query.add_sort("specs__name")
    query.add_sort("price", "desc")
    assembled = compile_query(query)
    assert assembled.sort == [
        {"_score": "desc"},
        {"title.keyword": "asc"},
        {"id": "desc"},
        {"specs.name": "asc"},
        {"price": "desc"},
    ]


def test_unknown_sort_field():
    query = SearchQuery().add_sort("weight")
    with pytest.raises(UnresolvedFieldError):
        compile_query(query)


def test_random_sort():
    query = SearchQuery(random_seed=5).add_sort("$random")
    assembled = compile_query(query)
    assert assembled.sort == []
    assert assembled.query == {
        "function_score": {
            "query": {"bool": {}},
            "random_score": {"seed": 5, "field": "_seq_no"},
        }
    }


def test_random_sort_without_seed():
    assembled = compile_query(SearchQuery().add_sort("$random"))
    seed = assembled.query["function_score"]["random_score"]["seed"]
    assert isinstance(seed, int)
    assert seed > 0


class Hooks(SearchHooks):
    def alter_query(self, query):
        query.conditions.add_condition("category", "cars")
        return query

    def alter_random_sort(self, params):
        return {"seed": 99}

    def alter_suggestion_field(self, field):
        return "body"

    def alter_compiled_query(self, assembled, query):
        return assembled.model_copy(update={"size": 3})


def test_hooks():
    query = SearchQuery(original_keys="redd car").add_sort("$random")
    assembled = compile_query(query, hooks=Hooks())
    assert assembled.size == 3
    assert assembled.query["function_score"]["query"] == {
        "bool": {"filter": [{"term": {"category": {"value": "cars"}}}]}
    }
    assert assembled.query["function_score"]["random_score"]["seed"] == 99
    suggestion = assembled.suggest["spelling_suggestion"]
    assert suggestion["phrase"]["field"] == "body.suggestion_trigram"


def test_spelling_suggestion():
    query = SearchQuery(keys=["redd", "car"], original_keys="redd car")
    assembled = compile_query(query)
    assert assembled.suggest == {
        "spelling_suggestion": {
            "text": "redd car",
            "phrase": {
                "field": "title.suggestion_trigram",
                "size": 1,
                "direct_generator": [
                    {
                        "field": "title.suggestion_trigram",
                        "suggest_mode": "always",
                    },
                    {
                        "field": "title.suggestion_reverse",
                        "suggest_mode": "always",
                        "pre_filter": "suggestion_reverse",
                        "post_filter": "suggestion_reverse",
                    },
                ],
            },
        }
    }


def test_spelling_suggestion_without_field():
    assembled = compile_query(
        SearchQuery(original_keys="redd car"), suggestion_field=None
    )
    assert assembled.suggest is None


def test_autocomplete():
    query = SearchQuery(
        keys=["ignored"],
        autocomplete=AutocompleteRequest(
            field="title",
            user_input="red ca",
            incomplete_key="ca",
            limit=5,
            live_results=3,
        ),
    )
    query.add_facet({"id": "color", "field": "color"})
    query.add_sort("price")
    assembled = compile_query(query)
    assert assembled.query == {
        "bool": {"must": [{"match": {"title.autocomplete": "red ca"}}]}
    }
    assert assembled.aggs == {
        "autocomplete": {
            "terms": {"field": "title", "include": "ca.*", "size": 5}
        }
    }
    assert assembled.suggest["autocomplete"]["text"] == "red ca"
    assert assembled.size == 3
    assert assembled.sort == [{"_score": "desc"}]


def test_autocomplete_without_input():
    query = SearchQuery(autocomplete=AutocompleteRequest(field="title"))
    assembled = compile_query(query)
    assert assembled.query == {"bool": {}}
    assert assembled.aggs == {}
    assert assembled.suggest is None
    assert assembled.size == 10


def test_per_collection_catalog():
    catalog = {
        "articles": {"fields": {"headline": "text"}},
        "products": {"fields": {"name": "text"}},
    }
    store = get_component(SearchStoreProvider.ELASTICSEARCH, catalog=catalog)
    assembled = store.compile(
        query=SearchQuery(keys=["news"]), collection="articles"
    ).result
    match = assembled.query["bool"]["must"][0]["multi_match"]
    assert match["fields"] == ["headline^1"]

    assembled = store.compile(query=SearchQuery(keys=["car"])).result
    match = assembled.query["bool"]["must"][0]["multi_match"]
    assert match["fields"] == ["name^1"]
