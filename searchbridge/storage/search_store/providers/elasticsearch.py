"""
Elastic Search.
"""

from __future__ import annotations

__all__ = ["Elasticsearch"]

import random
from typing import Any

from elasticsearch import ApiError, AsyncElasticsearch
from elasticsearch import Elasticsearch as SyncElasticsearch
from elasticsearch import TransportError

from searchbridge.core import Context, Loader, Response, warn
from searchbridge.core.exceptions import (
    BadRequestError,
    TransportFailureError,
)
from searchbridge.ql import (
    AutocompleteRequest,
    Condition,
    FacetQueryType,
    FacetRequest,
    MoreLikeThisRequest,
    SearchQuery,
    SortSpec,
)
from searchbridge.storage._common import (
    ParameterParser,
    SpecialAttribute,
    SpecialSortField,
    StoreProvider,
)

from .._catalog import FieldCatalog
from .._helper import Helper
from .._hooks import SearchHooks
from .._models import (
    AssembledQuery,
    AutocompleteSuggestion,
    FacetBucket,
    FacetStats,
    ResultItem,
    ResultSet,
    SearchFieldType,
)
from . import _elasticsearch_dsl as dsl
from ._elasticsearch_facets import FacetConverter
from ._elasticsearch_filters import FilterConverter
from ._elasticsearch_fulltext import FullTextConverter

DEFAULT_LIMIT = 10
MISSING_FILTER = "!"
AUTOCOMPLETE = "autocomplete"
SPELLING_SUGGESTION = "spelling_suggestion"
SUGGESTION_REVERSE = "suggestion_reverse"


class Elasticsearch(StoreProvider):
    hosts: str | list | dict[str, str | int] | None
    cloud_id: str | None
    api_key: str | list[str] | None
    basic_auth: str | list[str] | None
    bearer_auth: str | None
    opaque_id: str | None
    headers: dict[str, str] | None
    verify_certs: bool | None
    ca_certs: str | None
    client_cert: str | None
    client_key: str | None
    ssl_assert_hostname: str | None
    ssl_assert_fingerprint: str | None

    index: str | None
    catalog: FieldCatalog | dict | str | None
    fuzziness: str | int | None
    suggestion_field: str | dict | None
    hooks: SearchHooks
    nparams: dict[str, Any]

    _client: SyncElasticsearch
    _aclient: AsyncElasticsearch

    _init: bool
    _ainit: bool

    _collection_cache: dict[str, ElasticsearchCollection]

    def __init__(
        self,
        hosts: str | list | dict[str, str | int] | None = None,
        cloud_id: str | None = None,
        api_key: str | list[str] | None = None,
        basic_auth: str | list[str] | None = None,
        bearer_auth: str | None = None,
        opaque_id: str | None = None,
        headers: dict[str, str] | None = None,
        verify_certs: bool | None = None,
        ca_certs: str | None = None,
        client_cert: str | None = None,
        client_key: str | None = None,
        ssl_assert_hostname: str | None = None,
        ssl_assert_fingerprint: str | None = None,
        index: str | None = None,
        catalog: FieldCatalog | dict | str | None = None,
        fuzziness: str | int | None = "auto",
        suggestion_field: str | dict | None = None,
        hooks: SearchHooks | str | None = None,
        nparams: dict[str, Any] = dict(),
        **kwargs,
    ):
        """Initialize.

        Args:
            hosts:
                Elasticsearch hosts.
            cloud_id:
                Elasticsearch cloud id.
            api_key:
                Elasticsearch api key.
            basic_auth:
                Elasticsearch basic auth.
            bearer_auth:
                Elasticsearch bearer auth.
            opaque_id:
                Elasticsearch opaque id.
            headers:
                Elasticsearch http headers.
            verify_certs:
                Elasticsearch verify certs.
            ca_certs:
                Elasticsearch ca certs.
            client_cert:
                Elasticsearch client cert.
            client_key:
                Elasticsearch client key.
            ssl_assert_hostname:
                Elasticsearch ssl assert hostname.
            ssl_assert_fingerprint:
                Elasticsearch ssl assert fingerprint.
            index:
                Elasticsearch index mapped to
                search store collection.
            catalog:
                Field catalog, its definition as a dictionary,
                or the path of a YAML file holding it.
                To specify for multiple collections, use a dictionary
                where the key is the collection name and the value
                is the catalog.
            fuzziness:
                Fuzziness of full-text term matching.
            suggestion_field:
                Full-text field spelling suggestions are built from.
                To specify for multiple collections, use a dictionary
                where the key is the collection name and the value
                is the field.
            hooks:
                Hooks altering queries and results, or the
                ``module:Class`` path of the hooks class.
            nparams:
                Native parameters to Elasticsearch client.
        """
        self.hosts = hosts
        self.cloud_id = cloud_id
        self.api_key = api_key
        self.basic_auth = basic_auth
        self.bearer_auth = bearer_auth
        self.opaque_id = opaque_id
        self.headers = headers
        self.verify_certs = verify_certs
        self.ca_certs = ca_certs
        self.client_cert = client_cert
        self.client_key = client_key
        self.ssl_assert_hostname = ssl_assert_hostname
        self.ssl_assert_fingerprint = ssl_assert_fingerprint

        self.index = index
        self.catalog = catalog
        self.fuzziness = fuzziness
        self.suggestion_field = suggestion_field
        self.hooks = self._load_hooks(hooks)
        self.nparams = nparams

        self._init = False
        self._ainit = False
        self._collection_cache = dict()
        super().__init__(**kwargs)

    @property
    def client(self) -> SyncElasticsearch:
        if not self._init:
            self._client = SyncElasticsearch(**self._get_client_params())
            self._init = True
        return self._client

    @property
    def aclient(self) -> AsyncElasticsearch:
        if not self._ainit:
            self._aclient = AsyncElasticsearch(**self._get_client_params())
            self._ainit = True
        return self._aclient

    def __setup__(self, context: Context | None = None) -> None:
        pass

    async def __asetup__(self, context: Context | None = None) -> None:
        pass

    def _get_client_params(self) -> dict:
        def _add_if_not_none(key, value):
            return {key: value} if value is not None else {}

        def _convert_if_list(value):
            return tuple(value) if isinstance(value, list) else value

        args = {
            **_add_if_not_none("hosts", self.hosts),
            **_add_if_not_none("cloud_id", self.cloud_id),
            **_add_if_not_none("api_key", _convert_if_list(self.api_key)),
            **_add_if_not_none(
                "basic_auth", _convert_if_list(self.basic_auth)
            ),
            **_add_if_not_none("bearer_auth", self.bearer_auth),
            **_add_if_not_none("opaque_id", self.opaque_id),
            **_add_if_not_none("headers", self.headers),
            **_add_if_not_none("verify_certs", self.verify_certs),
            **_add_if_not_none("ca_certs", self.ca_certs),
            **_add_if_not_none("client_cert", self.client_cert),
            **_add_if_not_none("client_key", self.client_key),
            **_add_if_not_none(
                "ssl_assert_hostname", self.ssl_assert_hostname
            ),
            **_add_if_not_none(
                "ssl_assert_fingerprint", self.ssl_assert_fingerprint
            ),
        }

        if self.nparams is not None:
            args.update(self.nparams)

        if "hosts" not in args and "cloud_id" not in args:
            raise BadRequestError("Elasticsearch hosts must be specified")
        return args

    def _load_hooks(self, hooks: SearchHooks | str | None) -> SearchHooks:
        if hooks is None:
            return SearchHooks()
        if isinstance(hooks, str):
            return Loader.load_class(hooks, SearchHooks)()
        if isinstance(hooks, SearchHooks):
            return hooks
        raise BadRequestError("Search hooks format error")

    def _get_collection(
        self,
        collection_name: str | None,
    ) -> ElasticsearchCollection:
        col_name = self._get_collection_name(collection_name, self.index)
        if col_name in self._collection_cache:
            return self._collection_cache[col_name]
        catalog = self._get_catalog(
            ParameterParser.get_collection_parameter(
                self.catalog, col_name, is_parameter_dict=True
            )
        )
        suggestion_field = ParameterParser.get_collection_parameter(
            self.suggestion_field, col_name
        )
        collection = ElasticsearchCollection(
            collection=col_name,
            catalog=catalog,
            fuzziness=self.fuzziness,
            suggestion_field=suggestion_field,
            hooks=self.hooks,
        )
        self._collection_cache[col_name] = collection
        return collection

    def _get_catalog(
        self,
        catalog: FieldCatalog | dict | str | None,
    ) -> FieldCatalog:
        if catalog is None:
            return FieldCatalog()
        if isinstance(catalog, FieldCatalog):
            return catalog
        if isinstance(catalog, dict):
            return FieldCatalog.from_dict(catalog)
        if isinstance(catalog, str):
            return FieldCatalog.from_file(catalog)
        raise BadRequestError("Field catalog format error")

    def _get_query(self, query: SearchQuery | dict) -> SearchQuery:
        if isinstance(query, dict):
            query = SearchQuery.from_dict(query)
        return self.hooks.alter_query(query)

    def compile(
        self,
        query: SearchQuery | dict,
        collection: str | None = None,
        **kwargs: Any,
    ) -> Response[AssembledQuery]:
        query = self._get_query(query)
        col = self._get_collection(collection or query.collection)
        assembled = col.compile(query)
        return Response(result=assembled)

    def query(
        self,
        query: SearchQuery | dict,
        collection: str | None = None,
        **kwargs: Any,
    ) -> Response[ResultSet]:
        query = self._get_query(query)
        col = self._get_collection(collection or query.collection)
        assembled = col.compile(query)
        args = assembled.to_args()
        args.update(kwargs.get("nargs", {}))
        try:
            resp = self.client.search(index=col.index, **args)
        except (ApiError, TransportError) as e:
            raise TransportFailureError("Search request failed.") from e
        return col.map_results(query, resp, args)

    async def aquery(
        self,
        query: SearchQuery | dict,
        collection: str | None = None,
        **kwargs: Any,
    ) -> Response[ResultSet]:
        query = self._get_query(query)
        col = self._get_collection(collection or query.collection)
        assembled = col.compile(query)
        args = assembled.to_args()
        args.update(kwargs.get("nargs", {}))
        try:
            resp = await self.aclient.search(index=col.index, **args)
        except (ApiError, TransportError) as e:
            raise TransportFailureError("Search request failed.") from e
        return col.map_results(query, resp, args)

    def close(
        self,
        **kwargs: Any,
    ) -> Response[None]:
        if self._init:
            self.client.close()
            self._init = False
        return Response(result=None)

    async def aclose(
        self,
        **kwargs: Any,
    ) -> Response[None]:
        if self._ainit:
            await self.aclient.close()
            self._ainit = False
        return Response(result=None)


class OperationConverter:
    """Assemble the Elasticsearch query of a search query."""

    collection: str
    catalog: FieldCatalog
    suggestion_field: str | None
    hooks: SearchHooks

    def __init__(
        self,
        collection: str,
        catalog: FieldCatalog,
        fuzziness: str | int | None = "auto",
        suggestion_field: str | None = None,
        hooks: SearchHooks | None = None,
    ) -> None:
        self.collection = collection
        self.catalog = catalog
        self.suggestion_field = suggestion_field
        self.hooks = hooks or SearchHooks()
        self.filter_converter = FilterConverter(catalog)
        self.fulltext_converter = FullTextConverter(catalog, fuzziness)
        self.facet_converter = FacetConverter(catalog)

    def convert_query(self, query: SearchQuery) -> AssembledQuery:
        size = self.convert_limit(query.limit)
        offset = self.convert_offset(query.offset)

        root, post_filters = self.filter_converter.convert(query.conditions)
        if query.languages is not None:
            language = Condition(
                field=self.catalog.language_field,
                op="IN",
                value=list(query.languages),
            )
            root = root.add_filter(
                self.filter_converter.convert_condition(language)
            )

        if query.autocomplete is None:
            root = root.merge(
                self.fulltext_converter.convert(
                    query.keys, query.parse_mode, query.fulltext_fields
                )
            )

        source = None
        if query.exclude_source_fields:
            source = {"excludes": list(query.exclude_source_fields)}

        if query.more_like_this is not None:
            root = root.add_must(
                self.convert_more_like_this(query.more_like_this, query)
            )

        aggs: dict[str, Any] = {}
        suggest = None
        if query.autocomplete is not None:
            ac = query.autocomplete
            if ac.user_input:
                field = Helper.build_nested_field(ac.field)
                root = root.add_must(
                    {"match": {f"{field}.autocomplete": ac.user_input}}
                )
                aggs[AUTOCOMPLETE] = self.convert_autocomplete_agg(ac)
                suggest = {
                    AUTOCOMPLETE: self.convert_phrase_suggestion(
                        field, ac.user_input
                    )
                }
                size = ac.live_results
        else:
            suggest = self.convert_spelling_suggestion(query.original_keys)

        if query.facets and query.autocomplete is None:
            result = self.facet_converter.convert(query.facets, post_filters)
            aggs.update(result.aggs)
            post_filters = result.post_filters
            if result.root_filters:
                root = root.add_filter(*result.root_filters)

        sort, random_score = self.convert_sorts(query)
        root_query = root.to_dict()
        if random_score is not None:
            root_query = {
                "function_score": {
                    "query": root_query,
                    "random_score": random_score,
                }
            }

        post_filter = None
        if post_filters:
            post_filter = dsl.all_of(*post_filters.values())

        return AssembledQuery(
            query=root_query,
            post_filter=post_filter,
            sort=sort,
            size=size,
            from_=offset,
            source=source,
            aggs=aggs,
            suggest=suggest,
        )

    def convert_limit(self, limit: int | None = None) -> int:
        return limit if limit else DEFAULT_LIMIT

    def convert_offset(self, offset: int | None = None) -> int:
        return offset if offset else 0

    def convert_more_like_this(
        self,
        mlt: MoreLikeThisRequest,
        query: SearchQuery,
    ) -> dict[str, Any]:
        ids = self.convert_more_like_this_ids(mlt, query.languages)
        return {
            "more_like_this": {
                "fields": [Helper.build_nested_field(f) for f in mlt.fields],
                "like": [{"_index": self.collection, "_id": id} for id in ids],
                "max_query_terms": 3,
                "min_doc_freq": 1,
                "min_term_freq": 1,
            }
        }

    def convert_more_like_this_ids(
        self,
        mlt: MoreLikeThisRequest,
        languages: list[str] | None = None,
    ) -> list[str]:
        if not languages:
            languages = [
                self.catalog.current_language,
                self.catalog.default_language,
            ]
        ids: list[str] = []
        if mlt.translatable:
            for language in languages:
                id = mlt.translations.get(language)
                if id is not None and id not in ids:
                    ids.append(id)
        if not ids:
            ids.append(mlt.default_id or mlt.id)
        return ids

    def convert_autocomplete_agg(
        self,
        ac: AutocompleteRequest,
    ) -> dict[str, Any]:
        prefix = ac.incomplete_key or ac.user_input
        return {
            "terms": {
                "field": Helper.build_nested_field(ac.field),
                "include": f"{prefix}.*",
                "size": ac.limit,
            }
        }

    def convert_spelling_suggestion(
        self,
        original_keys: str | None,
    ) -> dict[str, Any] | None:
        if not isinstance(original_keys, str) or not original_keys.strip():
            return None
        field = self.hooks.alter_suggestion_field(self.suggestion_field)
        if not field:
            return None
        return {
            SPELLING_SUGGESTION: self.convert_phrase_suggestion(
                Helper.build_nested_field(field), original_keys.strip()
            )
        }

    def convert_phrase_suggestion(
        self,
        field: str,
        text: str,
    ) -> dict[str, Any]:
        trigram_field = f"{field}.suggestion_trigram"
        reverse_field = f"{field}.suggestion_reverse"
        return {
            "text": text,
            "phrase": {
                "field": trigram_field,
                "size": 1,
                "direct_generator": [
                    {"field": trigram_field, "suggest_mode": "always"},
                    {
                        "field": reverse_field,
                        "suggest_mode": "always",
                        "pre_filter": SUGGESTION_REVERSE,
                        "post_filter": SUGGESTION_REVERSE,
                    },
                ],
            },
        }

    def convert_sorts(
        self,
        query: SearchQuery,
    ) -> tuple[list[dict[str, str]], dict[str, Any] | None]:
        if query.autocomplete is not None:
            return [{SpecialSortField.SCORE: "desc"}], None
        sort: list[dict[str, str]] = []
        random_score = None
        for spec in query.sorts:
            if spec.field == SpecialAttribute.RANDOM:
                random_score = self.convert_random_score(query)
                continue
            sort.append({self.convert_sort_field(spec): spec.direction.value})
        return sort, random_score

    def convert_sort_field(self, spec: SortSpec) -> str:
        if spec.field == SpecialAttribute.SCORE:
            return SpecialSortField.SCORE
        if spec.field == SpecialAttribute.ID:
            return self.catalog.id_field
        self.catalog.resolve(spec.field)
        field = Helper.build_nested_field(spec.field)
        if self.catalog.is_full_text(spec.field):
            return f"{field}.keyword"
        return field

    def convert_random_score(self, query: SearchQuery) -> dict[str, Any]:
        params = self.hooks.alter_random_sort({"seed": query.random_seed})
        seed = params.get("seed")
        if not seed:
            seed = random.randint(1, 2**31 - 1)
        return {"seed": seed, "field": SpecialSortField.SEQ_NO}


class ResultConverter:
    """Map an Elasticsearch response into a result set."""

    catalog: FieldCatalog

    def __init__(self, catalog: FieldCatalog) -> None:
        self.catalog = catalog

    def convert_query(
        self,
        response: Any,
        query: SearchQuery,
    ) -> ResultSet:
        result_set = ResultSet()
        hits_block = response.get("hits") or {}
        result_set.total = self.convert_total(hits_block.get("total"))
        for hit in hits_block.get("hits") or []:
            try:
                result_set.items.append(self.convert_hit(hit))
            except (KeyError, TypeError, AttributeError, ValueError) as e:
                _skip(result_set.warnings, f"Skipped malformed hit: {e!r}")

        aggregations = response.get("aggregations") or {}
        if query.autocomplete is None:
            for facet in query.facets:
                agg = aggregations.get(facet.id)
                if facet.query_type == FacetQueryType.RANGE:
                    stats = self.convert_facet_stats(facet, agg)
                    if stats is not None:
                        result_set.facet_stats[facet.id] = stats
                    continue
                result_set.facets[facet.id] = self.convert_facet(
                    facet, agg, result_set.warnings
                )

        suggest = response.get("suggest") or {}
        result_set.suggestions = self.convert_suggestions(
            suggest.get(SPELLING_SUGGESTION), result_set.warnings
        )
        if query.autocomplete is not None:
            result_set.autocomplete = self.convert_autocomplete(
                query.autocomplete,
                aggregations.get(AUTOCOMPLETE),
                suggest.get(AUTOCOMPLETE),
                result_set.warnings,
            )
        return result_set

    def convert_total(self, total: Any) -> int:
        if isinstance(total, dict):
            total = total.get("value")
        if isinstance(total, int):
            return total
        return 0

    def convert_hit(self, hit: dict[str, Any]) -> ResultItem:
        id = hit["_id"]
        source = hit.get("_source") or {}
        if not isinstance(source, dict):
            raise TypeError(f"Source of hit {id} is not an object")
        fields = {
            key: Helper.as_list(value)
            for key, value in Helper.flatten(source).items()
        }
        for key, value in source.items():
            if self.catalog.type_of(key) in (
                SearchFieldType.OBJECT,
                SearchFieldType.NESTED_OBJECT,
            ):
                fields[key] = Helper.as_list(value)
        return ResultItem(id=id, score=hit.get("_score"), fields=fields)

    def convert_facet(
        self,
        facet: FacetRequest,
        agg: Any,
        warnings: list[str] | None = None,
    ) -> list[FacetBucket]:
        if not isinstance(agg, dict):
            return []
        inner = agg.get(facet.id)
        is_nested = facet.query_type == FacetQueryType.NESTED or (
            facet.nested is not None
            and self.catalog.is_nested_field(facet.field)
        )
        if is_nested:
            # nested -> group filter -> inner aggregation
            inner = _get_path(inner, facet.id, facet.id)
        if not isinstance(inner, dict):
            return []
        is_date = bool(facet.date_display) and facet.query_type in (
            FacetQueryType.DATE,
            FacetQueryType.GRANULAR,
        )
        buckets: list[FacetBucket] = []
        for bucket in inner.get("buckets") or []:
            if (
                not isinstance(bucket, dict)
                or "key" not in bucket
                or not _is_count(bucket.get("doc_count", 0))
            ):
                _skip(
                    warnings,
                    f"Skipped malformed bucket of facet `{facet.id}`: "
                    f"{bucket!r}",
                )
                continue
            count = bucket.get("doc_count", 0)
            if count < facet.min_count:
                continue
            key = bucket["key"]
            if is_date and isinstance(key, (int, float)):
                key = key / 1000
            data = None
            if is_nested:
                hits = _get_path(bucket, facet.id, "hits", "hits")
                if isinstance(hits, list) and hits:
                    data = _get_path(hits[0], "_source")
            buckets.append(
                FacetBucket(
                    filter=self.convert_filter(key),
                    count=count,
                    data=data,
                )
            )
        return buckets

    def convert_filter(self, key: Any) -> str:
        if key == "":
            return MISSING_FILTER
        if isinstance(key, float) and key.is_integer():
            key = int(key)
        if isinstance(key, bool):
            key = str(key).lower()
        return f'"{key}"'

    def convert_facet_stats(
        self,
        facet: FacetRequest,
        agg: Any,
    ) -> FacetStats | None:
        if not isinstance(agg, dict):
            return None
        if facet.nested is not None and self.catalog.is_nested_field(
            facet.field
        ):
            agg = _get_path(agg, facet.id, facet.id)
            if not isinstance(agg, dict):
                return None
        return FacetStats(
            min=_get_path(agg, "min", "value"),
            max=_get_path(agg, "max", "value"),
            count=agg.get("doc_count"),
        )

    def convert_suggestions(
        self,
        entries: Any,
        warnings: list[str] | None = None,
    ) -> list[str]:
        suggestions: list[str] = []
        if entries is None:
            return suggestions
        if not isinstance(entries, list):
            _skip(warnings, f"Skipped malformed suggestions: {entries!r}")
            return suggestions
        for entry in entries:
            options = _get_path(entry, "options") or []
            if not isinstance(entry, dict) or not isinstance(options, list):
                _skip(warnings, f"Skipped malformed suggestion: {entry!r}")
                continue
            for option in options:
                text = _get_path(option, "text")
                if not isinstance(text, str):
                    _skip(
                        warnings,
                        f"Skipped malformed suggestion option: {option!r}",
                    )
                    continue
                if text:
                    suggestions.append(text)
        return suggestions

    def convert_autocomplete(
        self,
        ac: AutocompleteRequest,
        agg: Any,
        suggest: Any,
        warnings: list[str] | None = None,
    ) -> list[AutocompleteSuggestion]:
        suggestions: list[AutocompleteSuggestion] = []
        buckets = agg.get("buckets") if isinstance(agg, dict) else None
        start = len(ac.user_input)
        for bucket in buckets or []:
            if not isinstance(bucket, dict) or "key" not in bucket:
                _skip(
                    warnings,
                    f"Skipped malformed autocomplete bucket: {bucket!r}",
                )
                continue
            count = bucket.get("doc_count")
            suggestions.append(
                AutocompleteSuggestion(
                    suggestion_suffix=str(bucket["key"])[start:],
                    user_input=ac.user_input,
                    count=count if _is_count(count) else None,
                )
            )
        for text in self.convert_suggestions(suggest, warnings):
            suggestions.append(
                AutocompleteSuggestion(
                    suggested_keys=text,
                    user_input=ac.user_input,
                )
            )
        return suggestions


class ElasticsearchCollection:
    index: str
    catalog: FieldCatalog
    hooks: SearchHooks
    op_converter: OperationConverter
    result_converter: ResultConverter

    def __init__(
        self,
        collection: str,
        catalog: FieldCatalog,
        fuzziness: str | int | None = "auto",
        suggestion_field: str | None = None,
        hooks: SearchHooks | None = None,
    ):
        self.index = collection
        self.catalog = catalog
        self.hooks = hooks or SearchHooks()
        self.op_converter = OperationConverter(
            collection=collection,
            catalog=catalog,
            fuzziness=fuzziness,
            suggestion_field=suggestion_field,
            hooks=self.hooks,
        )
        self.result_converter = ResultConverter(catalog=catalog)

    def compile(self, query: SearchQuery) -> AssembledQuery:
        assembled = self.op_converter.convert_query(query)
        return self.hooks.alter_compiled_query(assembled, query)

    def map_results(
        self,
        query: SearchQuery,
        response: Any,
        args: dict[str, Any],
    ) -> Response[ResultSet]:
        body = getattr(response, "body", response)
        result = self.result_converter.convert_query(body, query)
        result = self.hooks.alter_results(result, query, body)
        return Response(
            result=result,
            native=dict(request=args, result=body),
        )


def _get_path(value: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _skip(warnings: list[str] | None, message: str) -> None:
    warn(message)
    if warnings is not None:
        warnings.append(message)
