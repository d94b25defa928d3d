from __future__ import annotations

from typing import Any

from searchbridge.ql import Conjunction, FullTextKeys, ParseMode

from .._catalog import FieldCatalog
from .._helper import Helper
from . import _elasticsearch_dsl as dsl


class FullTextConverter:
    catalog: FieldCatalog
    fuzziness: str | int | None

    def __init__(
        self,
        catalog: FieldCatalog,
        fuzziness: str | int | None = "auto",
    ) -> None:
        self.catalog = catalog
        self.fuzziness = fuzziness

    def convert(
        self,
        keys: str | list | FullTextKeys | None,
        parse_mode: ParseMode = ParseMode.TERMS,
        fields: list[str] | None = None,
    ) -> dsl.BoolQuery:
        """Convert full-text keys into query clauses.

        Args:
            keys:
                Full-text keys.
            parse_mode:
                Parse mode of the keys.
            fields:
                Full-text fields to search, every catalog
                full-text field when None.

        Returns:
            Bool query holding the full-text clauses.
        """
        query = dsl.BoolQuery()
        keys = FullTextKeys.normalize(keys)
        if keys is None or not keys.terms:
            return query
        query_fields = self.convert_fields(fields)

        if parse_mode == ParseMode.DIRECT:
            text = " ".join(keys.flat_terms)
            if not text:
                return query
            return query.add_must(
                dsl.simple_query_string(text, query_fields, "or")
            )

        if keys.flat_terms:
            query = query.add_must(
                self._convert_terms(
                    parse_mode,
                    keys.flat_terms,
                    query_fields,
                    keys.conjunction,
                    keys.negation,
                )
            )

        if keys.groups and keys.negation:
            clause = self._convert_group(
                parse_mode,
                FullTextKeys(
                    terms=list(keys.groups),
                    conjunction=keys.conjunction,
                    negation=True,
                ),
                query_fields,
            )
            if clause is not None:
                query = query.add_must(clause)
            return query

        for group in keys.groups:
            clause = self._convert_group(parse_mode, group, query_fields)
            if clause is None:
                continue
            if keys.conjunction == Conjunction.AND:
                query = query.add_must(clause)
            else:
                query = query.add_should(clause)
        return query

    def convert_fields(self, fields: list[str] | None = None) -> list[str]:
        if fields is not None:
            for field in fields:
                self.catalog.resolve(field)
        query_fields = []
        for field in self.catalog.fulltext_fields():
            if fields is not None and field.id not in fields:
                continue
            path = Helper.build_nested_field(field.id)
            query_fields.append(f"{path}^{field.boost:g}")
        return query_fields

    def _convert_group(
        self,
        parse_mode: ParseMode,
        group: FullTextKeys,
        query_fields: list[str],
    ) -> dict[str, Any] | None:
        if group.flat_terms:
            return self._convert_terms(
                parse_mode,
                group.flat_terms,
                query_fields,
                group.conjunction,
                group.negation,
            )
        query = dsl.BoolQuery()
        for sub_group in group.groups:
            clause = self._convert_group(parse_mode, sub_group, query_fields)
            if clause is None:
                continue
            if group.conjunction == Conjunction.AND:
                query = query.add_must(clause)
            else:
                query = query.add_should(clause)
        if query.is_empty():
            return None
        if group.negation:
            return dsl.negate(query.to_dict())
        return query.to_dict()

    def _convert_terms(
        self,
        parse_mode: ParseMode,
        terms: list[str],
        query_fields: list[str],
        conjunction: Conjunction,
        negation: bool,
    ) -> dict[str, Any]:
        operator = "and" if conjunction == Conjunction.AND else "or"
        if parse_mode == ParseMode.PHRASE:
            clause = dsl.multi_match(
                " ".join(terms),
                query_fields,
                type="phrase",
                operator=operator,
            )
        else:
            clause = dsl.multi_match(
                " ".join(terms),
                query_fields,
                type="best_fields",
                operator=operator,
                fuzziness=self.fuzziness,
            )
        if negation:
            return dsl.negate(clause)
        return clause
