from __future__ import annotations

from typing import Any

from searchbridge.core import Operation


class StoreOperation:
    COMPILE = "compile"
    QUERY = "query"
    CLOSE = "close"

    @staticmethod
    def compile(
        query: Any,
        collection: str | None = None,
        **kwargs,
    ) -> Operation:
        return Operation.normalize(StoreOperation.COMPILE, locals())

    @staticmethod
    def query(
        query: Any,
        collection: str | None = None,
        **kwargs,
    ) -> Operation:
        return Operation.normalize(StoreOperation.QUERY, locals())

    @staticmethod
    def close(**kwargs) -> Operation:
        return Operation.normalize(StoreOperation.CLOSE, locals())
