from __future__ import annotations

from typing import Any

from searchbridge.core import Response, operation
from searchbridge.ql import SearchQuery
from searchbridge.storage._common import StoreComponent

from ._models import AssembledQuery, ResultSet


class SearchStore(StoreComponent):
    def __init__(
        self,
        collection: str | None = None,
        **kwargs,
    ):
        """Initialize.

        Args:
            collection:
                Default collection name.
        """
        super().__init__(collection=collection, **kwargs)

    @operation()
    def compile(
        self,
        query: SearchQuery | dict,
        collection: str | None = None,
        **kwargs: Any,
    ) -> Response[AssembledQuery]:
        """Compile query without executing it.

        Args:
            query:
                Search query.
            collection:
                Collection name.

        Returns:
            Assembled backend query.

        Raises:
            UnsupportedOperatorError:
                Condition operator is not supported.
            MissingFilterValueError:
                Condition needs a value.
            UnresolvedFieldError:
                Field is not part of the field catalog.
        """
        raise NotImplementedError

    @operation()
    def query(
        self,
        query: SearchQuery | dict,
        collection: str | None = None,
        **kwargs: Any,
    ) -> Response[ResultSet]:
        """Query documents.

        Args:
            query:
                Search query.
            collection:
                Collection name.

        Returns:
            Result set with items, facets and suggestions.

        Raises:
            TransportFailureError:
                Search request failed.
        """
        raise NotImplementedError

    @operation()
    def close(
        self,
        **kwargs: Any,
    ) -> Response[None]:
        """Close client.

        Returns:
            None.
        """
        raise NotImplementedError

    @operation()
    async def aquery(
        self,
        query: SearchQuery | dict,
        collection: str | None = None,
        **kwargs: Any,
    ) -> Response[ResultSet]:
        """Query documents.

        Args:
            query:
                Search query.
            collection:
                Collection name.

        Returns:
            Result set with items, facets and suggestions.

        Raises:
            TransportFailureError:
                Search request failed.
        """
        raise NotImplementedError

    @operation()
    async def aclose(
        self,
        **kwargs: Any,
    ) -> Response[None]:
        """Close async client.

        Returns:
            None.
        """
        raise NotImplementedError
