from searchbridge.core import Provider
from searchbridge.core.exceptions import BadRequestError

from ._operation import StoreOperation


class StoreProvider(Provider):
    __operations__: tuple[str, ...] = (
        StoreOperation.COMPILE,
        StoreOperation.QUERY,
        StoreOperation.CLOSE,
    )

    def __supports__(self, feature: str) -> bool:
        return feature in self.__operations__

    def _get_collection_name(
        self,
        collection_name: str | None,
        default: str | None = None,
    ) -> str:
        component = getattr(self, "__component__", None)
        collection_name = (
            collection_name
            or default
            or getattr(component, "collection", None)
        )
        if not collection_name:
            raise BadRequestError("Collection name must be specified")
        return collection_name
