from searchbridge.core import Component


class StoreComponent(Component):
    collection: str | None

    def __init__(self, collection: str | None = None, **kwargs):
        self.collection = collection
        super().__init__(**kwargs)
