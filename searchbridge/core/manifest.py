from __future__ import annotations

from typing import Any

from ._yaml_loader import YamlLoader
from .data_model import DataModel

__all__ = [
    "ComponentConfig",
    "Manifest",
    "ProviderConfig",
    "MANIFEST_FILE",
    "ManifestMetadata",
]


MANIFEST_FILE = "searchbridge.yaml"


class ManifestMetadata(DataModel):
    name: str | None = None
    description: str | None = None
    version: str | None = None


class ProviderConfig(DataModel):
    type: str
    parameters: dict[str, Any] = dict()


class ComponentConfig(DataModel):
    type: str
    parameters: dict[str, Any] = dict()
    providers: dict[str, ProviderConfig] = dict()


class Manifest(DataModel):
    metadata: ManifestMetadata = ManifestMetadata()
    components: dict[str, ComponentConfig] = dict()

    @staticmethod
    def parse(path: str = MANIFEST_FILE) -> Manifest:
        obj = YamlLoader.load(path=path)
        return Manifest.from_dict(obj)
