from __future__ import annotations

import importlib
import inspect
from typing import Any

from ._component import Component
from ._provider import Provider
from ._type_converter import TypeConverter
from .exceptions import LoadError
from .manifest import Manifest


class Loader:
    @staticmethod
    def load_class(path: str, base: type) -> Any:
        """Load a class from a module path.

        Args:
            path:
                Module path, optionally suffixed with ``:ClassName``.
            base:
                Base class the loaded class must extend.

        Returns:
            Loaded class.
        """
        class_name = None
        if ":" in path:
            path, class_name = path.split(":", 1)
        try:
            module = importlib.import_module(path)
        except ImportError as e:
            raise LoadError(f"Module {path} could not be loaded") from e
        if class_name is not None:
            cls = getattr(module, class_name, None)
            if cls is None:
                raise LoadError(f"Class {class_name} not found in {path}")
            return cls
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, base)
                and obj is not base
                and obj.__module__ == module.__name__
            ):
                return obj
        raise LoadError(f"No {base.__name__} found in {path}")

    @staticmethod
    def load_provider_instance(
        path: str | None = None,
        parameters: dict[str, Any] = dict(),
    ) -> Provider:
        if path is None:
            return Provider(**parameters)
        provider = Loader.load_class(path, Provider)
        converted_parameters = TypeConverter.convert_args(
            provider.__init__, parameters
        )
        return provider(**converted_parameters)

    @staticmethod
    def load_component(
        path: str,
        handle: str,
    ) -> Component:
        """Load a component declared in a manifest file.

        Args:
            path:
                Manifest file path.
            handle:
                Component handle in the manifest.

        Returns:
            Component bound to its first declared provider.
        """
        manifest = Manifest.parse(path)
        if handle not in manifest.components:
            raise LoadError(f"Component {handle} not found in manifest")
        config = manifest.components[handle]
        component_path = config.type
        if ":" not in component_path:
            component_path = f"{component_path}.component"
        component_class = Loader.load_class(component_path, Component)
        parameters = TypeConverter.convert_args(
            component_class.__init__, dict(config.parameters)
        )
        provider = None
        if config.providers:
            provider_config = next(iter(config.providers.values()))
            provider = dict(
                type=provider_config.type,
                parameters=dict(provider_config.parameters),
            )
        return component_class(
            __handle__=handle,
            __provider__=provider,
            **parameters,
        )
