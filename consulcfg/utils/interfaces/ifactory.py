from abc import ABC
from typing import Dict, Type
from types import ModuleType

from loguru import logger


class IFactory(ABC):
    # Registry to hold subclass references
    _registry: Dict[str, Type] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        # 1. Reset registry if this is a Base Class (like ConfigDecoder)
        if IFactory in cls.__bases__:
            cls._registry = {}
            return

        # 2. Skip abstract helpers
        if ABC in cls.__bases__:
            return

        # 3. Register the Child Class (Plugin)
        # Key = filename (e.g., 'consulcfg.models.decoders.toml' -> 'toml')
        key = cls.__module__.rsplit('.', 1)[-1]

        if key in cls._registry and cls._registry[key] != cls:
            logger.warning("Overwriting registry key '{}' with {}", key, cls.__name__)

        cls._registry[key] = cls

    @classmethod
    def create(cls, *args, **kwargs):
        name = kwargs.pop("name", None)

        # 1. Lazy Load Module if needed
        if name not in cls._registry:
            try:
                cls.load_module(name)
            except ImportError as e:
                logger.debug("[Factory] Could not load module '{}': {}", name, e)

        # 2. Get the specific class (e.g. TomlDecoder)
        target_cls = cls._registry.get(name)
        if not target_cls:
            available = list(cls._registry.keys())
            raise ValueError(f"Class '{name}' not found in registry. Available: {available}")

        return target_cls(*args, **kwargs)

    @classmethod
    def load_module(cls, name: str):
        """
        Override this in the base class (e.g., ConfigDecoder) to define
        where to look for plugins/subclasses.
        """
        pass

    @staticmethod
    def _load_class_from_package_module(module_name: str, package_module: ModuleType) -> None:
        from consulcfg.utils.class_loader import load_class_from_package_module
        load_class_from_package_module(module_name, package_module)
