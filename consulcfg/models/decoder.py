from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Dict

from consulcfg.utils.interfaces.ifactory import IFactory


class ConfigDecoder(IFactory):
    """
    Base class for all input format decoders (toml, yaml, hcl, ...).
    Subclasses register themselves under their module name.
    """

    @classmethod
    def load_module(cls, name: str):
        # Imported here to avoid circular import issues
        from consulcfg.models import decoders

        cls._load_class_from_package_module(
            module_name=name,
            package_module=decoders
        )

    @abstractmethod
    def loads(self, content: str) -> Any:
        """Parse raw text into native Python objects."""
        pass

    @property
    @abstractmethod
    def errors(self) -> tuple:
        """Exception types the underlying parser raises on invalid input."""
        pass

    def decode(self, content: str) -> Dict[str, Any]:
        data = self.loads(content)
        # Empty documents decode to nothing, treat them as an empty config
        if data is None:
            return {}
        return data


def stringify_keys(node: Any) -> Any:
    """Recursively convert non-string mapping keys (ints, bools, dates) to strings."""
    if isinstance(node, Mapping):
        return {_key_to_str(k): stringify_keys(v) for k, v in node.items()}
    if isinstance(node, list):
        return [stringify_keys(v) for v in node]
    return node


def _key_to_str(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)
