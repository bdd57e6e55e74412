from typing import Any

import toml

from consulcfg.models.decoder import ConfigDecoder


class TomlDecoder(ConfigDecoder):
    """Decoder for TOML documents. Arrays of tables come back as lists of dicts."""

    @property
    def errors(self) -> tuple:
        return (toml.TomlDecodeError,)

    def loads(self, content: str) -> Any:
        return toml.loads(content)
