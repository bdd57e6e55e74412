from typing import Any

import yaml

from consulcfg.models.decoder import ConfigDecoder, stringify_keys


class YamlDecoder(ConfigDecoder):

    @property
    def errors(self) -> tuple:
        return (yaml.YAMLError,)

    def loads(self, content: str) -> Any:
        # YAML allows ints/bools as keys (e.g. `80: http`), config keys are always strings
        return stringify_keys(yaml.safe_load(content))
