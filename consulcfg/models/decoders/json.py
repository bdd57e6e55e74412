import json
from typing import Any

from consulcfg.models.decoder import ConfigDecoder


class JsonDecoder(ConfigDecoder):

    @property
    def errors(self) -> tuple:
        return (json.JSONDecodeError,)

    def loads(self, content: str) -> Any:
        if not content.strip():
            return None
        return json.loads(content)
