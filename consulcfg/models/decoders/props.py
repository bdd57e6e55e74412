from typing import Any, Dict

import javaproperties

from consulcfg.models.decoder import ConfigDecoder


class PropsDecoder(ConfigDecoder):
    """
    Decoder for JAVA .properties files.

    Dotted keys are nested the same way a config loader exposes them,
    `db.host=localhost` becomes {"db": {"host": "localhost"}}.
    """

    @property
    def errors(self) -> tuple:
        return (ValueError,)

    def loads(self, content: str) -> Any:
        return nest_dotted_keys(javaproperties.loads(content))


def nest_dotted_keys(flat: Dict[str, str], separator: str = ".") -> Dict[str, Any]:
    result: Dict[str, Any] = {}

    # Assignments apply in file order, the last one for a path wins
    for dotted, value in flat.items():
        parts = dotted.split(separator)
        node = result
        for part in parts[:-1]:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]

        node[parts[-1]] = value

    return result
