from typing import Dict, Any, List, Optional
from consulcfg.pipeline.core import Transform
from consulcfg.pipeline.kv_record import KVRecord
from consulcfg.business_logic.kv_pathmap import flatten_to_kv


class Flattenizer(Transform):
    def __init__(self, prefix: str = "", sort_keys: bool = False):
        self.prefix = prefix
        self.sort_keys = sort_keys

    def process(self, data: Dict[str, Any], output: Optional[List[KVRecord]] = None) -> List[KVRecord]:
        return flatten_to_kv(self.prefix, data, output=output, sort_keys=self.sort_keys)
