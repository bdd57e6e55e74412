from dataclasses import dataclass, asdict
from typing import Any, Dict

@dataclass
class KVRecord:
    """
    A single Consul KV pair, shaped like one element of `consul kv export`.
    """
    key: str                    # e.g., "app/database/port"
    flags: int = 0              # reserved by Consul, never set here
    value: str = ""             # e.g., "5432"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
