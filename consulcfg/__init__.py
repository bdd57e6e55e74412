from .business_logic.kv_pathmap import flatten_to_kv, encode_leaf
from .pipeline.kv_record import KVRecord

__version__ = "0.1.0"

__all__ = ["flatten_to_kv", "encode_leaf", "KVRecord", "__version__"]
