import datetime
import json
from collections.abc import Mapping
from typing import Any, List, Optional

from loguru import logger

from consulcfg.pipeline.kv_record import KVRecord
from consulcfg.utils.errors import EncodingError, InternalConsistencyError, InvalidRootError


def _json_default(value: Any) -> Any:
    # TOML and YAML both decode dates/times to native objects
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_leaf(key: str, value: Any) -> str:
    """
    Encode a terminal node as a Consul value.

    Strings are passed through untouched, everything else (numbers, booleans,
    null, lists, lists of tables) becomes compact JSON text.
    """
    if isinstance(value, str):
        return value
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            sort_keys=True,
            allow_nan=False,
            default=_json_default,
        )
    except (TypeError, ValueError) as e:
        raise EncodingError(key, value, e) from e


def join_key(prefix: str, key: str, separator: str = "/") -> str:
    return f"{prefix}{separator}{key}" if prefix else key


def _entries(node: Mapping, path: str, sort_keys: bool, separator: str) -> list:
    items = list(node.items())
    for k, _ in items:
        if not isinstance(k, str):
            raise InternalConsistencyError(path, node)
    if sort_keys:
        items.sort(key=lambda kv: kv[0])
    return [(join_key(path, k, separator), v) for k, v in items]


def flatten_to_kv(
        prefix: str,
        data: Any,
        output: Optional[List[KVRecord]] = None,
        sort_keys: bool = False,
        separator: str = "/",
) -> List[KVRecord]:
    """Flatten a decoded config mapping into KV records using DFS (no recursion limits).

    Records are appended to ``output`` (a new list when omitted) and the same
    list is returned, so several documents can be folded into one result.
    Mappings are walked, every other node becomes exactly one record.
    """
    if output is None:
        output = []

    if not isinstance(data, Mapping):
        raise InvalidRootError(type(data).__name__)

    start = len(output)

    # Stack contains: (key path, node)
    # Reverse to maintain order in stack (DFS)
    stack = list(reversed(_entries(data, prefix, sort_keys, separator)))

    while stack:
        path, val = stack.pop()

        if isinstance(val, Mapping):
            stack.extend(reversed(_entries(val, path, sort_keys, separator)))
        else:
            output.append(KVRecord(key=path, flags=0, value=encode_leaf(path, val)))

    logger.debug("Flattened {} key(s) under prefix '{}'", len(output) - start, prefix)
    return output
