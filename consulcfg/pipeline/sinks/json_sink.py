import json
import sys
from typing import List, Optional, TextIO

from loguru import logger

from consulcfg.pipeline.core import Sink
from consulcfg.pipeline.kv_record import KVRecord


class JsonSink(Sink):
    """
    Buffers KV records and writes them as one JSON array, the same shape
    `consul kv export` produces, so the output can go to `consul kv import`.
    """

    def __init__(self, stream: Optional[TextIO] = None, indent: int = 2):
        self.stream = stream
        self.indent = indent
        self._buffer: List[KVRecord] = []

    def write(self, row: KVRecord) -> None:
        self._buffer.append(row)

    def render(self) -> str:
        return json.dumps([r.to_dict() for r in self._buffer], indent=self.indent, ensure_ascii=False)

    def flush(self) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(self.render() + "\n")
        stream.flush()
        logger.debug("Wrote {} KV pair(s)", len(self._buffer))
        self._buffer = []
