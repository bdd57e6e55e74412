from typing import List, Sequence, Tuple

from loguru import logger

from consulcfg.pipeline.kv_record import KVRecord
from consulcfg.pipeline.transforms.flattener import Flattenizer
from consulcfg.pipeline.transforms.parser import ContentParser


def calculate_kv_records(
    inputs: Sequence[Tuple[str, str]],
    parser: ContentParser,
    flattener: Flattenizer,
) -> List[KVRecord]:
    """
    Parses and flattens every input in order into one combined list of records.
    The first failing input aborts the whole run.
    """
    output: List[KVRecord] = []

    for name, raw in inputs:
        tree = parser.process(raw, source_name=name)
        flattener.process(tree, output)
        logger.debug("Processed {} ({} KV pair(s) so far)", name, len(output))

    return output
