from typing import Any

import hcl2
from lark.exceptions import LarkError

from consulcfg.models.decoder import ConfigDecoder


class HclDecoder(ConfigDecoder):
    """
    Decoder for HashiCorp Configuration Language.
    Blocks are decoded as lists of dicts, so they end up JSON encoded as a single value.
    Needs python-hcl2 4.x, later releases keep the quotes around string values.
    """

    @property
    def errors(self) -> tuple:
        return (LarkError, ValueError)

    def loads(self, content: str) -> Any:
        return hcl2.loads(content)
