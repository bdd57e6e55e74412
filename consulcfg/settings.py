import json
import os
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from consulcfg.utils.errors import DecodeError
from consulcfg.utils.handlers.file_formats import FileFormatsHandler

CONFIG_ENV_VAR = "CONSUL_CFG_CONFIG"


class KVSettings(BaseModel):
    """
    Options for one `kv` run. Built from the optional settings file,
    with command line values taking precedence.
    """
    input_type: str = ""
    prefix: str = ""
    files: List[str] = Field(default_factory=list)
    output: Optional[str] = None
    sort_keys: bool = False

    model_config = ConfigDict(
        extra="ignore",         # ignore unknown fields
        validate_default=True,  # validate defaults
    )

    @field_validator("input_type", mode="before")
    @classmethod
    def validate_input_type(cls, v: Optional[str]) -> str:
        # Raises UnsupportedFormat, which pydantic lets through untouched
        return FileFormatsHandler.validate_format(v)


def load_config(path: Union[str, Path, None] = None) -> dict:
    """
    Load default settings from a JSON file.
    Falls back to the CONSUL_CFG_CONFIG environment variable, returns {} when neither is set.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return {}

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open(encoding="utf-8") as f:
        try:
            cfg = json.load(f)
        except json.JSONDecodeError as e:
            raise DecodeError("json", e, str(path)) from e

    if not isinstance(cfg, dict):
        raise DecodeError("json", "settings file must contain an object", str(path))
    return cfg
