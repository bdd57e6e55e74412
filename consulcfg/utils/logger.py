import os
import sys
from typing import Optional

from loguru import logger

LOG_LEVEL_ENV_VAR = "CONSUL_CFG_LOG_LEVEL"
LOG_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"


def setup_logging(level: Optional[str] = None, verbose: bool = False) -> None:
    """Route loguru to stderr only, stdout is reserved for the JSON output."""
    if verbose:
        level = "DEBUG"
    level = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or "WARNING").upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
