import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Tuple

from loguru import logger

from consulcfg.pipeline.core import Source
from consulcfg.utils.errors import InputUnavailable

STDIN_NAME = "<stdin>"


class StreamSource(Source):
    """
    Reads every named file, or stdin when no file is given.

    All files are read before anything is parsed, so a missing file aborts
    the run before any decoding happens.
    """

    def __init__(self, files: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None):
        self.files = list(files or [])
        self.stdin = stdin

    def read(self) -> List[Tuple[str, str]]:
        if not self.files:
            stream = self.stdin if self.stdin is not None else sys.stdin
            logger.debug("No input files given, reading from stdin")
            try:
                content = stream.read()
            except (OSError, UnicodeDecodeError) as e:
                raise InputUnavailable(STDIN_NAME, e) from e
            return [(STDIN_NAME, content)]

        inputs = []
        for fname in self.files:
            inputs.append((fname, self._read_file(fname)))
        return inputs

    @staticmethod
    def _read_file(fname: str) -> str:
        path = Path(fname)
        try:
            with path.open('r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailable(fname, e) from e

        logger.debug("Read {} byte(s) from {}", len(content), fname)
        return content
