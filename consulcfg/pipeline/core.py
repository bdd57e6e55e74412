from abc import ABC, abstractmethod
from typing import List, Any, Tuple
from consulcfg.pipeline.kv_record import KVRecord

class Source(ABC):
    @abstractmethod
    def read(self) -> List[Tuple[str, str]]:
        """
        Reads data from the external system (files, stdin).
        Returns a list of (name, raw content) tuples to be processed.
        """
        pass

class Transform(ABC):
    @abstractmethod
    def process(self, *args, **kwargs) -> Any:
        """
        Processes data. Input/Output depends on the specific transform step.
        """
        pass

class Sink(ABC):
    @abstractmethod
    def write(self, row: KVRecord) -> None:
        """
        Accepts a single record and adds it to the internal buffer.
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """
        Forces the buffer to be written to the destination.
        """
        pass
