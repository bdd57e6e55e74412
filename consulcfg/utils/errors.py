from typing import Any, Optional


class ConsulCfgError(Exception):
    """Base class for every error that aborts a conversion run."""


class UnsupportedFormat(ConsulCfgError):
    def __init__(self, format_type: Any, available: Optional[list] = None):
        self.format_type = format_type
        self.available = available or []
        options = ", ".join(f"`{f}`" for f in self.available)
        super().__init__(f"Invalid input file format - {format_type}. Available options are {options}")


class InputUnavailable(ConsulCfgError):
    def __init__(self, name: str, reason: Any):
        self.name = name
        super().__init__(f"error opening input file '{name}' - {reason}")


class DecodeError(ConsulCfgError):
    """Raised when the raw content is not valid for the declared format."""

    def __init__(self, format_type: str, reason: Any, source_name: Optional[str] = None):
        self.format_type = format_type
        self.source_name = source_name
        where = f" in '{source_name}'" if source_name else ""
        super().__init__(f"error parsing {format_type} input{where} - {reason}")


class EncodingError(ConsulCfgError):
    def __init__(self, key: str, value: Any, reason: Any):
        self.key = key
        self.value = value
        super().__init__(f"error while marshalling value for '{key}': {value!r} err: {reason}")


class InternalConsistencyError(ConsulCfgError):
    """A mapping-like node could not be read as a mapping with string keys."""

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        super().__init__(f"mapping at '{key}' does not have string keys: {value!r}")


class InvalidRootError(ConsulCfgError):
    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"config root must be a mapping, got {kind}")
