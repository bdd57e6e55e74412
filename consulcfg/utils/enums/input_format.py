from enum import Enum

class InputFormat(Enum):
    TOML = "toml"
    YAML = "yaml"
    HCL = "hcl"
    JSON = "json"
    # JAVA properties
    PROPS = "props"

    @classmethod
    def values(cls) -> list[str]:
        return [f.value for f in cls]
