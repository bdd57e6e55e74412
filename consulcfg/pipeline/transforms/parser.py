from typing import Dict, Any, Optional
from consulcfg.pipeline.core import Transform
from consulcfg.utils.handlers.file_formats import FileFormatsHandler

class ContentParser(Transform):
    """
    Parses raw file content (TOML/YAML/HCL/JSON/properties) into a Dictionary.
    """
    def __init__(self, format_type: str):
        self.format_type = FileFormatsHandler.validate_format(format_type)

    def process(self, raw_content: Optional[str], source_name: Optional[str] = None) -> Dict[str, Any]:
        if not raw_content:
            return {}
        return FileFormatsHandler.convert_string_to_dict(raw_content, self.format_type, source_name)
