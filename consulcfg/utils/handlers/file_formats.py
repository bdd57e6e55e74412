from typing import Any, Dict, Optional

from loguru import logger

from consulcfg.models.decoder import ConfigDecoder
from consulcfg.utils.enums.input_format import InputFormat
from consulcfg.utils.errors import DecodeError, UnsupportedFormat


class FileFormatsHandler:

    @staticmethod
    def validate_format(format_type: Optional[str]) -> str:
        """
        Normalize a format name and make sure a decoder exists for it.

        Raises:
            UnsupportedFormat: If the format is not one of toml, yaml, hcl, json, props
        """
        normalized = (format_type or "").strip().lower()
        if normalized not in InputFormat.values():
            raise UnsupportedFormat(format_type, InputFormat.values())
        return normalized

    @staticmethod
    def get_decoder(format_type: str) -> ConfigDecoder:
        format_type = FileFormatsHandler.validate_format(format_type)
        return ConfigDecoder.create(name=format_type)

    @staticmethod
    def convert_string_to_dict(content: str, format_type: str, source_name: Optional[str] = None) -> Dict[str, Any]:
        """
        Convert string content in the given format to a Python dict.

        Args:
            content: Raw document text
            format_type: One of toml, yaml, hcl, json, props
            source_name: Input name, only used in error messages

        Returns:
            The decoded configuration tree

        Raises:
            UnsupportedFormat: If format_type is not supported
            DecodeError: If the content is not valid for the format
        """
        decoder = FileFormatsHandler.get_decoder(format_type)
        logger.debug("Decoding {} as {}", source_name or "<input>", format_type)

        try:
            return decoder.decode(content)
        except decoder.errors as e:
            raise DecodeError(format_type, e, source_name) from e

