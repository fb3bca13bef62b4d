"""File helpers for configurations and mod lists."""

from .files import (
    ContentFormat,
    decode_config_text,
    format_from_extension,
    load_config_file,
    parse_format,
    read_config_text,
    save_config_file,
    serialize_config,
)
from .mod_lists import extract_mods, format_mod_list, load_mod_list_file, parse_mod_list

__all__ = [
    "ContentFormat",
    "decode_config_text",
    "extract_mods",
    "format_from_extension",
    "format_mod_list",
    "load_config_file",
    "load_mod_list_file",
    "parse_format",
    "parse_mod_list",
    "read_config_text",
    "save_config_file",
    "serialize_config",
]
