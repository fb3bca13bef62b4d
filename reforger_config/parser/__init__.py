"""
Configuration validation engine.

    from reforger_config.parser import parse

    result = parse(config_text, ignore_warnings=["EMPTY_ADMIN_PASSWORD"])
    if not result.success:
        ...
"""

from collections.abc import Mapping
from typing import Any

from ..models.server import ServerConfig
from . import constants
from .issues import ParseResult, ParserError, ParserErrorType, ParserWarning, ParserWarningType, ValidationResult
from .parser import Parser, normalize_codes
from .structure import StructureCheck, check
from .validator import Validator

PARSE_OPTIONS = ("validate", "ignore_warnings", "ignore_errors")

# Shared default instance; Parser holds no mutable state
parser = Parser()


def parse(raw: Any, options: Mapping[str, Any] | None = None, **kwargs: Any) -> ParseResult[ServerConfig]:
    """
    Parse and validate with the shared parser.

    Args:
        raw: JSON text, a decoded mapping, or a ServerConfig
        options: Optional mapping with validate, ignore_warnings and ignore_errors
        **kwargs: The same options as keywords; they override the mapping

    Returns:
        ParseResult for the input
    """
    merged = dict(options or {})
    merged.update(kwargs)
    unknown = set(merged) - set(PARSE_OPTIONS)
    if unknown:
        raise TypeError(f"Unknown parse option(s): {', '.join(sorted(unknown))}")
    return parser.parse(raw, **merged)


__all__ = [
    "PARSE_OPTIONS",
    "ParseResult",
    "Parser",
    "ParserError",
    "ParserErrorType",
    "ParserWarning",
    "ParserWarningType",
    "StructureCheck",
    "ValidationResult",
    "Validator",
    "check",
    "constants",
    "normalize_codes",
    "parse",
    "parser",
]
