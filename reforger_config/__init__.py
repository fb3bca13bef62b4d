"""
reforger-config: validation and tooling for Arma Reforger dedicated server configurations.

    from reforger_config import parse

    result = parse(open("server.json").read())
    for warning in result.warnings:
        print(warning.type.value, warning.message)
"""

from .exceptions import BuilderError, ConfigFileError, ModListError, ReforgerConfigError, ScenarioError
from .models.server import ServerConfig
from .parser import (
    ParseResult,
    Parser,
    ParserError,
    ParserErrorType,
    ParserWarning,
    ParserWarningType,
    ValidationResult,
    Validator,
    parse,
    parser,
)
from .server.builder import ServerConfigBuilder
from .server.defaults import create_default_server_config

__version__ = "0.1.0"

__all__ = [
    "BuilderError",
    "ConfigFileError",
    "ModListError",
    "ParseResult",
    "Parser",
    "ParserError",
    "ParserErrorType",
    "ParserWarning",
    "ParserWarningType",
    "ReforgerConfigError",
    "ScenarioError",
    "ServerConfig",
    "ServerConfigBuilder",
    "ValidationResult",
    "Validator",
    "__version__",
    "create_default_server_config",
    "parse",
    "parser",
]
