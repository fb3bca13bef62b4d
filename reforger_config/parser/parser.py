"""
Two-phase configuration parser.

Parser.parse() runs the structural checker, then (optionally) the business
rule validator, applies the caller's suppression lists and computes the
overall success flag.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any

from ..logging_config import get_logger
from ..models.server import ServerConfig
from . import structure
from .issues import ParseResult, ParserErrorType, ParserWarningType
from .validator import Validator

logger = get_logger(__name__)

IssueCode = str | ParserErrorType | ParserWarningType


def normalize_codes(codes: Iterable[IssueCode] | None, vocabulary: type[Enum]) -> frozenset[str]:
    """
    Turn a suppression list into a set of known kind codes.

    Args:
        codes: Enum members or their string values
        vocabulary: The enum the codes belong to

    Returns:
        The recognised codes; unknown ones are dropped
    """
    if not codes:
        return frozenset()
    if isinstance(codes, str):
        codes = [codes]

    known = {member.value for member in vocabulary}
    normalized = set()
    for code in codes:
        value = code.value if isinstance(code, Enum) else str(code).strip()
        if value in known:
            normalized.add(value)
        else:
            logger.debug("Ignoring unknown suppression code", code=value, vocabulary=vocabulary.__name__)
    return frozenset(normalized)


class Parser:
    """Parse and validate Arma Reforger server configurations."""

    def __init__(self, validator: Validator | None = None):
        self.validator = validator or Validator()

    def parse(
        self,
        raw: Any,
        validate: bool = True,
        ignore_warnings: Iterable[IssueCode] | None = None,
        ignore_errors: Iterable[IssueCode] | None = None,
    ) -> ParseResult[ServerConfig]:
        """
        Parse and validate a server configuration.

        Args:
            raw: JSON text, a decoded mapping, or a ServerConfig
            validate: Run the business rule validator after the structural check
            ignore_warnings: Warning kinds to drop from the result
            ignore_errors: Validation error kinds to drop from the result

        Returns:
            ParseResult carrying the configuration only when it is usable
        """
        checked = structure.check(raw)
        if not checked.ok:
            return ParseResult(success=False, errors=checked.errors)

        config = checked.data
        if not validate:
            return ParseResult(success=True, data=config)

        validation = self.validator.validate(config)

        suppressed_warnings = normalize_codes(ignore_warnings, ParserWarningType)
        suppressed_errors = normalize_codes(ignore_errors, ParserErrorType)
        warnings = [w for w in validation.warnings if w.type.value not in suppressed_warnings]
        validation_errors = [e for e in validation.errors if e.type.value not in suppressed_errors]

        success = not validation_errors
        logger.debug(
            "Configuration parsed",
            success=success,
            validation_errors=len(validation_errors),
            warnings=len(warnings),
            suppressed=len(validation.errors) - len(validation_errors) + len(validation.warnings) - len(warnings),
        )
        return ParseResult(
            success=success,
            data=config if success else None,
            warnings=warnings,
            validation_errors=validation_errors,
        )
