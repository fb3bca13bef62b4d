"""
Structural checker: the single boundary where untyped input becomes a ServerConfig.

Decoding, the shape check and the coarse range check all report plain-text
errors. Nothing here raises for bad input.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ..logging_config import get_logger
from ..models.server import REQUIRED_ROOT_KEYS, ServerConfig
from . import constants

logger = get_logger(__name__)

INVALID_STRUCTURE_MESSAGE = "Invalid server configuration structure"


@dataclass
class StructureCheck:
    """Result of the structural phase."""

    ok: bool
    data: ServerConfig | None = None
    errors: list[str] = field(default_factory=list)


def _format_location(loc: tuple[Any, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def _decode(raw: str | bytes) -> tuple[Any, str | None]:
    try:
        return json.loads(raw), None
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        return None, f"JSON parsing failed: {e}"


def has_required_shape(data: Any) -> bool:
    """Check that a decoded value looks like a server configuration root."""
    return isinstance(data, dict) and all(key in data for key in REQUIRED_ROOT_KEYS)


def narrow(data: dict[str, Any]) -> tuple[ServerConfig | None, list[str]]:
    """
    Convert a shape-checked dict into a ServerConfig.

    Returns:
        The typed configuration (or None) and one error per field that failed
    """
    try:
        return ServerConfig.model_validate(data), []
    except ValidationError as e:
        errors = []
        for detail in e.errors():
            location = _format_location(tuple(detail["loc"]))
            errors.append(f"{INVALID_STRUCTURE_MESSAGE} at {location}: {detail['msg']}")
        return None, errors


def check_ranges(config: ServerConfig) -> list[str]:
    """Coarse range checks that make a configuration unusable outright."""
    errors = []
    if not constants.PORT_MINIMUM <= config.bind_port <= constants.PORT_MAXIMUM:
        errors.append(
            f"bindPort must be between {constants.PORT_MINIMUM} and {constants.PORT_MAXIMUM}, "
            f"got: {config.bind_port}"
        )
    max_players = config.game.max_players
    if not constants.PLAYER_COUNT_MINIMUM <= max_players <= constants.PLAYER_COUNT_ABSOLUTE_MAX:
        errors.append(
            f"maxPlayers must be between {constants.PLAYER_COUNT_MINIMUM} and "
            f"{constants.PLAYER_COUNT_ABSOLUTE_MAX}, got: {max_players}"
        )
    return errors


def check(raw: Any) -> StructureCheck:
    """
    Run the structural phase on raw input.

    Args:
        raw: JSON text (str or bytes), a decoded value, or a ServerConfig

    Returns:
        StructureCheck with the typed configuration when every step passed
    """
    if isinstance(raw, ServerConfig):
        config = raw
    else:
        data = raw
        if isinstance(raw, (str, bytes, bytearray)):
            data, decode_error = _decode(raw)
            if decode_error:
                logger.debug("Configuration could not be decoded", error=decode_error)
                return StructureCheck(ok=False, errors=[decode_error])

        if not has_required_shape(data):
            logger.debug("Configuration root has the wrong shape", root_type=type(data).__name__)
            return StructureCheck(ok=False, errors=[INVALID_STRUCTURE_MESSAGE])

        config, errors = narrow(data)
        if config is None:
            logger.debug("Configuration sections have the wrong types", error_count=len(errors))
            return StructureCheck(ok=False, errors=errors)

    range_errors = check_ranges(config)
    if range_errors:
        return StructureCheck(ok=False, errors=range_errors)
    return StructureCheck(ok=True, data=config)
