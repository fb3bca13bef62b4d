"""
Issue taxonomy and result records for configuration validation.

Error kinds are hard failures (the server would refuse to start or misbehave);
warning kinds are advisory and never affect success. Both vocabularies are
closed: callers suppress issues by kind using these members or their string
values.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ParserErrorType(str, Enum):
    """Hard validation failures."""

    # Remote console
    RCON_PASSWORD_TOO_SHORT = "RCON_PASSWORD_TOO_SHORT"
    RCON_PASSWORD_CONTAINS_SPACES = "RCON_PASSWORD_CONTAINS_SPACES"
    RCON_INVALID_PERMISSION = "RCON_INVALID_PERMISSION"
    RCON_MAX_CLIENTS_OUT_OF_RANGE = "RCON_MAX_CLIENTS_OUT_OF_RANGE"

    # Game section
    GAME_NAME_TOO_LONG = "GAME_NAME_TOO_LONG"
    ADMIN_PASSWORD_CONTAINS_SPACES = "ADMIN_PASSWORD_CONTAINS_SPACES"
    ADMINS_LIST_TOO_LONG = "ADMINS_LIST_TOO_LONG"

    # Game properties
    SERVER_VIEW_DISTANCE_OUT_OF_RANGE = "SERVER_VIEW_DISTANCE_OUT_OF_RANGE"
    NETWORK_VIEW_DISTANCE_OUT_OF_RANGE = "NETWORK_VIEW_DISTANCE_OUT_OF_RANGE"
    GRASS_DISTANCE_INVALID = "GRASS_DISTANCE_INVALID"

    # Operating section
    SLOT_RESERVATION_TIMEOUT_OUT_OF_RANGE = "SLOT_RESERVATION_TIMEOUT_OUT_OF_RANGE"
    JOIN_QUEUE_MAX_SIZE_OUT_OF_RANGE = "JOIN_QUEUE_MAX_SIZE_OUT_OF_RANGE"

    INVALID_SUPPORTED_PLATFORM = "INVALID_SUPPORTED_PLATFORM"


class ParserWarningType(str, Enum):
    """Advisory findings."""

    # View distance
    VIEW_DISTANCE_EXCEEDS_RECOMMENDED = "VIEW_DISTANCE_EXCEEDS_RECOMMENDED"
    VIEW_DISTANCE_EXCEEDS_MAXIMUM = "VIEW_DISTANCE_EXCEEDS_MAXIMUM"
    VIEW_DISTANCE_BELOW_MINIMUM = "VIEW_DISTANCE_BELOW_MINIMUM"
    NETWORK_VIEW_DISTANCE_MISMATCH = "NETWORK_VIEW_DISTANCE_MISMATCH"

    PLAYER_COUNT_EXCEEDS_RECOMMENDED = "PLAYER_COUNT_EXCEEDS_RECOMMENDED"

    # Performance
    GRASS_DISTANCE_HIGH_PERFORMANCE_IMPACT = "GRASS_DISTANCE_HIGH_PERFORMANCE_IMPACT"
    AI_LIMIT_HIGH_PERFORMANCE_IMPACT = "AI_LIMIT_HIGH_PERFORMANCE_IMPACT"

    # Security
    EMPTY_ADMIN_PASSWORD = "EMPTY_ADMIN_PASSWORD"
    WEAK_RCON_PASSWORD = "WEAK_RCON_PASSWORD"

    # Mods
    INVALID_MOD_ID = "INVALID_MOD_ID"
    DUPLICATE_MOD_ID = "DUPLICATE_MOD_ID"

    # Network
    PUBLIC_ADDRESS_MISMATCH = "PUBLIC_ADDRESS_MISMATCH"
    PORT_CONFLICT = "PORT_CONFLICT"


def _compact(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


@dataclass(frozen=True)
class ParserError:
    """A hard validation failure tied to a configuration field."""

    type: ParserErrorType
    message: str
    field: str | None = None
    value: Any = None
    valid_range: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase form used in JSON reports."""
        return _compact(
            {
                "type": self.type.value,
                "message": self.message,
                "field": self.field,
                "value": self.value,
                "validRange": self.valid_range,
            }
        )


@dataclass(frozen=True)
class ParserWarning:
    """An advisory finding tied to a configuration field."""

    type: ParserWarningType
    message: str
    field: str | None = None
    value: Any = None
    recommended_value: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase form used in JSON reports."""
        return _compact(
            {
                "type": self.type.value,
                "message": self.message,
                "field": self.field,
                "value": self.value,
                "recommendedValue": self.recommended_value,
            }
        )


@dataclass
class ValidationResult:
    """Business rule findings in the order the checks ran."""

    errors: list[ParserError] = field(default_factory=list)
    warnings: list[ParserWarning] = field(default_factory=list)


@dataclass
class ParseResult(Generic[T]):
    """
    Outcome of parsing and validating one configuration.

    errors holds plain-text structural failures; validation_errors holds typed
    business rule failures. data is attached only when success is true.
    """

    success: bool
    data: T | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[ParserWarning] = field(default_factory=list)
    validation_errors: list[ParserError] = field(default_factory=list)

    def __post_init__(self):
        if self.success != (self.data is not None):
            raise ValueError("ParseResult.data must be present if and only if success is true")

    @property
    def has_errors(self) -> bool:
        """True when there is any structural or validation error."""
        return bool(self.errors or self.validation_errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary.

        The configuration itself is included under "data" in its on-disk form
        when the model provides to_json_dict().
        """
        result: dict[str, Any] = {
            "success": self.success,
            "errors": list(self.errors),
            "validationErrors": [error.to_dict() for error in self.validation_errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
        if self.data is not None:
            to_json = getattr(self.data, "to_json_dict", None)
            result["data"] = to_json() if callable(to_json) else self.data
        return result
