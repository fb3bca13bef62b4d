"""
Pydantic-based settings for reforger-config.

Settings come from environment variables (and a local .env file). They only
supply defaults for the CLI; library callers pass options to parse() directly.
"""

import json
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from ..logging_config import VALID_ENVIRONMENTS, VALID_FORMATS, VALID_LEVELS, detect_environment, get_logger
from ..parser.issues import ParserErrorType, ParserWarningType

logger = get_logger(__name__)


def _parse_env_list(candidate: Any) -> list[str]:
    """Parse a string from the environment as JSON list or CSV."""
    if candidate is None:
        return []
    if isinstance(candidate, (list, tuple, set)):
        return [str(item).strip() for item in candidate if str(item).strip()]
    s = str(candidate).strip()
    if not s:
        return []
    try:
        loaded = json.loads(s)
        if isinstance(loaded, list):
            return [str(item).strip() for item in loaded if str(item).strip()]
    except json.JSONDecodeError:
        pass
    return [item.strip() for item in s.split(",") if item.strip()]


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    environment: str = Field(default_factory=detect_environment, description="Runtime environment")
    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="human", description="Log format")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate logging environment."""
        if v not in VALID_ENVIRONMENTS:
            raise ValueError(f"Environment must be one of {VALID_ENVIRONMENTS}, got '{v}'")
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        v_upper = v.upper()
        if v_upper not in VALID_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LEVELS}, got '{v}'")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        if v not in VALID_FORMATS:
            raise ValueError(f"Log format must be one of {VALID_FORMATS}, got '{v}'")
        return v

    model_config = {"env_prefix": "LOGGING_", "case_sensitive": False, "extra": "ignore"}


class ValidationConfig(BaseSettings):
    """
    Defaults for the validate command.

    Ignore lists accept a JSON list or a comma-separated string, for example
    REFORGER_VALIDATION_IGNORE_WARNINGS=EMPTY_ADMIN_PASSWORD,PORT_CONFLICT.
    """

    enabled: bool = Field(default=True, description="Run business rules after the structural check")
    ignore_warnings: Annotated[list[str], NoDecode] = Field(
        default_factory=list, description="Warning kinds suppressed by default"
    )
    ignore_errors: Annotated[list[str], NoDecode] = Field(
        default_factory=list, description="Validation error kinds suppressed by default"
    )

    @field_validator("ignore_warnings", "ignore_errors", mode="before")
    @classmethod
    def parse_code_list(cls, value: object) -> list[str]:
        return [code.upper() for code in _parse_env_list(value)]

    @field_validator("ignore_warnings")
    @classmethod
    def validate_warning_codes(cls, v: list[str]) -> list[str]:
        """Reject codes that are not warning kinds."""
        known = {member.value for member in ParserWarningType}
        unknown = [code for code in v if code not in known]
        if unknown:
            raise ValueError(f"Unknown warning kind(s): {', '.join(unknown)}")
        return v

    @field_validator("ignore_errors")
    @classmethod
    def validate_error_codes(cls, v: list[str]) -> list[str]:
        """Reject codes that are not validation error kinds."""
        known = {member.value for member in ParserErrorType}
        unknown = [code for code in v if code not in known]
        if unknown:
            raise ValueError(f"Unknown error kind(s): {', '.join(unknown)}")
        return v

    model_config = {"env_prefix": "REFORGER_VALIDATION_", "case_sensitive": False, "extra": "ignore"}


class AppConfig(BaseSettings):
    """
    Composite application configuration.

    Aggregates the sub-configurations. Access via get_config().
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "case_sensitive": False, "extra": "ignore"}
