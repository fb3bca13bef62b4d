"""
Exception hierarchy for reforger-config.

The validation engine never raises for bad configuration values; it reports
them as issues. The exceptions below are raised by the collaborators around
it (file helpers, mod list import, scenario parsing, the builder) when a
caller asks for something that cannot be produced.
"""

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from datetime import datetime
from typing import Any

from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ErrorContext:
    """
    Contextual information for error handling.

    Provides structured context for error reporting and debugging.
    """

    file_path: str | None = None
    operation: str | None = None
    field: str | None = None
    timestamp: datetime = dataclass_field(default_factory=datetime.now)
    metadata: dict[str, Any] = dataclass_field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for logging."""
        return {
            "file_path": self.file_path,
            "operation": self.operation,
            "field": self.field,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


class ReforgerConfigError(Exception):
    """
    Base exception for all reforger-config errors.

    Provides structured error handling with context and metadata
    for proper error categorization and debugging.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        details: dict[str, Any] | None = None,
        user_friendly: str | None = None,
    ):
        """
        Initialize reforger-config error.

        Args:
            message: Technical error message
            context: Error context information
            details: Additional error details
            user_friendly: User-friendly error message
        """
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.details = details or {}
        self.user_friendly = user_friendly or message
        self.timestamp = datetime.now()

        self._log_error()

    def _log_error(self):
        """Log the error with structured context."""
        logger.debug(
            "reforger-config error raised",
            error_type=self.__class__.__name__,
            message=self.message,
            context=self.context.to_dict(),
            details=self.details,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for machine-readable output."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "user_friendly": self.user_friendly,
            "context": self.context.to_dict(),
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class ConfigFileError(ReforgerConfigError):
    """Configuration file missing, unreadable, undecodable or in an unsupported format."""

    def __init__(self, message: str, context: ErrorContext | None = None, file_path: str | None = None, **kwargs):
        super().__init__(message, context, **kwargs)
        self.file_path = file_path
        if file_path:
            self.details["file_path"] = file_path


class ModListError(ReforgerConfigError):
    """Mod list content that cannot be read in the requested format."""

    def __init__(self, message: str, context: ErrorContext | None = None, content_format: str | None = None, **kwargs):
        super().__init__(message, context, **kwargs)
        self.content_format = content_format
        if content_format:
            self.details["content_format"] = content_format


class ScenarioError(ReforgerConfigError):
    """Malformed mission resource reference or unknown scenario code."""

    def __init__(self, message: str, context: ErrorContext | None = None, scenario: str | None = None, **kwargs):
        super().__init__(message, context, **kwargs)
        self.scenario = scenario
        if scenario:
            self.details["scenario"] = scenario


class BuilderError(ReforgerConfigError):
    """The configuration builder was asked to produce an invalid value."""

    def __init__(self, message: str, context: ErrorContext | None = None, setting: str | None = None, **kwargs):
        super().__init__(message, context, **kwargs)
        self.setting = setting
        if setting:
            self.details["setting"] = setting


def format_error(error: BaseException) -> str:
    """Return a short operator-facing message like 'ConfigFileError: detail'."""
    if isinstance(error, ReforgerConfigError):
        return f"{error.__class__.__name__}: {error.user_friendly}"
    msg = str(error).strip()
    return f"{error.__class__.__name__}: {msg}" if msg else error.__class__.__name__
