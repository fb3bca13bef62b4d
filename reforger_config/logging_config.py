"""
Structlog-based logging configuration for reforger-config.

All modules in this package obtain their logger through get_logger() so that
log calls can carry structured key/value context:

    from reforger_config.logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("Configuration validated", errors=0, warnings=2)

The validation engine itself only logs at debug level. The CLI calls
configure_logging() once at startup; library callers may configure structlog
themselves or call configure_logging() with their preferred level.
"""

import logging
import os
import sys
import threading
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.stdlib import BoundLogger, LoggerFactory

VALID_ENVIRONMENTS = ["unit_test", "local", "ci", "production"]
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_FORMATS = ["human", "json"]

SENSITIVE_KEYS = [
    "password",
    "secret",
    "token",
    "credential",
    "passwordadmin",
    "api_key",
]

_configure_lock = threading.Lock()
_LOGGING_SIGNATURE: tuple[str, str] | None = None


def detect_environment() -> str:
    """
    Detect the current environment based on various indicators.

    Returns:
        Environment name: "unit_test", "ci", "local", or "production"
    """
    if "pytest" in sys.modules or "pytest" in sys.argv[0]:
        return "unit_test"

    env = os.getenv("REFORGER_ENV")
    if env and env in VALID_ENVIRONMENTS:
        return env

    if os.getenv("CI"):
        return "ci"

    return "local"


def sanitize_sensitive_data(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive data from log entries.

    Server configurations carry admin, game and remote console passwords.
    This processor redacts any value whose key looks like a credential so
    that those never reach a log sink.

    Args:
        _logger: Logger instance (unused)
        _name: Logger name (unused)
        event_dict: Event dictionary to sanitize

    Returns:
        Sanitized event dictionary
    """

    def sanitize_dict(d: dict[str, Any]) -> dict[str, Any]:
        sanitized: dict[str, Any] = {}
        for key, value in d.items():
            if isinstance(value, dict):
                sanitized[key] = sanitize_dict(value)
            elif isinstance(key, str) and any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = value
        return sanitized

    return sanitize_dict(event_dict)


def add_environment(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Tag each log entry with the detected environment."""
    event_dict.setdefault("environment", detect_environment())
    return event_dict


class StderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever sys.stderr is at emit time."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, _value):
        pass


def _processors(renderer: Any) -> list[Any]:
    return [
        sanitize_sensitive_data,
        add_environment,
        merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]


def configure_logging(level: str = "WARNING", fmt: str = "human", *, force: bool = False) -> None:
    """
    Configure structlog on top of the standard library logging module.

    Logs are written to stderr so that command output on stdout (for example
    JSON validation reports) stays machine readable.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Renderer, "human" for key=value lines or "json"
        force: Reconfigure even if the same configuration is already active
    """
    global _LOGGING_SIGNATURE  # pylint: disable=global-statement

    level = level.upper()
    if level not in VALID_LEVELS:
        raise ValueError(f"Log level must be one of {VALID_LEVELS}, got '{level}'")
    if fmt not in VALID_FORMATS:
        raise ValueError(f"Log format must be one of {VALID_FORMATS}, got '{fmt}'")

    with _configure_lock:
        signature = (level, fmt)
        if _LOGGING_SIGNATURE == signature and not force:
            return

        handler = StderrHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger = logging.getLogger()
        for existing in list(root_logger.handlers):
            if isinstance(existing, StderrHandler):
                root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
        root_logger.setLevel(getattr(logging, level))

        renderer: Any
        if fmt == "json":
            renderer = structlog.processors.JSONRenderer(sort_keys=True)
        else:
            renderer = structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"])

        structlog.configure(
            processors=_processors(renderer),
            context_class=dict,
            logger_factory=LoggerFactory(),
            wrapper_class=BoundLogger,
            cache_logger_on_first_use=False,
        )
        _LOGGING_SIGNATURE = signature

    get_logger(__name__).debug("Logging configured", level=level, format=fmt)


def bind_validation_context(**kwargs: Any) -> None:
    """Bind context (for example the config file being validated) to subsequent log entries."""
    bind_contextvars(**{k: v for k, v in kwargs.items() if v is not None})


def clear_validation_context() -> None:
    """Clear context bound with bind_validation_context()."""
    clear_contextvars()


def get_logger(name: str) -> Any:  # Returns BoundLogger but typed as Any for flexibility
    """
    Get a Structlog logger with the specified name.

    If nobody has configured structlog yet, entries are routed through the
    standard library so the host application's logging setup applies.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured Structlog logger instance
    """
    if not structlog.is_configured():
        structlog.configure(
            processors=_processors(structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"])),
            context_class=dict,
            logger_factory=LoggerFactory(),
            wrapper_class=BoundLogger,
            cache_logger_on_first_use=False,
        )
    return structlog.get_logger(name)
