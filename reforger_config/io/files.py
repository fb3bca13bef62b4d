"""
Configuration file helpers.

The validation engine never touches the filesystem; these helpers read and
write configuration files for the CLI and library callers. JSON is the
server's native format; YAML is accepted for hand-maintained sources.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import ConfigFileError, ErrorContext
from ..logging_config import get_logger

logger = get_logger(__name__)


class ContentFormat(str, Enum):
    """Formats understood by the file and mod list helpers."""

    JSON = "json"
    YAML = "yaml"
    CSV = "csv"
    TEXT = "text"


_EXTENSIONS = {
    ".json": ContentFormat.JSON,
    ".yaml": ContentFormat.YAML,
    ".yml": ContentFormat.YAML,
    ".csv": ContentFormat.CSV,
    ".txt": ContentFormat.TEXT,
}

_FORMAT_ALIASES = {
    "json": ContentFormat.JSON,
    "yaml": ContentFormat.YAML,
    "yml": ContentFormat.YAML,
    "csv": ContentFormat.CSV,
    "text": ContentFormat.TEXT,
    "txt": ContentFormat.TEXT,
}


def format_from_extension(path: str | Path) -> ContentFormat | None:
    """Guess the content format from a file extension."""
    return _EXTENSIONS.get(Path(path).suffix.lower())


def parse_format(value: str | ContentFormat) -> ContentFormat:
    """
    Resolve a format name such as "yml" or "txt".

    Raises:
        ValueError: If the name is not a known format
    """
    if isinstance(value, ContentFormat):
        return value
    try:
        return _FORMAT_ALIASES[value.strip().lower()]
    except KeyError:
        raise ValueError(f"Unsupported format '{value}'. Use one of: {', '.join(sorted(_FORMAT_ALIASES))}") from None


def read_config_text(path: str | Path) -> str:
    """
    Read a configuration file as UTF-8 text.

    Raises:
        ConfigFileError: If the file is missing, unreadable or not UTF-8
    """
    file_path = Path(path)
    context = ErrorContext(file_path=str(file_path), operation="read")
    if not file_path.is_file():
        raise ConfigFileError(
            f"Configuration file not found: {file_path}",
            context=context,
            file_path=str(file_path),
        )
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(
            f"Could not read configuration file {file_path}: {e}",
            context=context,
            file_path=str(file_path),
        ) from e


def decode_config_text(text: str, fmt: ContentFormat = ContentFormat.JSON, source: str | None = None) -> Any:
    """
    Decode configuration text without checking its shape.

    Raises:
        ConfigFileError: If the text is not valid JSON or YAML
    """
    context = ErrorContext(file_path=source, operation="decode")
    try:
        if fmt == ContentFormat.YAML:
            return yaml.safe_load(text)
        if fmt == ContentFormat.JSON:
            return json.loads(text)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigFileError(
            f"Could not decode {fmt.value} configuration: {e}",
            context=context,
            file_path=source,
        ) from e
    raise ConfigFileError(
        f"Configuration files must be JSON or YAML, not {fmt.value}",
        context=context,
        file_path=source,
    )


def load_config_file(path: str | Path) -> Any:
    """
    Load and decode a configuration file.

    The format is taken from the extension (.yaml/.yml for YAML); anything
    else is decoded as JSON. The decoded value is returned as-is so that the
    structural checker can judge its shape.

    Raises:
        ConfigFileError: If the file cannot be read or decoded
    """
    file_path = Path(path)
    fmt = format_from_extension(file_path)
    if fmt != ContentFormat.YAML:
        fmt = ContentFormat.JSON
    data = decode_config_text(read_config_text(file_path), fmt, source=str(file_path))
    logger.debug("Configuration file loaded", file=str(file_path), format=fmt.value)
    return data


def _to_plain(config: Any) -> Any:
    to_json = getattr(config, "to_json_dict", None)
    return to_json() if callable(to_json) else config


def serialize_config(config: Any, fmt: ContentFormat = ContentFormat.JSON) -> str:
    """
    Render a configuration (model or plain dict) as text.

    Raises:
        ConfigFileError: If the format is not JSON or YAML
    """
    data = _to_plain(config)
    if fmt == ContentFormat.JSON:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == ContentFormat.YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ConfigFileError(f"Configuration files must be JSON or YAML, not {fmt.value}")


def save_config_file(config: Any, path: str | Path, overwrite: bool = False) -> Path:
    """
    Write a configuration file, picking YAML or JSON from the extension.

    Args:
        config: ServerConfig or plain dict
        path: Destination path; parent directories are created
        overwrite: Replace an existing file

    Returns:
        The path written

    Raises:
        ConfigFileError: If the file exists and overwrite is False, or it cannot be written
    """
    file_path = Path(path)
    context = ErrorContext(file_path=str(file_path), operation="write")
    if file_path.exists() and not overwrite:
        raise ConfigFileError(
            f"Refusing to overwrite existing file: {file_path}",
            context=context,
            file_path=str(file_path),
            user_friendly=f"{file_path} already exists (use --force to overwrite)",
        )

    fmt = ContentFormat.YAML if format_from_extension(file_path) == ContentFormat.YAML else ContentFormat.JSON
    text = serialize_config(config, fmt)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(
            f"Could not write configuration file {file_path}: {e}",
            context=context,
            file_path=str(file_path),
        ) from e

    logger.info("Configuration written", file=str(file_path), format=fmt.value)
    return file_path
