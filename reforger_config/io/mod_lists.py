"""
Mod list import and export.

Mod lists travel between servers as JSON or YAML arrays of mod objects, CSV
with a modId,name,version,required header, or plain text with one workshop id
(or workshop URL) per line. Entries without a valid id are dropped and ids are
upper-cased.
"""

import csv
import io
import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import ErrorContext, ModListError
from ..logging_config import get_logger
from ..models.server import Mod, ServerConfig
from ..server.mods import is_valid_mod_id, mod_id_from_url
from .files import ContentFormat, format_from_extension, read_config_text

logger = get_logger(__name__)

CSV_HEADER = ["modId", "name", "version", "required"]


def _mod_from_mapping(item: Any) -> Mod | None:
    if not isinstance(item, dict) or not isinstance(item.get("modId"), str):
        return None
    mod_id = item["modId"].strip()
    if not is_valid_mod_id(mod_id):
        logger.debug("Dropping mod with invalid id", mod_id=mod_id)
        return None
    return Mod(
        mod_id=mod_id.upper(),
        name=item["name"] if isinstance(item.get("name"), str) else None,
        version=item["version"] if isinstance(item.get("version"), str) else None,
        required=item["required"] if isinstance(item.get("required"), bool) else None,
    )


def _parse_structured(content: str, fmt: ContentFormat) -> list[Mod]:
    try:
        parsed = json.loads(content) if fmt == ContentFormat.JSON else yaml.safe_load(content)
    except (ValueError, yaml.YAMLError) as e:
        raise ModListError(
            f"Could not decode {fmt.value} mod list: {e}",
            context=ErrorContext(operation="parse_mod_list"),
            content_format=fmt.value,
        ) from e

    items = parsed if isinstance(parsed, list) else [parsed]
    return [mod for mod in (_mod_from_mapping(item) for item in items) if mod is not None]


def _parse_csv(content: str) -> list[Mod]:
    reader = csv.reader(io.StringIO(content.strip()))
    rows = [row for row in reader if any(cell.strip() for cell in row)]
    if not rows:
        return []

    headers = [cell.strip().lower() for cell in rows[0]]
    if "modid" not in headers:
        raise ModListError(
            "CSV mod list needs a header row with a modId column",
            context=ErrorContext(operation="parse_mod_list"),
            content_format=ContentFormat.CSV.value,
        )
    columns = {name: headers.index(name) for name in ("modid", "name", "version", "required") if name in headers}

    def cell(row: list[str], name: str) -> str:
        index = columns.get(name)
        if index is None or index >= len(row):
            return ""
        return row[index].strip()

    mods = []
    for row in rows[1:]:
        mod_id = cell(row, "modid")
        if not is_valid_mod_id(mod_id):
            if mod_id:
                logger.debug("Dropping mod with invalid id", mod_id=mod_id)
            continue
        required = cell(row, "required").lower()
        mods.append(
            Mod(
                mod_id=mod_id.upper(),
                name=cell(row, "name") or None,
                version=cell(row, "version") or None,
                required=required in ("true", "1") if required else None,
            )
        )
    return mods


def _parse_text(content: str) -> list[Mod]:
    mods = []
    for line in content.splitlines():
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        mod_id = mod_id_from_url(entry) or entry
        if is_valid_mod_id(mod_id):
            mods.append(Mod(mod_id=mod_id.upper()))
        else:
            logger.debug("Dropping line that is not a mod id", line=entry)
    return mods


def parse_mod_list(content: str, fmt: ContentFormat | str = ContentFormat.TEXT) -> list[Mod]:
    """
    Parse mod list content.

    Args:
        content: File content
        fmt: Content format; JSON and YAML accept an array of mod objects or a single object

    Returns:
        Mods with valid ids, in file order

    Raises:
        ModListError: If JSON/YAML content cannot be decoded or a CSV header lacks modId
    """
    fmt = ContentFormat(fmt)
    if fmt in (ContentFormat.JSON, ContentFormat.YAML):
        mods = _parse_structured(content, fmt)
    elif fmt == ContentFormat.CSV:
        mods = _parse_csv(content)
    else:
        mods = _parse_text(content)
    logger.debug("Mod list parsed", format=fmt.value, count=len(mods))
    return mods


def format_mod_list(mods: Iterable[Mod], fmt: ContentFormat | str = ContentFormat.JSON) -> str:
    """Render mods in the given format; text output lists ids only."""
    fmt = ContentFormat(fmt)
    mods = list(mods)

    if fmt == ContentFormat.JSON:
        return json.dumps([mod.to_json_dict() for mod in mods], indent=2) + "\n"
    if fmt == ContentFormat.YAML:
        return yaml.safe_dump([mod.to_json_dict() for mod in mods], sort_keys=False)
    if fmt == ContentFormat.CSV:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for mod in mods:
            required = "" if mod.required is None else str(mod.required).lower()
            writer.writerow([mod.mod_id, mod.name or "", mod.version or "", required])
        return buffer.getvalue()
    return "".join(f"{mod.mod_id}\n" for mod in mods)


def load_mod_list_file(path: str | Path, fmt: ContentFormat | str | None = None) -> list[Mod]:
    """
    Read a mod list file; the format defaults to the one implied by the extension.

    Raises:
        ConfigFileError: If the file cannot be read
        ModListError: If the content cannot be parsed
    """
    file_path = Path(path)
    resolved = ContentFormat(fmt) if fmt else (format_from_extension(file_path) or ContentFormat.TEXT)
    return parse_mod_list(read_config_text(file_path), resolved)


def extract_mods(config: ServerConfig | dict[str, Any]) -> list[Mod]:
    """
    Mods declared by a configuration, as a model or a decoded dict.

    Raises:
        ModListError: If a decoded dict has no game section
    """
    if isinstance(config, ServerConfig):
        return [mod.model_copy() for mod in config.game.mods]

    game = config.get("game") if isinstance(config, dict) else None
    if not isinstance(game, dict):
        raise ModListError(
            "Configuration has no game section to extract mods from",
            context=ErrorContext(operation="extract_mods"),
        )
    return [Mod.model_validate(item) for item in game.get("mods") or [] if isinstance(item, dict) and "modId" in item]
