"""
Workshop mod helpers: id validation, workshop URLs and duplicate detection.

Workshop URLs look like https://reforger.armaplatform.com/workshop/<MODID>-<Name>;
only the id matters, the name suffix is cosmetic.
"""

import re
from collections.abc import Iterable

from ..logging_config import get_logger
from ..models.server import Mod

logger = get_logger(__name__)

WORKSHOP_BASE_URL = "https://reforger.armaplatform.com/workshop"

MOD_ID_PATTERN = re.compile(r"[0-9A-Fa-f]{16}")
_WORKSHOP_URL_PATTERN = re.compile(rf"{re.escape(WORKSHOP_BASE_URL)}/([0-9A-Fa-f]{{16}})(?:-(.*))?")
_URL_NAME_MAX_LENGTH = 50


def is_valid_mod_id(mod_id: str) -> bool:
    """Check for a 16-character hexadecimal workshop id."""
    return isinstance(mod_id, str) and bool(MOD_ID_PATTERN.fullmatch(mod_id))


def get_effective_mod_name(mod: Mod) -> str:
    """Display name of a mod, falling back to its id."""
    return mod.name or mod.mod_id


def _sanitize_url_name(name: str) -> str:
    cleaned = re.sub(r"[^a-zA-Z0-9\s]", "", name)
    return re.sub(r"\s+", "", cleaned)[:_URL_NAME_MAX_LENGTH]


def get_mod_workshop_url(mod: Mod) -> str:
    """
    Build the workshop URL for a mod.

    Args:
        mod: Mod with an id and optional name

    Returns:
        URL with the sanitized name (or "mod") as the suffix
    """
    safe_name = _sanitize_url_name(mod.name) if mod.name else ""
    return f"{WORKSHOP_BASE_URL}/{mod.mod_id}-{safe_name or 'mod'}"


def mod_id_from_url(url: str) -> str | None:
    """Extract the upper-cased mod id from a workshop URL, or None if it is not one."""
    match = _WORKSHOP_URL_PATTERN.fullmatch(url.strip())
    return match.group(1).upper() if match else None


def mod_from_url(url: str) -> Mod | None:
    """Create a Mod from a workshop URL; the URL suffix becomes the name."""
    match = _WORKSHOP_URL_PATTERN.fullmatch(url.strip())
    if not match:
        logger.debug("Not a workshop URL", url=url)
        return None
    mod_id, suffix = match.groups()
    return Mod(mod_id=mod_id.upper(), name=suffix or None)


def mod_list_from_urls(urls: Iterable[str]) -> list[Mod]:
    """Create mods from workshop URLs, dropping anything that is not a workshop URL."""
    mods = []
    for url in urls or []:
        mod = mod_from_url(url)
        if mod is not None:
            mods.append(mod)
    return mods


def find_duplicate_mod_ids(mods: Iterable[Mod]) -> list[str]:
    """Ids that appear more than once, in order of their second occurrence."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for mod in mods:
        if mod.mod_id in seen and mod.mod_id not in duplicates:
            duplicates.append(mod.mod_id)
        seen.add(mod.mod_id)
    return duplicates
