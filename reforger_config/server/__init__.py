"""Producers of server configurations: defaults, the fluent builder and mod helpers."""

from .builder import ServerConfigBuilder
from .defaults import (
    create_default_a2s_config,
    create_default_game_config,
    create_default_game_properties,
    create_default_mission_header,
    create_default_operating_config,
    create_default_rcon_config,
    create_default_server_config,
)
from .mods import (
    WORKSHOP_BASE_URL,
    find_duplicate_mod_ids,
    get_effective_mod_name,
    get_mod_workshop_url,
    is_valid_mod_id,
    mod_from_url,
    mod_id_from_url,
    mod_list_from_urls,
)

__all__ = [
    "WORKSHOP_BASE_URL",
    "ServerConfigBuilder",
    "create_default_a2s_config",
    "create_default_game_config",
    "create_default_game_properties",
    "create_default_mission_header",
    "create_default_operating_config",
    "create_default_rcon_config",
    "create_default_server_config",
    "find_duplicate_mod_ids",
    "get_effective_mod_name",
    "get_mod_workshop_url",
    "is_valid_mod_id",
    "mod_from_url",
    "mod_id_from_url",
    "mod_list_from_urls",
]
