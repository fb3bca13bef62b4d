"""
Fluent builder for server configurations.

    config = (
        ServerConfigBuilder("My Server")
        .set_bind_port(2301)
        .set_cross_platform(True)
        .set_rcon_password("changeme")
        .add_mods_from_urls(urls)
        .build()
    )
"""

from collections.abc import Iterable
from typing import Any

from ..exceptions import BuilderError
from ..logging_config import get_logger
from ..models.scenario import default_scenario_id
from ..models.server import A2SConfig, GameConfig, GameProperties, Mod, OperatingConfig, RconConfig, ServerConfig
from ..parser.constants import PLAYER_COUNT_ABSOLUTE_MAX, PLAYER_COUNT_MINIMUM
from .defaults import (
    create_default_a2s_config,
    create_default_game_config,
    create_default_game_properties,
    create_default_operating_config,
    create_default_rcon_config,
)
from .mods import get_effective_mod_name, is_valid_mod_id, mod_list_from_urls

logger = get_logger(__name__)

DEFAULT_SERVER_NAME = "Arma Reforger Server"
DEFAULT_BIND_ADDRESS = "0.0.0.0"
DEFAULT_BIND_PORT = 2001
DEFAULT_MAX_PLAYERS = 64


def _check_port(port: int, setting: str) -> int:
    if not isinstance(port, int) or isinstance(port, bool) or not 1 <= port <= 65535:
        raise BuilderError(f"{setting} must be between 1 and 65535, got: {port}", setting=setting)
    return port


class ServerConfigBuilder:
    """
    Step-by-step construction of a ServerConfig.

    Every setter returns the builder so calls can be chained. Ports for the
    query protocol and remote console follow the bind port (base + 1 and
    base + 2). build() returns a new ServerConfig each time it is called.
    """

    def __init__(self, server_name: str = DEFAULT_SERVER_NAME, scenario_id: str | None = None):
        self._initial_name = server_name or DEFAULT_SERVER_NAME
        self._initial_scenario = scenario_id or str(default_scenario_id())
        self.reset()

    def reset(self) -> "ServerConfigBuilder":
        """Restore every setting to its default."""
        self._bind_address = DEFAULT_BIND_ADDRESS
        self._bind_port = DEFAULT_BIND_PORT
        self._public_address: str | None = None
        self._public_port: int | None = None
        self._server_name = self._initial_name
        self._scenario_id = self._initial_scenario
        self._max_players = DEFAULT_MAX_PLAYERS
        self._cross_platform = False
        self._game_password = ""
        self._admin_password = ""
        self._mods: list[Mod] = []
        self._rcon_password = ""
        self._rcon_address: str | None = None
        self._player_save_time = 120
        self._ai_limit = -1
        self._mission_header: dict[str, Any] | None = None
        return self

    # Network

    def set_bind_address(self, address: str) -> "ServerConfigBuilder":
        self._bind_address = address
        return self

    def set_bind_port(self, port: int) -> "ServerConfigBuilder":
        """Set the main port; the query protocol uses port + 1 and the remote console port + 2."""
        self._bind_port = _check_port(port, "bind_port")
        return self

    def set_public_address(self, address: str) -> "ServerConfigBuilder":
        self._public_address = address
        return self

    def set_public_port(self, port: int) -> "ServerConfigBuilder":
        self._public_port = _check_port(port, "public_port")
        return self

    # Game

    def set_server_name(self, name: str) -> "ServerConfigBuilder":
        self._server_name = name
        return self

    def set_scenario_id(self, scenario_id: str) -> "ServerConfigBuilder":
        self._scenario_id = scenario_id
        return self

    def set_max_players(self, max_players: int) -> "ServerConfigBuilder":
        """Set player slots, clamped to the range the server accepts."""
        clamped = max(PLAYER_COUNT_MINIMUM, min(PLAYER_COUNT_ABSOLUTE_MAX, max_players))
        if clamped != max_players:
            logger.info("Max players clamped", requested=max_players, applied=clamped)
        self._max_players = clamped
        return self

    def set_cross_platform(self, enabled: bool) -> "ServerConfigBuilder":
        """True accepts PC, Xbox and PlayStation players; False is PC only."""
        self._cross_platform = enabled
        return self

    def set_game_password(self, password: str) -> "ServerConfigBuilder":
        self._game_password = password
        return self

    def set_admin_password(self, password: str) -> "ServerConfigBuilder":
        self._admin_password = password
        return self

    def set_mission_header(self, header: dict[str, Any]) -> "ServerConfigBuilder":
        self._mission_header = dict(header)
        return self

    # Mods

    def set_mods(self, mods: Iterable[Mod]) -> "ServerConfigBuilder":
        """Replace the mod list."""
        self._mods = []
        return self.add_mods(mods)

    def add_mod(self, mod: Mod) -> "ServerConfigBuilder":
        """
        Append a mod unless one with the same id is already present.

        Raises:
            BuilderError: If the mod id is not a 16-character hexadecimal string
        """
        if not is_valid_mod_id(mod.mod_id):
            raise BuilderError(
                f"Invalid mod ID: {mod.mod_id} (mod: {get_effective_mod_name(mod)})",
                setting="mods",
            )
        if any(existing.mod_id.upper() == mod.mod_id.upper() for existing in self._mods):
            logger.debug("Skipping duplicate mod", mod_id=mod.mod_id)
            return self
        self._mods.append(mod.model_copy())
        return self

    def add_mods(self, mods: Iterable[Mod]) -> "ServerConfigBuilder":
        for mod in mods:
            self.add_mod(mod)
        return self

    def add_mods_from_urls(self, urls: Iterable[str]) -> "ServerConfigBuilder":
        """Add mods from workshop URLs; anything that is not a workshop URL is skipped."""
        return self.add_mods(mod_list_from_urls(urls))

    def clear_mods(self) -> "ServerConfigBuilder":
        self._mods = []
        return self

    # Remote console

    def set_rcon_password(self, password: str) -> "ServerConfigBuilder":
        self._rcon_password = password
        return self

    def set_rcon_address(self, address: str) -> "ServerConfigBuilder":
        self._rcon_address = address
        return self

    # Operating

    def set_player_save_time(self, seconds: int) -> "ServerConfigBuilder":
        self._player_save_time = seconds
        return self

    def set_ai_limit(self, limit: int) -> "ServerConfigBuilder":
        """Set the AI limit; -1 means unlimited."""
        self._ai_limit = limit
        return self

    # Build

    def build_a2s_config(self) -> A2SConfig:
        return create_default_a2s_config(self._bind_port)

    def build_rcon_config(self) -> RconConfig:
        config = create_default_rcon_config(self._bind_port, self._rcon_password)
        if self._rcon_address:
            config.address = self._rcon_address
        return config

    def build_game_properties(self) -> GameProperties:
        properties = create_default_game_properties()
        if self._mission_header is not None:
            properties.mission_header = dict(self._mission_header)
        return properties

    def build_game_config(self) -> GameConfig:
        config = create_default_game_config(self._server_name, self._scenario_id, self._cross_platform)
        config.password = self._game_password
        config.password_admin = self._admin_password
        config.max_players = self._max_players
        config.game_properties = self.build_game_properties()
        config.mods = [mod.model_copy() for mod in self._mods]
        return config

    def build_operating_config(self) -> OperatingConfig:
        config = create_default_operating_config()
        config.player_save_time = self._player_save_time
        config.ai_limit = self._ai_limit
        return config

    def build(self) -> ServerConfig:
        """
        Assemble the complete configuration.

        Returns:
            A new ServerConfig; the public address and port default to the bind values
        """
        return ServerConfig(
            bind_address=self._bind_address,
            bind_port=self._bind_port,
            public_address=self._public_address or self._bind_address,
            public_port=self._public_port or self._bind_port,
            a2s=self.build_a2s_config(),
            rcon=self.build_rcon_config(),
            game=self.build_game_config(),
            operating=self.build_operating_config(),
        )
