"""
Pydantic models for an Arma Reforger dedicated server configuration.

Field names follow Python conventions; the on-disk camelCase keys are
declared as aliases, so models accept either spelling and serialize back to
the server's format with to_json_dict(). Unknown keys are preserved.

Values that the business rules inspect (remote console permission, platform
literals, numeric ranges) are typed loosely on purpose: an out-of-range value
must reach the validator and become a typed issue rather than fail here.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SupportedPlatform(str, Enum):
    """Platforms a server can accept players from."""

    PC = "PLATFORM_PC"
    XBOX = "PLATFORM_XBL"
    PLAYSTATION = "PLATFORM_PSN"


class RconPermission(str, Enum):
    """Permission level granted to remote console clients."""

    ADMIN = "admin"
    MONITOR = "monitor"


class ReforgerModel(BaseModel):
    """Base model for every configuration section."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_json_dict(self) -> dict[str, Any]:
        """Dump using the server's camelCase keys, leaving out unset optional values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class A2SConfig(ReforgerModel):
    """Steam query protocol (A2S) binding."""

    address: str = Field(default="0.0.0.0", description="Query protocol bind address")
    port: int = Field(..., description="Query protocol port")


class RconConfig(ReforgerModel):
    """Remote console settings. An empty password disables the remote console."""

    address: str = Field(default="127.0.0.1", description="Remote console bind address")
    port: int = Field(..., description="Remote console port")
    password: str = Field(default="", description="Remote console password")
    permission: str | None = Field(default=None, description="Permission granted to clients")
    blacklist: list[str] = Field(default_factory=list, description="Blocked client identities")
    whitelist: list[str] = Field(default_factory=list, description="Allowed client identities")
    max_clients: int | None = Field(default=None, alias="maxClients", description="Concurrent client limit")


class Mod(ReforgerModel):
    """Workshop add-on reference."""

    mod_id: str = Field(..., alias="modId", description="16-character hexadecimal workshop id")
    name: str | None = Field(default=None, description="Display name")
    version: str | None = Field(default=None, description="Pinned version")
    required: bool | None = Field(default=None, description="Whether clients must load the mod")


class GameProperties(ReforgerModel):
    """Per-scenario gameplay and streaming settings."""

    server_max_view_distance: int = Field(..., alias="serverMaxViewDistance")
    server_min_grass_distance: int = Field(default=0, alias="serverMinGrassDistance")
    network_view_distance: int = Field(..., alias="networkViewDistance")
    disable_third_person: bool = Field(default=False, alias="disableThirdPerson")
    fast_validation: bool = Field(default=True, alias="fastValidation")
    battl_eye: bool = Field(default=True, alias="battlEye")
    von_disable_ui: bool = Field(default=False, alias="VONDisableUI")
    von_disable_direct_speech_ui: bool = Field(default=False, alias="VONDisableDirectSpeechUI")
    von_can_transmit_cross_faction: bool | None = Field(default=None, alias="VONCanTransmitCrossFaction")
    mission_header: dict[str, str | int | float | bool] = Field(default_factory=dict, alias="missionHeader")


class GameConfig(ReforgerModel):
    """Server identity, scenario, player limits and mods."""

    name: str = Field(default="", description="Server display name")
    password: str = Field(default="", description="Join password")
    password_admin: str | None = Field(default="", alias="passwordAdmin", description="In-game admin password")
    admins: list[str] = Field(default_factory=list, description="Admin identity ids")
    scenario_id: str = Field(default="", alias="scenarioId", description="Mission resource reference")
    max_players: int = Field(..., alias="maxPlayers", description="Player slot count")
    visible: bool = Field(default=True, description="Listed in the server browser")
    cross_platform: bool = Field(default=False, alias="crossPlatform")
    supported_platforms: list[str] = Field(default_factory=list, alias="supportedPlatforms")
    game_properties: GameProperties = Field(..., alias="gameProperties")
    mods: list[Mod] = Field(default_factory=list)
    mods_required_by_default: bool | None = Field(default=None, alias="modsRequiredByDefault")


class JoinQueueConfig(ReforgerModel):
    """Player join queue. A max size of 0 disables the queue."""

    max_size: int | None = Field(default=None, alias="maxSize")


class OperatingConfig(ReforgerModel):
    """Server runtime behaviour."""

    lobby_player_synchronise: bool = Field(default=True, alias="lobbyPlayerSynchronise")
    player_save_time: int = Field(default=120, alias="playerSaveTime")
    ai_limit: int = Field(default=-1, alias="aiLimit", description="Negative means unlimited")
    slot_reservation_timeout: int | None = Field(default=None, alias="slotReservationTimeout")
    disable_crash_reporter: bool | None = Field(default=None, alias="disableCrashReporter")
    disable_server_shutdown: bool | None = Field(default=None, alias="disableServerShutdown")
    disable_ai: bool | None = Field(default=None, alias="disableAI")
    disable_navmesh_streaming: bool | list[str] | None = Field(default=None, alias="disableNavmeshStreaming")
    join_queue: JoinQueueConfig | None = Field(default=None, alias="joinQueue")


class ServerConfig(ReforgerModel):
    """Configuration root of a dedicated server."""

    bind_address: str = Field(..., alias="bindAddress")
    bind_port: int = Field(..., alias="bindPort")
    public_address: str = Field(default="", alias="publicAddress")
    public_port: int | None = Field(default=None, alias="publicPort")
    a2s: A2SConfig
    rcon: RconConfig
    game: GameConfig
    operating: OperatingConfig


# Top-level keys that must be present before a value is treated as a server configuration
REQUIRED_ROOT_KEYS = ("bindAddress", "bindPort", "a2s", "rcon", "game", "operating")
