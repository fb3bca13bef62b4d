"""
Default-value constructors for server configuration sections.

Defaults follow the values documented for the dedicated server. Ports are
allocated from a base port: the query protocol uses base + 1 and the remote
console base + 2.
"""

from ..models.server import (
    A2SConfig,
    GameConfig,
    GameProperties,
    OperatingConfig,
    RconConfig,
    RconPermission,
    ServerConfig,
    SupportedPlatform,
)


def create_default_mission_header() -> dict[str, str]:
    """Placeholder mission header values."""
    return {
        "m_sName": "Default Mission",
        "m_sAuthor": "Default Author",
        "m_sSaveFileName": "defaultSave",
    }


def create_default_a2s_config(base_port: int) -> A2SConfig:
    return A2SConfig(address="0.0.0.0", port=base_port + 1)


def create_default_rcon_config(base_port: int, password: str = "") -> RconConfig:
    """
    Remote console bound to localhost.

    Args:
        base_port: Server base port; the remote console uses base_port + 2
        password: Remote console password; empty disables the remote console
    """
    return RconConfig(
        address="127.0.0.1",
        port=base_port + 2,
        password=password,
        permission=RconPermission.ADMIN.value,
        blacklist=[],
        whitelist=[],
        max_clients=16,
    )


def create_default_game_properties() -> GameProperties:
    return GameProperties(
        server_max_view_distance=1600,
        server_min_grass_distance=0,
        network_view_distance=1500,
        disable_third_person=False,
        fast_validation=True,
        battl_eye=True,
        von_disable_ui=False,
        von_disable_direct_speech_ui=False,
        von_can_transmit_cross_faction=False,
        mission_header=create_default_mission_header(),
    )


def create_default_game_config(name: str, scenario_id: str, cross_platform: bool = False) -> GameConfig:
    """
    Game section with 64 player slots.

    Args:
        name: Server display name
        scenario_id: Mission resource reference
        cross_platform: Accept Xbox and PlayStation players as well as PC
    """
    if cross_platform:
        platforms = [SupportedPlatform.PC, SupportedPlatform.XBOX, SupportedPlatform.PLAYSTATION]
    else:
        platforms = [SupportedPlatform.PC]

    return GameConfig(
        name=name,
        password="",
        password_admin="",
        admins=[],
        scenario_id=scenario_id,
        max_players=64,
        visible=True,
        cross_platform=cross_platform,
        supported_platforms=[platform.value for platform in platforms],
        game_properties=create_default_game_properties(),
        mods=[],
        mods_required_by_default=True,
    )


def create_default_operating_config() -> OperatingConfig:
    return OperatingConfig(
        lobby_player_synchronise=True,
        player_save_time=120,
        ai_limit=-1,
        slot_reservation_timeout=60,
        disable_crash_reporter=False,
        disable_server_shutdown=False,
        disable_ai=False,
    )


def create_default_server_config(
    server_name: str,
    scenario_id: str,
    bind_address: str = "0.0.0.0",
    bind_port: int = 2001,
    cross_platform: bool = False,
    rcon_password: str = "",
) -> ServerConfig:
    """
    Complete configuration with sensible defaults for a new server.

    Args:
        server_name: Display name for the server
        scenario_id: Mission resource reference
        bind_address: Address to bind to, 0.0.0.0 for all interfaces
        bind_port: Main server port
        cross_platform: Enable cross-platform play
        rcon_password: Remote console password, empty to disable it

    Returns:
        ServerConfig ready to serialize
    """
    return ServerConfig(
        bind_address=bind_address,
        bind_port=bind_port,
        public_address=bind_address,
        public_port=bind_port,
        a2s=create_default_a2s_config(bind_port),
        rcon=create_default_rcon_config(bind_port, rcon_password),
        game=create_default_game_config(server_name, scenario_id, cross_platform),
        operating=create_default_operating_config(),
    )
