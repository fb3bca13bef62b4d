"""Typed configuration models and scenario identifiers."""

from .scenario import (
    OFFICIAL_SCENARIOS,
    MissionResourceReference,
    ScenarioId,
    ScenarioMetadata,
    default_scenario_id,
    get_scenario_metadata,
    list_scenarios,
    normalize_scenario_id,
    parse_scenario_id,
    scenario_from_code,
)
from .server import (
    REQUIRED_ROOT_KEYS,
    A2SConfig,
    GameConfig,
    GameProperties,
    JoinQueueConfig,
    Mod,
    OperatingConfig,
    RconConfig,
    RconPermission,
    ServerConfig,
    SupportedPlatform,
)

__all__ = [
    "OFFICIAL_SCENARIOS",
    "REQUIRED_ROOT_KEYS",
    "A2SConfig",
    "GameConfig",
    "GameProperties",
    "JoinQueueConfig",
    "MissionResourceReference",
    "Mod",
    "OperatingConfig",
    "RconConfig",
    "RconPermission",
    "ScenarioId",
    "ScenarioMetadata",
    "ServerConfig",
    "SupportedPlatform",
    "default_scenario_id",
    "get_scenario_metadata",
    "list_scenarios",
    "normalize_scenario_id",
    "parse_scenario_id",
    "scenario_from_code",
]
