"""
Mission resource references and the official scenario catalogue.

A scenario id in a server configuration renders as "{RESOURCE_ID}path", for
example "{ECC61978EDCC2B5A}Missions/23_Campaign.conf": the resource id of the
game or mod that ships the mission, followed by the mission path inside it.
"""

import re
from dataclasses import dataclass

from ..exceptions import ScenarioError
from ..logging_config import get_logger

logger = get_logger(__name__)

_REFERENCE_PATTERN = re.compile(r"\{([A-Z0-9]+)\}(.+)")


@dataclass(frozen=True)
class MissionResourceReference:
    """A mission resource id plus a relative path within that resource."""

    resource_id: str
    path: str

    def __str__(self) -> str:
        return f"{{{self.resource_id}}}{self.path}"

    @classmethod
    def from_string(cls, resource_string: str):
        """
        Parse the "{RESOURCE_ID}path" form.

        Raises:
            ScenarioError: If the string is not a mission resource reference
        """
        match = _REFERENCE_PATTERN.fullmatch(resource_string)
        if not match:
            raise ScenarioError(
                f"Invalid mission resource format: {resource_string}. Expected format: {{RESOURCE_ID}}path",
                scenario=resource_string,
            )
        resource_id, path = match.groups()
        return cls(resource_id, path)

    @staticmethod
    def is_valid(resource_string: str) -> bool:
        """Check whether a string has the mission resource reference shape."""
        return bool(_REFERENCE_PATTERN.fullmatch(resource_string))


class ScenarioId(MissionResourceReference):
    """Mission resource reference used as a server's scenario id."""

    def is_valid_scenario_path(self) -> bool:
        """Heuristic: scenario paths name a mission or end in .conf."""
        lower_path = self.path.lower()
        return "mission" in lower_path or lower_path.endswith(".conf")


@dataclass(frozen=True)
class ScenarioMetadata:
    """Display information for an official scenario."""

    code: str
    display_name: str
    scenario: ScenarioId
    key: str


# Built-in multiplayer scenarios (single-player missions excluded)
OFFICIAL_SCENARIOS: dict[str, ScenarioId] = {
    "CONFLICT_EVERON": ScenarioId("ECC61978EDCC2B5A", "Missions/23_Campaign.conf"),
    "CONFLICT_NORTHERN_EVERON": ScenarioId("C700DB41F0C546E1", "Missions/23_Campaign_NorthCentral.conf"),
    "CONFLICT_SOUTHERN_EVERON": ScenarioId("28802845ADA64D52", "Missions/23_Campaign_SWCoast.conf"),
    "CONFLICT_WESTERN_EVERON": ScenarioId("94992A3D7CE4FF8A", "Missions/23_Campaign_Western.conf"),
    "CONFLICT_MONTIGNAC": ScenarioId("FDE33AFE2ED7875B", "Missions/23_Campaign_Montignac.conf"),
    "CONFLICT_ARLAND": ScenarioId("C41618FD18E9D714", "Missions/23_Campaign_Arland.conf"),
    "COMBAT_OPS_ARLAND": ScenarioId("DAA03C6E6099D50F", "Missions/24_CombatOps.conf"),
    "COMBAT_OPS_EVERON": ScenarioId("DFAC5FABD11F2390", "Missions/26_CombatOpsEveron.conf"),
    "GAME_MASTER_EVERON": ScenarioId("59AD59368755F41A", "Missions/21_GM_Eden.conf"),
    "GAME_MASTER_ARLAND": ScenarioId("2BBBE828037C6F4B", "Missions/22_GM_Arland.conf"),
    "TUTORIAL": ScenarioId("002AF7323E0129AF", "Missions/Tutorial.conf"),
    "CAH_BRIARS": ScenarioId("3F2E005F43DBD2F8", "Missions/CAH_Briars_Coast.conf"),
    "CAH_CASTLE": ScenarioId("F1A1BEA67132113E", "Missions/CAH_Castle.conf"),
    "CAH_CONCRETE_PLANT": ScenarioId("589945FB9FA7B97D", "Missions/CAH_Concrete_Plant.conf"),
    "CAH_FACTORY": ScenarioId("9405201CBD22A30C", "Missions/CAH_Factory.conf"),
    "CAH_FOREST": ScenarioId("1CD06B409C6FAE56", "Missions/CAH_Forest.conf"),
    "CAH_LE_MOULE": ScenarioId("7C491B1FCC0FF0E1", "Missions/CAH_LeMoule.conf"),
    "CAH_MILITARY_BASE": ScenarioId("6EA2E454519E5869", "Missions/CAH_Military_Base.conf"),
    "CAH_MORTON": ScenarioId("2B4183DF23E88249", "Missions/CAH_Morton.conf"),
}

DEFAULT_SCENARIO_KEY = "CONFLICT_EVERON"

_CLI_SCENARIO_KEYS = [
    ("conflict-everon", "Conflict Everon", "CONFLICT_EVERON"),
    ("conflict-northern-everon", "Conflict Northern Everon", "CONFLICT_NORTHERN_EVERON"),
    ("conflict-southern-everon", "Conflict Southern Everon", "CONFLICT_SOUTHERN_EVERON"),
    ("conflict-western-everon", "Conflict Western Everon", "CONFLICT_WESTERN_EVERON"),
    ("conflict-montignac", "Conflict Montignac", "CONFLICT_MONTIGNAC"),
    ("conflict-arland", "Conflict Arland", "CONFLICT_ARLAND"),
    ("combat-ops-arland", "Combat Ops Arland", "COMBAT_OPS_ARLAND"),
    ("combat-ops-everon", "Combat Ops Everon", "COMBAT_OPS_EVERON"),
    ("game-master-everon", "Game Master Everon", "GAME_MASTER_EVERON"),
    ("game-master-arland", "Game Master Arland", "GAME_MASTER_ARLAND"),
]

SCENARIO_METADATA: dict[str, ScenarioMetadata] = {
    code: ScenarioMetadata(code=code, display_name=display_name, scenario=OFFICIAL_SCENARIOS[key], key=key)
    for code, display_name, key in _CLI_SCENARIO_KEYS
}


def default_scenario_id() -> ScenarioId:
    """Scenario used when none is given (Conflict Everon)."""
    return OFFICIAL_SCENARIOS[DEFAULT_SCENARIO_KEY]


def get_scenario_metadata(code: str) -> ScenarioMetadata | None:
    """Look up scenario metadata by its friendly code (case-insensitive)."""
    return SCENARIO_METADATA.get(code.strip().lower())


def scenario_from_code(code: str) -> ScenarioId | None:
    """Resolve a friendly code such as "conflict-arland" to its scenario id."""
    metadata = get_scenario_metadata(code)
    return metadata.scenario if metadata else None


def list_scenarios() -> list[ScenarioMetadata]:
    """All scenarios that have a friendly code, in catalogue order."""
    return list(SCENARIO_METADATA.values())


def parse_scenario_id(scenario_string: str) -> ScenarioId:
    """
    Parse a scenario id, warning when the path does not look like a mission.

    Raises:
        ScenarioError: If the string is not a mission resource reference
    """
    reference = MissionResourceReference.from_string(scenario_string.strip())
    scenario = ScenarioId(reference.resource_id, reference.path)
    if not scenario.is_valid_scenario_path():
        logger.warning("Scenario path may not be valid", path=scenario.path)
    return scenario


def normalize_scenario_id(value: "str | ScenarioId") -> str:
    """
    Turn a friendly code, a scenario id string or a ScenarioId into the rendered form.

    Raises:
        ScenarioError: If the value is neither a known code nor a valid reference
    """
    if isinstance(value, ScenarioId):
        return str(value)
    by_code = scenario_from_code(value)
    if by_code is not None:
        return str(by_code)
    return str(parse_scenario_id(value))
