"""
Interactive setup wizard for new server configurations.

The wizard collects answers (prompting for anything the caller did not
supply) and turns them into a ServerConfig through ServerConfigBuilder.
"""

import re
from dataclasses import dataclass, field, replace

import click

from ..io.mod_lists import load_mod_list_file
from ..logging_config import get_logger
from ..models.scenario import normalize_scenario_id
from ..models.server import Mod, ServerConfig
from ..server.builder import DEFAULT_BIND_ADDRESS, DEFAULT_BIND_PORT, ServerConfigBuilder
from ..server.defaults import create_default_mission_header
from ..server.mods import mod_id_from_url

logger = get_logger(__name__)

DEFAULT_OUTPUT = "server.json"


@dataclass
class WizardAnswers:
    """Everything the wizard needs to produce a configuration."""

    name: str = "Arma Reforger Server"
    bind_address: str = DEFAULT_BIND_ADDRESS
    public_address: str = ""
    port: int = DEFAULT_BIND_PORT
    scenario: str = "conflict-everon"
    cross_platform: bool = True
    game_password: str = ""
    admin_password: str = ""
    rcon_password: str = ""
    mods: list[str] = field(default_factory=list)
    mod_list_file: str | None = None
    mission_name: str | None = None
    mission_author: str | None = None
    save_file: str | None = None
    output: str = DEFAULT_OUTPUT


def split_mod_entries(value: str | None) -> list[str]:
    """Split a comma or whitespace separated list of mod ids or workshop URLs."""
    if not value:
        return []
    return [entry for entry in re.split(r"[,\s]+", value.strip()) if entry]


def prompt_for_answers(answers: WizardAnswers) -> WizardAnswers:
    """Ask for each setting, offering the current answer as the default."""
    click.echo(click.style("Arma Reforger server setup", bold=True))
    name = click.prompt("Server name", default=answers.name)
    bind_address = click.prompt("Bind address", default=answers.bind_address)
    public_address = click.prompt("Public address", default=answers.public_address or bind_address)
    port = click.prompt("Bind port", default=answers.port, type=click.IntRange(1, 65535))
    scenario = click.prompt("Scenario (code or {ID}path)", default=answers.scenario)
    cross_platform = click.confirm("Enable cross-platform play?", default=answers.cross_platform)
    game_password = click.prompt("Game password", default=answers.game_password, show_default=False)
    admin_password = click.prompt("Admin password", default=answers.admin_password, show_default=False)
    rcon_password = click.prompt(
        "RCON password (empty disables RCON)", default=answers.rcon_password, show_default=False
    )
    mods = click.prompt("Mods (ids or workshop URLs, comma separated)", default=",".join(answers.mods))
    output = click.prompt("Output file", default=answers.output)

    return replace(
        answers,
        name=name,
        bind_address=bind_address,
        public_address=public_address,
        port=port,
        scenario=scenario,
        cross_platform=cross_platform,
        game_password=game_password,
        admin_password=admin_password,
        rcon_password=rcon_password,
        mods=split_mod_entries(mods),
        output=output,
    )


def _mods_from_entries(entries: list[str]) -> list[Mod]:
    return [Mod(mod_id=(mod_id_from_url(entry) or entry).upper()) for entry in entries]


def build_config(answers: WizardAnswers) -> ServerConfig:
    """
    Build a configuration from wizard answers.

    Raises:
        ScenarioError: If the scenario is neither a known code nor a mission reference
        BuilderError: If a mod id or port is invalid
        ConfigFileError: If the mod list file cannot be read
        ModListError: If the mod list file cannot be parsed
    """
    builder = (
        ServerConfigBuilder(answers.name, normalize_scenario_id(answers.scenario))
        .set_bind_address(answers.bind_address)
        .set_bind_port(answers.port)
        .set_cross_platform(answers.cross_platform)
        .set_game_password(answers.game_password)
        .set_admin_password(answers.admin_password)
        .set_rcon_password(answers.rcon_password)
    )
    if answers.public_address:
        builder.set_public_address(answers.public_address)

    if answers.mod_list_file:
        builder.add_mods(load_mod_list_file(answers.mod_list_file))
    builder.add_mods(_mods_from_entries(answers.mods))

    if answers.mission_name or answers.mission_author or answers.save_file:
        header = create_default_mission_header()
        if answers.mission_name:
            header["m_sName"] = answers.mission_name
        if answers.mission_author:
            header["m_sAuthor"] = answers.mission_author
        if answers.save_file:
            header["m_sSaveFileName"] = answers.save_file
        builder.set_mission_header(header)

    config = builder.build()
    logger.debug("Wizard built configuration", mods=len(config.game.mods), port=config.bind_port)
    return config
