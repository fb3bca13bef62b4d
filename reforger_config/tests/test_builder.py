"""
Tests for ServerConfigBuilder.

Configurations produced by the builder must pass the validation engine.
"""

import pytest

from ..exceptions import BuilderError
from ..models.server import Mod
from ..parser import parse
from ..parser.issues import ParserWarningType
from ..server.builder import ServerConfigBuilder
from ..server.mods import WORKSHOP_BASE_URL

MOD_A = "5965550F24A0C152"
MOD_B = "59674C21AA886D57"
CONFLICT_ARLAND = "{C41618FD18E9D714}Missions/23_Campaign_Arland.conf"


class TestServerConfigBuilder:
    """Test cases for the fluent builder."""

    def test_defaults(self):
        config = ServerConfigBuilder().build()

        assert config.game.name == "Arma Reforger Server"
        assert config.game.scenario_id == "{ECC61978EDCC2B5A}Missions/23_Campaign.conf"
        assert config.bind_address == "0.0.0.0"
        assert config.bind_port == 2001
        assert config.public_address == "0.0.0.0"
        assert config.public_port == 2001
        assert config.game.max_players == 64
        assert config.game.supported_platforms == ["PLATFORM_PC"]
        assert config.operating.ai_limit == -1

    def test_default_build_only_warns_about_admin_password(self):
        result = parse(ServerConfigBuilder().build())

        assert result.success is True
        assert [warning.type for warning in result.warnings] == [ParserWarningType.EMPTY_ADMIN_PASSWORD]

    def test_configured_build_is_clean(self):
        config = (
            ServerConfigBuilder("My Server", CONFLICT_ARLAND)
            .set_bind_port(2301)
            .set_admin_password("adminpass")
            .set_rcon_password("rconpass")
            .set_cross_platform(True)
            .add_mod(Mod(mod_id=MOD_A, name="Example"))
            .build()
        )

        result = parse(config)

        assert result.success is True
        assert result.warnings == []
        assert config.a2s.port == 2302
        assert config.rcon.port == 2303
        assert config.game.supported_platforms == ["PLATFORM_PC", "PLATFORM_XBL", "PLATFORM_PSN"]

    def test_public_address_and_port(self):
        config = ServerConfigBuilder().set_public_address("203.0.113.5").set_public_port(30001).build()

        assert config.public_address == "203.0.113.5"
        assert config.public_port == 30001

    @pytest.mark.parametrize("port", [0, 65536, -1, True])
    def test_invalid_bind_port(self, port):
        with pytest.raises(BuilderError) as exc_info:
            ServerConfigBuilder().set_bind_port(port)

        assert exc_info.value.setting == "bind_port"

    def test_invalid_public_port(self):
        with pytest.raises(BuilderError):
            ServerConfigBuilder().set_public_port(70000)

    @pytest.mark.parametrize("requested,applied", [(0, 1), (200, 128), (80, 80)])
    def test_max_players_is_clamped(self, requested, applied):
        assert ServerConfigBuilder().set_max_players(requested).build().game.max_players == applied

    def test_invalid_mod_id(self):
        with pytest.raises(BuilderError) as exc_info:
            ServerConfigBuilder().add_mod(Mod(mod_id="bogus", name="Broken"))

        assert exc_info.value.message == "Invalid mod ID: bogus (mod: Broken)"
        assert exc_info.value.setting == "mods"

    def test_duplicate_mods_are_skipped(self):
        config = (
            ServerConfigBuilder()
            .add_mod(Mod(mod_id=MOD_A, name="First"))
            .add_mod(Mod(mod_id=MOD_A.lower(), name="Second"))
            .add_mod(Mod(mod_id=MOD_B))
            .build()
        )

        assert [(mod.mod_id, mod.name) for mod in config.game.mods] == [(MOD_A, "First"), (MOD_B, None)]

    def test_set_mods_replaces_list(self):
        builder = ServerConfigBuilder().add_mod(Mod(mod_id=MOD_A))

        config = builder.set_mods([Mod(mod_id=MOD_B)]).build()

        assert [mod.mod_id for mod in config.game.mods] == [MOD_B]

    def test_add_mods_from_urls(self):
        config = ServerConfigBuilder().add_mods_from_urls([f"{WORKSHOP_BASE_URL}/{MOD_A}-Example", "nope"]).build()

        assert [(mod.mod_id, mod.name) for mod in config.game.mods] == [(MOD_A, "Example")]

    def test_clear_mods(self):
        assert ServerConfigBuilder().add_mod(Mod(mod_id=MOD_A)).clear_mods().build().game.mods == []

    def test_build_returns_independent_configs(self):
        builder = ServerConfigBuilder().add_mod(Mod(mod_id=MOD_A))

        first = builder.build()
        first.game.mods[0].name = "changed"
        second = builder.build()

        assert first is not second
        assert second.game.mods[0].name is None

    def test_mission_header(self):
        header = {"m_sName": "Night Ops", "m_sAuthor": "Me", "m_sSaveFileName": "night"}

        config = ServerConfigBuilder().set_mission_header(header).build()

        assert config.game.game_properties.mission_header == header

    def test_rcon_address(self):
        assert ServerConfigBuilder().set_rcon_address("0.0.0.0").build().rcon.address == "0.0.0.0"

    def test_operating_settings(self):
        config = ServerConfigBuilder().set_player_save_time(300).set_ai_limit(60).build()

        assert config.operating.player_save_time == 300
        assert config.operating.ai_limit == 60

    def test_reset(self):
        builder = ServerConfigBuilder("Named").set_bind_port(3001).set_server_name("Other").add_mod(Mod(mod_id=MOD_A))

        config = builder.reset().build()

        assert config.bind_port == 2001
        assert config.game.name == "Named"
        assert config.game.mods == []
