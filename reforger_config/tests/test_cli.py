"""
Tests for the command-line interface.

Commands run through click's CliRunner; output checks use result.output,
which carries both stdout and stderr.
"""

import json

import pytest
import yaml
from click.testing import CliRunner

from ..cli.main import cli
from ..exceptions import ConfigFileError
from ..parser import parse
from ..server.mods import WORKSHOP_BASE_URL

MOD_A = "5965550F24A0C152"
MOD_B = "59674C21AA886D57"


@pytest.fixture
def runner():
    return CliRunner()


class TestValidateCommand:
    """reforger-config validate"""

    def test_valid_file(self, runner, write_config, valid_config_dict):
        result = runner.invoke(cli, ["validate", str(write_config(valid_config_dict))])

        assert result.exit_code == 0
        assert "Configuration is valid." in result.output

    def test_validation_error_exits_one(self, runner, write_config, config_with):
        result = runner.invoke(cli, ["validate", "--no-colors", str(write_config(config_with(rcon__password="ab")))])

        assert result.exit_code == 1
        assert "rcon.password: [RCON_PASSWORD_TOO_SHORT]" in result.output
        assert "Configuration is not deployable." in result.output

    def test_warnings_do_not_fail(self, runner, write_config, config_with):
        result = runner.invoke(cli, ["validate", str(write_config(config_with(game__passwordAdmin="")))])

        assert result.exit_code == 0
        assert "[EMPTY_ADMIN_PASSWORD]" in result.output

    def test_json_output(self, runner, write_config, config_with):
        path = write_config(config_with(rcon__password="ab"))

        result = runner.invoke(cli, ["validate", "--format", "json", str(path)])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["file"] == str(path)
        assert payload["success"] is False
        assert payload["validationErrors"][0]["type"] == "RCON_PASSWORD_TOO_SHORT"
        assert payload["summary"] == {"errors": 0, "validationErrors": 1, "warnings": 1}

    def test_ignore_error_option(self, runner, write_config, config_with):
        path = write_config(config_with(rcon__password="ab"))

        result = runner.invoke(cli, ["validate", "--ignore-error", "rcon_password_too_short", str(path)])

        assert result.exit_code == 0

    def test_ignore_warning_option(self, runner, write_config, config_with):
        path = write_config(config_with(game__passwordAdmin=""))

        result = runner.invoke(
            cli, ["validate", "--format", "json", "--ignore-warning", "EMPTY_ADMIN_PASSWORD", str(path)]
        )

        assert json.loads(result.output)["warnings"] == []

    def test_unknown_code_is_a_usage_error(self, runner, write_config, valid_config_dict):
        path = write_config(valid_config_dict)

        result = runner.invoke(cli, ["validate", "--ignore-warning", "NOT_A_WARNING", str(path)])

        assert result.exit_code == 2

    def test_ignore_list_from_environment(self, runner, write_config, config_with, monkeypatch):
        monkeypatch.setenv("REFORGER_VALIDATION_IGNORE_WARNINGS", "EMPTY_ADMIN_PASSWORD")
        path = write_config(config_with(game__passwordAdmin=""))

        result = runner.invoke(cli, ["validate", "--format", "json", str(path)])

        assert json.loads(result.output)["warnings"] == []

    def test_business_rules_disabled_from_environment(self, runner, write_config, config_with, monkeypatch):
        monkeypatch.setenv("REFORGER_VALIDATION_ENABLED", "false")

        result = runner.invoke(cli, ["validate", str(write_config(config_with(rcon__password="ab")))])

        assert result.exit_code == 0

    def test_invalid_settings(self, runner, write_config, valid_config_dict, monkeypatch):
        monkeypatch.setenv("REFORGER_VALIDATION_IGNORE_ERRORS", "NOT_AN_ERROR")

        result = runner.invoke(cli, ["validate", str(write_config(valid_config_dict))])

        assert result.exit_code == 1
        assert "Invalid settings" in result.output

    def test_yaml_file(self, runner, write_config, valid_config_dict):
        path = write_config(yaml.safe_dump(valid_config_dict), name="server.yaml")

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 0

    def test_undecodable_file(self, runner, write_config):
        result = runner.invoke(cli, ["validate", str(write_config("{broken"))])

        assert result.exit_code == 1
        assert "JSON parsing failed" in result.output

    def test_structural_error(self, runner, write_config, config_with):
        result = runner.invoke(cli, ["validate", str(write_config(config_with(bindPort=80)))])

        assert result.exit_code == 1
        assert "bindPort must be between 1024 and 65535, got: 80" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Error: ConfigFileError: Configuration file not found" in result.output

    def test_debug_raises(self, runner, tmp_path):
        result = runner.invoke(cli, ["--debug", "validate", str(tmp_path / "missing.json")])

        assert isinstance(result.exception, ConfigFileError)


class TestCreateCommand:
    """reforger-config create"""

    def test_non_interactive_defaults(self, runner, tmp_path):
        output = tmp_path / "server.json"

        result = runner.invoke(cli, ["create", "--yes", "--output", str(output)])

        assert result.exit_code == 0
        assert f"Configuration written to {output}" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["game"]["name"] == "Arma Reforger Server"
        assert data["game"]["supportedPlatforms"] == ["PLATFORM_PC", "PLATFORM_XBL", "PLATFORM_PSN"]
        assert parse(data).success is True

    def test_options(self, runner, tmp_path):
        output = tmp_path / "server.yaml"

        result = runner.invoke(
            cli,
            [
                "create",
                "--yes",
                "--name",
                "Night Ops",
                "--port",
                "2301",
                "--scenario",
                "conflict-arland",
                "--mods",
                f"{MOD_A.lower()}, {WORKSHOP_BASE_URL}/{MOD_B}-Other",
                "--admin-password",
                "adminpass",
                "--no-cross-platform",
                "--mission-name",
                "Night",
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0
        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert data["bindPort"] == 2301
        assert data["a2s"]["port"] == 2302
        assert data["game"]["name"] == "Night Ops"
        assert data["game"]["scenarioId"] == "{C41618FD18E9D714}Missions/23_Campaign_Arland.conf"
        assert data["game"]["supportedPlatforms"] == ["PLATFORM_PC"]
        assert [mod["modId"] for mod in data["game"]["mods"]] == [MOD_A, MOD_B]
        assert data["game"]["gameProperties"]["missionHeader"]["m_sName"] == "Night"
        assert data["game"]["gameProperties"]["missionHeader"]["m_sAuthor"] == "Default Author"
        assert parse(data).warnings == []

    def test_mod_list_file(self, runner, tmp_path):
        mod_list = tmp_path / "mods.csv"
        mod_list.write_text(f"modId,name\n{MOD_A},Example\n", encoding="utf-8")

        result = runner.invoke(cli, ["create", "--yes", "--stdout", "--mod-list-file", str(mod_list)])

        assert result.exit_code == 0
        assert json.loads(result.output)["game"]["mods"] == [{"modId": MOD_A, "name": "Example"}]

    def test_stdout(self, runner):
        result = runner.invoke(cli, ["create", "--yes", "--stdout", "--rcon-password", "rconpass"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["bindPort"] == 2001
        assert data["rcon"]["password"] == "rconpass"

    def test_existing_file_needs_force(self, runner, tmp_path):
        output = tmp_path / "server.json"
        output.write_text("original", encoding="utf-8")

        result = runner.invoke(cli, ["create", "--yes", "--output", str(output)])

        assert result.exit_code == 1
        assert "already exists (use --force to overwrite)" in result.output
        assert output.read_text(encoding="utf-8") == "original"

    def test_force_overwrites(self, runner, tmp_path):
        output = tmp_path / "server.json"
        output.write_text("original", encoding="utf-8")

        result = runner.invoke(cli, ["create", "--yes", "--force", "--output", str(output)])

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["bindPort"] == 2001

    def test_validate_after_create(self, runner, tmp_path):
        result = runner.invoke(cli, ["create", "--yes", "--validate", "--output", str(tmp_path / "server.json")])

        assert result.exit_code == 0
        assert "[EMPTY_ADMIN_PASSWORD]" in result.output
        assert "Configuration is valid." in result.output

    def test_invalid_mod(self, runner):
        result = runner.invoke(cli, ["create", "--yes", "--stdout", "--mods", "bogus"])

        assert result.exit_code == 1
        assert "Error: BuilderError: Invalid mod ID: BOGUS" in result.output

    def test_invalid_scenario(self, runner):
        result = runner.invoke(cli, ["create", "--yes", "--stdout", "--scenario", "everon"])

        assert result.exit_code == 1
        assert "Error: ScenarioError: Invalid mission resource format: everon" in result.output

    def test_interactive(self, runner, tmp_path):
        output = tmp_path / "interactive.json"
        answers = [
            "Interactive Server",
            "",
            "",
            "2401",
            "conflict-montignac",
            "n",
            "",
            "adminpass",
            "",
            MOD_A,
            str(output),
        ]

        result = runner.invoke(cli, ["create"], input="\n".join(answers) + "\n")

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["game"]["name"] == "Interactive Server"
        assert data["bindPort"] == 2401
        assert data["publicAddress"] == "0.0.0.0"
        assert data["game"]["supportedPlatforms"] == ["PLATFORM_PC"]
        assert data["game"]["passwordAdmin"] == "adminpass"
        assert data["game"]["mods"] == [{"modId": MOD_A}]

    def test_interactive_declines_overwrite(self, runner, tmp_path):
        output = tmp_path / "server.json"
        output.write_text("original", encoding="utf-8")
        answers = ["", "", "", "", "", "y", "", "", "", "", str(output), "n"]

        result = runner.invoke(cli, ["create"], input="\n".join(answers) + "\n")

        assert result.exit_code == 1
        assert "Aborted." in result.output
        assert output.read_text(encoding="utf-8") == "original"


class TestExtractModsCommand:
    """reforger-config extract mods"""

    def test_extract_to_csv(self, runner, tmp_path, write_config, config_with):
        config = write_config(config_with(game__mods=[{"modId": MOD_A, "name": "Example"}, {"modId": MOD_B}]))
        output = tmp_path / "mods.csv"

        result = runner.invoke(cli, ["extract", "mods", str(config), str(output)])

        assert result.exit_code == 0
        assert f"Extracted 2 mod(s) to {output}" in result.output
        assert output.read_text(encoding="utf-8") == f"modId,name,version,required\n{MOD_A},Example,,\n{MOD_B},,,\n"

    def test_extract_to_stdout(self, runner, write_config, config_with):
        config = write_config(config_with(game__mods=[{"modId": MOD_A}, {"modId": MOD_B}]))

        result = runner.invoke(cli, ["extract", "mods", str(config), "-", "--output-format", "txt"])

        assert result.exit_code == 0
        assert result.output == f"{MOD_A}\n{MOD_B}\n"

    def test_extract_defaults_to_json(self, runner, tmp_path, write_config, config_with):
        config = write_config(config_with(game__mods=[{"modId": MOD_A}]))
        output = tmp_path / "mods.out"

        result = runner.invoke(cli, ["extract", "mods", str(config), str(output)])

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8")) == [{"modId": MOD_A}]

    def test_extract_from_yaml(self, runner, write_config, config_with):
        config = write_config(yaml.safe_dump(config_with(game__mods=[{"modId": MOD_A}])), name="server.yml")

        result = runner.invoke(cli, ["extract", "mods", str(config), "-"])

        assert json.loads(result.output) == [{"modId": MOD_A}]

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(cli, ["extract", "mods", str(tmp_path / "missing.json"), "-"])

        assert result.exit_code == 1
        assert "ConfigFileError" in result.output


class TestScenariosCommand:
    """reforger-config scenarios"""

    def test_console(self, runner):
        result = runner.invoke(cli, ["scenarios"])

        assert result.exit_code == 0
        assert "conflict-everon" in result.output
        assert "Game Master Arland" in result.output

    def test_json(self, runner):
        result = runner.invoke(cli, ["scenarios", "--format", "json"])

        payload = json.loads(result.output)
        assert len(payload) == 10
        assert payload[0] == {
            "code": "conflict-everon",
            "name": "Conflict Everon",
            "scenarioId": "{ECC61978EDCC2B5A}Missions/23_Campaign.conf",
        }
