"""
Pytest configuration and fixtures for reforger-config tests.

Provides a clean server configuration (no errors, no warnings) and helpers
for deriving variants of it.
"""

import copy
import json

import pytest

from ..config import reset_config
from ..logging_config import clear_validation_context, configure_logging

CONFLICT_EVERON = "{ECC61978EDCC2B5A}Missions/23_Campaign.conf"

# Sentinel for config_with() to remove a key
DELETE = object()

_SETTINGS_VARIABLES = (
    "LOGGING_LEVEL",
    "LOGGING_FORMAT",
    "LOGGING_ENVIRONMENT",
    "REFORGER_VALIDATION_ENABLED",
    "REFORGER_VALIDATION_IGNORE_WARNINGS",
    "REFORGER_VALIDATION_IGNORE_ERRORS",
)


def make_valid_config() -> dict:
    """A configuration that passes every structural check and business rule."""
    return {
        "bindAddress": "0.0.0.0",
        "bindPort": 2001,
        "publicAddress": "",
        "a2s": {"address": "0.0.0.0", "port": 2002},
        "rcon": {
            "address": "127.0.0.1",
            "port": 2003,
            "password": "",
            "permission": "admin",
            "maxClients": 16,
        },
        "game": {
            "name": "Test Server",
            "password": "",
            "passwordAdmin": "adminpass",
            "admins": [],
            "scenarioId": CONFLICT_EVERON,
            "maxPlayers": 64,
            "visible": True,
            "crossPlatform": False,
            "supportedPlatforms": ["PLATFORM_PC"],
            "gameProperties": {
                "serverMaxViewDistance": 1600,
                "serverMinGrassDistance": 0,
                "networkViewDistance": 1500,
                "disableThirdPerson": False,
                "fastValidation": True,
                "battlEye": True,
            },
            "mods": [],
        },
        "operating": {
            "lobbyPlayerSynchronise": True,
            "playerSaveTime": 120,
            "aiLimit": -1,
            "slotReservationTimeout": 60,
        },
    }


def apply_overrides(data: dict, overrides: dict) -> dict:
    """Set dotted paths such as "game.gameProperties.serverMaxViewDistance" in place."""
    for path, value in overrides.items():
        target = data
        parts = path.split(".")
        for part in parts[:-1]:
            target = target[int(part)] if isinstance(target, list) else target[part]
        if value is DELETE:
            del target[parts[-1]]
        else:
            target[parts[-1]] = value
    return data


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep settings, log context and logging configuration independent per test."""
    for name in _SETTINGS_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    clear_validation_context()
    configure_logging("WARNING", "human", force=True)
    yield
    clear_validation_context()
    reset_config()


@pytest.fixture
def valid_config_dict():
    """A fresh copy of the clean configuration."""
    return make_valid_config()


@pytest.fixture
def valid_config_json(valid_config_dict):
    """The clean configuration as JSON text."""
    return json.dumps(valid_config_dict)


@pytest.fixture
def config_with():
    """Factory returning the clean configuration with dotted-path overrides applied."""

    def _config_with(**overrides):
        data = make_valid_config()
        return apply_overrides(data, {key.replace("__", "."): value for key, value in overrides.items()})

    return _config_with


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration (dict or raw text) to a file and return its path."""

    def _write(data, name: str = "server.json"):
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
