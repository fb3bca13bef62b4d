"""
Tests for issue records and parse results.
"""

import pytest

from ..models.server import ServerConfig
from ..parser.issues import (
    ParseResult,
    ParserError,
    ParserErrorType,
    ParserWarning,
    ParserWarningType,
)


class TestIssueVocabulary:
    """The kind vocabularies are closed and use their names as values."""

    def test_error_kinds(self):
        assert len(ParserErrorType) == 13
        assert all(member.value == member.name for member in ParserErrorType)

    def test_warning_kinds(self):
        assert len(ParserWarningType) == 13
        assert all(member.value == member.name for member in ParserWarningType)

    def test_kinds_compare_equal_to_strings(self):
        assert ParserWarningType.PORT_CONFLICT == "PORT_CONFLICT"


class TestIssueRecords:
    """Serialization of individual issues."""

    def test_error_to_dict(self):
        error = ParserError(
            type=ParserErrorType.RCON_PASSWORD_TOO_SHORT,
            message="too short",
            field="rcon.password",
            value=2,
            valid_range="3+ characters",
        )

        assert error.to_dict() == {
            "type": "RCON_PASSWORD_TOO_SHORT",
            "message": "too short",
            "field": "rcon.password",
            "value": 2,
            "validRange": "3+ characters",
        }

    def test_warning_to_dict_omits_unset_values(self):
        warning = ParserWarning(type=ParserWarningType.PORT_CONFLICT, message="conflict", field="ports")

        assert warning.to_dict() == {"type": "PORT_CONFLICT", "message": "conflict", "field": "ports"}

    def test_warning_recommended_value(self):
        warning = ParserWarning(
            type=ParserWarningType.PLAYER_COUNT_EXCEEDS_RECOMMENDED,
            message="many players",
            value=100,
            recommended_value=96,
        )

        assert warning.to_dict()["recommendedValue"] == 96

    def test_records_are_immutable(self):
        warning = ParserWarning(type=ParserWarningType.PORT_CONFLICT, message="conflict")

        with pytest.raises(AttributeError):
            warning.message = "changed"


class TestParseResult:
    """Result invariants and serialization."""

    def test_success_requires_data(self):
        with pytest.raises(ValueError):
            ParseResult(success=True)

    def test_failure_forbids_data(self, valid_config_dict):
        with pytest.raises(ValueError):
            ParseResult(success=False, data=ServerConfig.model_validate(valid_config_dict))

    def test_flags(self):
        result = ParseResult(success=False, errors=["broken"])

        assert result.has_errors is True
        assert result.has_warnings is False

    def test_to_dict_with_data(self, valid_config_dict):
        config = ServerConfig.model_validate(valid_config_dict)
        warning = ParserWarning(type=ParserWarningType.EMPTY_ADMIN_PASSWORD, message="empty")

        payload = ParseResult(success=True, data=config, warnings=[warning]).to_dict()

        assert payload["success"] is True
        assert payload["errors"] == []
        assert payload["validationErrors"] == []
        assert payload["warnings"] == [{"type": "EMPTY_ADMIN_PASSWORD", "message": "empty"}]
        assert payload["data"]["bindPort"] == 2001
        assert payload["data"]["game"]["gameProperties"]["serverMaxViewDistance"] == 1600

    def test_to_dict_without_data(self):
        payload = ParseResult(success=False, errors=["broken"]).to_dict()

        assert "data" not in payload
        assert payload["errors"] == ["broken"]
