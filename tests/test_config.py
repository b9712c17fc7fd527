"""Tests for code page configuration parsing and validation."""

import pytest
import voluptuous as vol

from codepage_strings import (
    CODEPAGE_SCHEMA,
    CODING_SCHEMA,
    UnknownCodepageError,
    parse_codepage,
    resolve,
    validate_coding_config,
)


class TestParseCodepage:
    """Tests for parse_codepage."""

    def test_int_passthrough(self) -> None:
        assert parse_codepage(1252) == 1252
        assert parse_codepage(0) == 0
        assert parse_codepage(65535) == 65535

    def test_decimal_string(self) -> None:
        assert parse_codepage("1252") == 1252
        assert parse_codepage(" 869 ") == 869

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("CP1252", 1252),
            ("cp1257", 1257),
            ("cp-437", 437),
            ("CP_850", 850),
            ("windows-1257", 1257),
            ("Windows1250", 1250),
            ("IBM869", 869),
            ("ibm-866", 866),
        ],
    )
    def test_prefixed_names(self, value: str, expected: int) -> None:
        assert parse_codepage(value) == expected

    @pytest.mark.parametrize("value", ["", "CP", "latin1", "0x4e4", "12.5", "cp 12 52"])
    def test_unparseable_string(self, value: str) -> None:
        with pytest.raises(UnknownCodepageError):
            parse_codepage(value)

    @pytest.mark.parametrize("value", [-1, 65536, "70000", "CP70000", True, None, 3.0])
    def test_out_of_range_or_wrong_type(self, value: object) -> None:
        with pytest.raises(UnknownCodepageError):
            parse_codepage(value)  # type: ignore[arg-type]

    def test_error_chained_from_voluptuous(self) -> None:
        with pytest.raises(UnknownCodepageError) as exc_info:
            parse_codepage(70000)
        assert isinstance(exc_info.value.__cause__, vol.Invalid)
        assert "70000" in str(exc_info.value)


class TestSchemas:
    """Tests for the voluptuous schemas."""

    def test_codepage_schema(self) -> None:
        assert CODEPAGE_SCHEMA(1257) == 1257

    @pytest.mark.parametrize("value", [-1, 0x10000, "1257", False])
    def test_codepage_schema_rejects(self, value: object) -> None:
        with pytest.raises(vol.Invalid):
            CODEPAGE_SCHEMA(value)

    def test_coding_schema_defaults_to_strict(self) -> None:
        assert CODING_SCHEMA({"codepage": 1252}) == {"codepage": 1252, "errors": "strict"}

    def test_coding_schema_accepts_name(self) -> None:
        validated = CODING_SCHEMA({"codepage": "CP869", "errors": "replace"})
        assert validated == {"codepage": "CP869", "errors": "replace"}

    @pytest.mark.parametrize(
        "config",
        [
            {},
            {"codepage": 1252, "errors": "ignore"},
            {"codepage": [1252]},
            {"codepage": 1252, "extra": True},
        ],
    )
    def test_coding_schema_rejects(self, config: dict) -> None:
        with pytest.raises(vol.Invalid):
            CODING_SCHEMA(config)


class TestValidateCodingConfig:
    """Tests for validate_coding_config."""

    def test_parses_codepage_name(self) -> None:
        validated = validate_coding_config({"codepage": "CP869", "errors": "replace"})
        assert validated == {"codepage": 869, "errors": "replace"}
        assert resolve(validated["codepage"]) == resolve(869)

    def test_default_errors(self) -> None:
        assert validate_coding_config({"codepage": 65001}) == {"codepage": 65001, "errors": "strict"}

    def test_unparseable_codepage(self) -> None:
        with pytest.raises(UnknownCodepageError):
            validate_coding_config({"codepage": "latin1"})

    def test_invalid_mapping(self) -> None:
        with pytest.raises(vol.Invalid):
            validate_coding_config({"codepage": 1252, "errors": "ignore"})

    def test_does_not_modify_input(self) -> None:
        config = {"codepage": "windows-1257"}
        validate_coding_config(config)
        assert config == {"codepage": "windows-1257"}
