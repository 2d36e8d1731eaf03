"""Tests for configuration schema and loading."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from buildconfig import (
    BuildInfoConfig,
    ConfigurationError,
    ProjectCoordinates,
    TimestampBasis,
    load_and_validate_config,
    load_config_file,
    validate_config,
    validate_coordinates,
)


class TestBuildInfoConfig:
    def test_defaults(self) -> None:
        config = BuildInfoConfig()
        assert config.use_root_name is False
        assert config.filename == "build-info.json"
        assert config.destinations == frozenset()
        assert config.code_bit_xor == 0xFF00FF00
        assert config.timestamp_basis == TimestampBasis.UTC

    def test_camel_case_aliases(self) -> None:
        config = BuildInfoConfig(useRootName=True, codeBitXor=0x11223344, timestampBasis="local")
        assert config.use_root_name is True
        assert config.code_bit_xor == 0x11223344
        assert config.timestamp_basis == TimestampBasis.LOCAL

    def test_hex_string_mask(self) -> None:
        assert BuildInfoConfig(code_bit_xor="0x11223344").code_bit_xor == 0x11223344

    @pytest.mark.parametrize("mask", [-1, 1 << 32, "0xfffffffff", "nope", True])
    def test_mask_out_of_range(self, mask) -> None:
        with pytest.raises(ValidationError):
            BuildInfoConfig(code_bit_xor=mask)

    def test_destinations_collapse_duplicates(self) -> None:
        config = BuildInfoConfig(destinations=["a", "b", "a", " b "])
        assert config.destinations == frozenset({"a", "b"})

    def test_single_destination_string(self) -> None:
        assert BuildInfoConfig(destinations="out").destinations == frozenset({"out"})

    def test_blank_destination_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BuildInfoConfig(destinations=["ok", "  "])

    @pytest.mark.parametrize("filename", ["", "a/b.json", ".."])
    def test_bad_filename_rejected(self, filename: str) -> None:
        with pytest.raises(ValidationError):
            BuildInfoConfig(filename=filename)

    def test_is_frozen(self) -> None:
        config = BuildInfoConfig()
        with pytest.raises(ValidationError):
            config.filename = "other.json"  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            BuildInfoConfig(destination=["typo"])


class TestProjectCoordinates:
    def test_strips_values(self) -> None:
        coords = ProjectCoordinates(group=" com.example ", name="App ", version=" 1.0")
        assert (coords.group, coords.name, coords.version) == ("com.example", "App", "1.0")
        assert coords.root_name is None

    def test_blank_value_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="version"):
            validate_coordinates({"group": "g", "name": "n", "version": "   "})

    def test_blank_root_name_is_none(self) -> None:
        assert ProjectCoordinates(group="g", name="n", version="1", rootName=" ").root_name is None


class TestLoadConfig:
    def test_unreadable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "buildinfo.yaml"
        path.write_text("filename: a.json\n", encoding="utf-8")
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigurationError, match="I/O error: denied"):
                load_config_file(path)

    def test_yaml_with_section(self, tmp_path: Path) -> None:
        path = tmp_path / "buildinfo.yaml"
        path.write_text(
            "saveBuildInfo:\n"
            "  codeBitXor: 0x11223344\n"
            "  filename: my-file.json\n"
            "  destinations:\n"
            "    - src/main/resources/com/example\n",
            encoding="utf-8",
        )
        config = load_and_validate_config(path)
        assert config.code_bit_xor == 0x11223344
        assert config.filename == "my-file.json"
        assert config.destinations == frozenset({"src/main/resources/com/example"})

    def test_json_top_level(self, tmp_path: Path) -> None:
        path = tmp_path / "buildinfo.json"
        path.write_text(
            json.dumps({"destinations": ["out"], "codeBitXor": "0xABCD", "useRootName": True}),
            encoding="utf-8",
        )
        config = load_and_validate_config(path)
        assert config.code_bit_xor == 0xABCD
        assert config.use_root_name is True

    def test_empty_section(self, tmp_path: Path) -> None:
        path = tmp_path / "buildinfo.yml"
        path.write_text("save_build_info:\n", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_config_file(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path: Path) -> None:
        path = tmp_path / "buildinfo.toml"
        path.write_text("x = 1\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Unsupported file format"):
            load_config_file(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "buildinfo.yaml"
        path.write_text("destinations: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config_file(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "buildinfo.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="empty"):
            load_config_file(path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "buildinfo.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="dictionary"):
            load_config_file(path)

    def test_validation_message_names_field(self) -> None:
        with pytest.raises(ConfigurationError, match="code_bit_xor|codeBitXor"):
            validate_config({"codeBitXor": -5})
