"""Tests for the build metadata record and its JSON form."""

import dataclasses
import json
from pathlib import Path

import pytest

from buildinfo import METADATA_FIELDS, BuildMetadata, parse_metadata, read_build_info, serialize_metadata

EXPECTED_JSON = """{
  "group": "com.example",
  "name": "App",
  "version": "2.1.0",
  "datetime": "20240101120000",
  "code": "k3qs"
}
"""


@pytest.fixture
def metadata() -> BuildMetadata:
    return BuildMetadata(
        group="com.example",
        name="App",
        version="2.1.0",
        datetime="20240101120000",
        code="k3qs",
    )


class TestBuildMetadata:
    def test_is_immutable(self, metadata: BuildMetadata) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            metadata.code = "x"  # type: ignore[misc]

    def test_summary(self, metadata: BuildMetadata) -> None:
        assert str(metadata) == "com.example:App:2.1.0 (k3qs) 20240101120000"

    def test_to_dict_order(self, metadata: BuildMetadata) -> None:
        assert list(metadata.to_dict()) == list(METADATA_FIELDS)


class TestSerializeMetadata:
    def test_exact_output(self, metadata: BuildMetadata) -> None:
        assert serialize_metadata(metadata) == EXPECTED_JSON
        assert metadata.to_json() == EXPECTED_JSON

    def test_field_order_is_fixed(self, metadata: BuildMetadata) -> None:
        parsed = json.loads(serialize_metadata(metadata))
        assert list(parsed) == ["group", "name", "version", "datetime", "code"]

    def test_escapes_strings(self) -> None:
        tricky = BuildMetadata(
            group='com."quoted"',
            name="back\\slash",
            version="1.0\n-rc",
            datetime="20240101120000",
            code="0",
        )
        text = serialize_metadata(tricky)
        parsed = json.loads(text)
        assert parsed["group"] == 'com."quoted"'
        assert parsed["name"] == "back\\slash"
        assert parsed["version"] == "1.0\n-rc"
        assert text.endswith("}\n")
        assert len(text.splitlines()) == 7

    def test_all_values_are_strings(self, metadata: BuildMetadata) -> None:
        parsed = json.loads(serialize_metadata(metadata))
        assert all(isinstance(value, str) for value in parsed.values())


class TestParseMetadata:
    def test_parses_serialized_output(self, metadata: BuildMetadata) -> None:
        assert parse_metadata(serialize_metadata(metadata)) == metadata

    def test_rejects_invalid_json(self) -> None:
        with pytest.raises(ValueError, match="Invalid build info JSON"):
            parse_metadata("{not json")

    def test_rejects_non_object(self) -> None:
        with pytest.raises(ValueError, match="JSON object"):
            parse_metadata("[]")

    def test_rejects_missing_field(self) -> None:
        with pytest.raises(ValueError, match="missing=\\['code'\\]"):
            parse_metadata('{"group": "g", "name": "n", "version": "v", "datetime": "d"}')

    def test_rejects_extra_field(self) -> None:
        text = '{"group": "g", "name": "n", "version": "v", "datetime": "d", "code": "c", "x": "y"}'
        with pytest.raises(ValueError, match="unexpected=\\['x'\\]"):
            parse_metadata(text)

    def test_rejects_non_string_value(self) -> None:
        text = '{"group": "g", "name": "n", "version": 2, "datetime": "d", "code": "c"}'
        with pytest.raises(ValueError, match="must be strings"):
            parse_metadata(text)

    def test_read_build_info(self, tmp_path: Path, metadata: BuildMetadata) -> None:
        path = tmp_path / "build-info.json"
        path.write_text(EXPECTED_JSON, encoding="utf-8")
        assert read_build_info(path) == metadata
