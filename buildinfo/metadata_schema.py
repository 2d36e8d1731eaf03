"""Build metadata record and its JSON form.

The output format is a contract with downstream consumers that may compare
files byte for byte:

- Exactly five string fields, in the order of METADATA_FIELDS
- Two-space indentation
- A trailing newline after the closing brace
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

METADATA_FIELDS = ("group", "name", "version", "datetime", "code")


@dataclass(frozen=True)
class BuildMetadata:
    """Build information for one invocation of the step."""

    group: str  # Project group
    name: str  # Project name
    version: str  # Project version
    datetime: str  # Build datetime stamp, YYYYMMDDHHMMSS
    code: str  # Build code

    def to_dict(self) -> dict[str, str]:
        """Return the fields in serialization order."""
        return {field_name: getattr(self, field_name) for field_name in METADATA_FIELDS}

    def to_json(self) -> str:
        """Serialize metadata to its JSON file content."""
        return serialize_metadata(self)

    def summary(self) -> str:
        return f"{self.group}:{self.name}:{self.version} ({self.code}) {self.datetime}"

    def __str__(self) -> str:
        return self.summary()


def serialize_metadata(metadata: BuildMetadata) -> str:
    """Render metadata as the JSON content of a build info file.

    Args:
        metadata: Record to serialize

    Returns:
        JSON text ending in a newline
    """
    return json.dumps(metadata.to_dict(), indent=2) + "\n"


def parse_metadata(text: str) -> BuildMetadata:
    """Parse the content of a build info file.

    Args:
        text: JSON text

    Returns:
        BuildMetadata

    Raises:
        ValueError: If the text is not JSON or does not hold exactly the
            five string fields
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid build info JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Build info must be a JSON object, got {type(data).__name__}")

    missing = [name for name in METADATA_FIELDS if name not in data]
    extra = sorted(set(data) - set(METADATA_FIELDS))
    if missing or extra:
        raise ValueError(f"Build info fields mismatch: missing={missing}, unexpected={extra}")

    non_strings = [name for name in METADATA_FIELDS if not isinstance(data[name], str)]
    if non_strings:
        raise ValueError(f"Build info fields must be strings: {non_strings}")

    return BuildMetadata(**{name: data[name] for name in METADATA_FIELDS})


def read_build_info(path: Path) -> BuildMetadata:
    """Read a build info file written by the step.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not valid build info
    """
    return parse_metadata(Path(path).read_text(encoding="utf-8"))
