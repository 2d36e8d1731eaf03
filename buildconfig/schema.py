"""Configuration schema definitions using Pydantic.

The configuration is built once per invocation and is read-only afterwards.
Field names accept both snake_case and the camelCase spelling used by build
scripts (``useRootName``, ``codeBitXor``).
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils import DEFAULT_CODE_BIT_XOR, DEFAULT_FILENAME, PathValidationError, validate_filename

MAX_CODE_BIT_XOR = 0xFFFFFFFF


class TimestampBasis(str, Enum):
    """Clock basis for the ``datetime`` field."""

    UTC = "utc"
    LOCAL = "local"


class BuildInfoConfig(BaseModel):
    """Options of the save-build-info step."""

    use_root_name: bool = Field(
        default=False,
        alias="useRootName",
        description="Use the root project name instead of the project name",
    )
    filename: str = Field(
        default=DEFAULT_FILENAME, description="Output filename created on each destination"
    )
    destinations: frozenset[str] = Field(
        default_factory=frozenset,
        description="Directories that receive a copy of the build info file",
    )
    code_bit_xor: int = Field(
        default=DEFAULT_CODE_BIT_XOR,
        alias="codeBitXor",
        ge=0,
        le=MAX_CODE_BIT_XOR,
        description="32-bit mask XORed into the code",
    )
    timestamp_basis: TimestampBasis = Field(
        default=TimestampBasis.UTC,
        alias="timestampBasis",
        description="Clock basis of the datetime stamp",
    )

    @field_validator("filename")
    @classmethod
    def check_filename(cls, v: str) -> str:
        """Validate that filename is a plain leaf name."""
        try:
            return validate_filename(v)
        except PathValidationError as e:
            raise ValueError(str(e)) from e

    @field_validator("destinations", mode="before")
    @classmethod
    def validate_destinations(cls, v: Any) -> Any:
        """Accept a single path string and reject blank entries."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple, set, frozenset)):
            for item in v:
                if not isinstance(item, str):
                    raise ValueError(f"destination must be a string, got {type(item).__name__}")
                if not item.strip():
                    raise ValueError("destination cannot be empty")
            return frozenset(item.strip() for item in v)
        return v

    @field_validator("code_bit_xor", mode="before")
    @classmethod
    def parse_code_bit_xor(cls, v: Any) -> Any:
        """Accept prefixed integer strings such as ``"0x11223344"``."""
        if isinstance(v, bool):
            raise ValueError("codeBitXor must be an integer")
        if isinstance(v, str):
            try:
                return int(v.strip(), 0)
            except ValueError as e:
                raise ValueError(f"codeBitXor is not an integer: {v!r}") from e
        return v

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )


class ProjectCoordinates(BaseModel):
    """Group, name and version supplied by the host project."""

    group: str = Field(..., min_length=1, description="Project group")
    name: str = Field(..., min_length=1, description="Project name")
    version: str = Field(..., min_length=1, description="Project version")
    root_name: Optional[str] = Field(
        default=None, alias="rootName", description="Root project name"
    )

    @field_validator("group", "name", "version")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank values."""
        if not v.strip():
            raise ValueError("value cannot be blank")
        return v.strip()

    @field_validator("root_name")
    @classmethod
    def validate_root_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )
