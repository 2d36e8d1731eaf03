"""Build info assembly and persistence.

This package turns project coordinates and a clock reading into a build
info record, renders it as JSON, and writes it to every destination.

Key principles:
- Deterministic output (fixed field order and formatting)
- No partial files
- Every destination attempted, every failure reported
"""

from .builder import MetadataBuilder, format_datetime
from .metadata_schema import (
    METADATA_FIELDS,
    BuildMetadata,
    parse_metadata,
    read_build_info,
    serialize_metadata,
)
from .writer import DestinationFailure, DestinationWriteError, DestinationWriter

__all__ = [
    "METADATA_FIELDS",
    "BuildMetadata",
    "DestinationFailure",
    "DestinationWriteError",
    "DestinationWriter",
    "MetadataBuilder",
    "format_datetime",
    "parse_metadata",
    "read_build_info",
    "serialize_metadata",
]
