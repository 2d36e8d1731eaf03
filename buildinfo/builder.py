"""Build metadata assembly.

Combines project coordinates with a clock reading that was taken once by the
caller. The same reading yields both the datetime stamp and the code, so the
two always describe the same second.

This is a pure assembly layer with no I/O and no clock access.
"""

from datetime import datetime, timezone

from buildconfig.schema import TimestampBasis
from timecode import BIT_MASK, TimeReading, check_mask, encode_value
from utils import DEFAULT_CODE_BIT_XOR, get_logger

from .metadata_schema import BuildMetadata

logger = get_logger(__name__)

DATETIME_FORMAT = "%Y%m%d%H%M%S"


def format_datetime(instant: datetime, basis: TimestampBasis = TimestampBasis.UTC) -> str:
    """Format an aware instant as a 14-digit, sortable stamp.

    Args:
        instant: Timezone-aware instant
        basis: Whether to render in UTC or in the machine's local zone

    Returns:
        Stamp like ``20240101120000`` (no separators, no zone suffix)
    """
    if basis == TimestampBasis.LOCAL:
        moment = instant.astimezone()
    else:
        moment = instant.astimezone(timezone.utc)
    return moment.strftime(DATETIME_FORMAT)


class MetadataBuilder:
    """Builds BuildMetadata from coordinates and a clock reading.

    Args:
        code_bit_xor: 32-bit mask XORed into the elapsed seconds
        timestamp_basis: Clock basis of the datetime stamp
    """

    def __init__(
        self,
        code_bit_xor: int = DEFAULT_CODE_BIT_XOR,
        timestamp_basis: TimestampBasis = TimestampBasis.UTC,
    ):
        self.code_bit_xor = check_mask(code_bit_xor)
        self.timestamp_basis = timestamp_basis
        logger.debug(
            f"MetadataBuilder initialized (mask={code_bit_xor:#010x}, basis={timestamp_basis.value})"
        )

    def build(self, group: str, name: str, version: str, reading: TimeReading) -> BuildMetadata:
        """Build the metadata record.

        Args:
            group: Project group
            name: Project name
            version: Project version
            reading: Clock reading taken once for this invocation

        Returns:
            Immutable BuildMetadata
        """
        narrowed = reading.elapsed_seconds & BIT_MASK
        metadata = BuildMetadata(
            group=group,
            name=name,
            version=version,
            datetime=format_datetime(reading.instant, self.timestamp_basis),
            code=encode_value(narrowed, self.code_bit_xor),
        )
        logger.debug(f"Build metadata assembled: {metadata}")
        return metadata
