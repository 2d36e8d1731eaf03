"""Save-build-info step.

This module defines the single entry point a host build pipeline calls to
produce build info. The host decides when the step runs (before resources
are packaged); the step itself knows nothing about the host's task graph.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from buildconfig.schema import BuildInfoConfig, ProjectCoordinates
from buildconfig.validator import ConfigurationError
from buildinfo.builder import MetadataBuilder
from buildinfo.metadata_schema import BuildMetadata, serialize_metadata
from buildinfo.writer import DestinationWriter
from timecode import TimeKeeper
from utils import SUMMARY_PREFIX, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BuildInfoResult:
    """Outcome of one successful run of the step."""

    metadata: BuildMetadata
    content: str
    paths: tuple[Path, ...]


class SaveBuildInfoStep:
    """Generates build info and saves it to all configured destinations.

    Args:
        config: Validated, immutable step configuration
        time_keeper: Optional clock source (defaults to the system clock)
        base_dir: Anchor for relative destinations
        stdout: Stream receiving the summary line (defaults to sys.stdout)
    """

    def __init__(
        self,
        config: BuildInfoConfig,
        time_keeper: Optional[TimeKeeper] = None,
        base_dir: Optional[Path] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.config = config
        self.time_keeper = time_keeper if time_keeper is not None else TimeKeeper()
        self.writer = DestinationWriter(base_dir=base_dir)
        self.builder = MetadataBuilder(
            code_bit_xor=config.code_bit_xor,
            timestamp_basis=config.timestamp_basis,
        )
        self._stdout = stdout

        logger.debug(
            f"SaveBuildInfoStep initialized: filename={config.filename}, "
            f"destinations={sorted(config.destinations)}"
        )

    def _select_name(self, coordinates: ProjectCoordinates) -> str:
        if not self.config.use_root_name:
            return coordinates.name
        if coordinates.root_name is None:
            raise ConfigurationError(
                "use_root_name is set but no root project name was supplied"
            )
        return coordinates.root_name

    def run(self, coordinates: ProjectCoordinates) -> BuildInfoResult:
        """Run the step once.

        Args:
            coordinates: Group, name and version from the host project

        Returns:
            BuildInfoResult with the metadata and the written paths

        Raises:
            ConfigurationError: If the configuration cannot be used; nothing
                is written
            ClockError: If the clock cannot be read
            DestinationWriteError: If any destination failed
        """
        # Fail fast before reading the clock or touching the filesystem.
        self.writer.resolve_destinations(self.config.destinations)
        name = self._select_name(coordinates)

        reading = self.time_keeper.read()
        metadata = self.builder.build(
            group=coordinates.group,
            name=name,
            version=coordinates.version,
            reading=reading,
        )
        content = serialize_metadata(metadata)

        paths = self.writer.write(content, self.config.destinations, self.config.filename)

        out = self._stdout if self._stdout is not None else sys.stdout
        print(f"{SUMMARY_PREFIX}{metadata}", file=out)
        logger.info(f"Build info saved to {len(paths)} destination(s)")

        return BuildInfoResult(metadata=metadata, content=content, paths=tuple(paths))


def run_build_step(
    config: BuildInfoConfig,
    coordinates: ProjectCoordinates,
    base_dir: Optional[Path] = None,
) -> BuildInfoResult:
    """Run the save-build-info step with the system clock."""
    return SaveBuildInfoStep(config, base_dir=base_dir).run(coordinates)
