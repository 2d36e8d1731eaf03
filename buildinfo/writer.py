"""Build info writer.

Writes the serialized build info to every destination directory.

All writes are:
- Atomic (temp file in the destination, then rename over the target)
- Overwriting (the previous build's file is replaced)
- Attempted for every destination, with failures reported together
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from buildconfig.validator import ConfigurationError
from utils import (
    DEFAULT_FILENAME,
    PathValidationError,
    atomic_write_text,
    ensure_directory,
    get_logger,
    normalize_directory,
    validate_filename,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class DestinationFailure:
    """A destination that could not be written."""

    destination: Path
    path: Path
    error: OSError

    def __str__(self) -> str:
        return f"{self.destination}: {type(self.error).__name__}: {self.error}"


class DestinationWriteError(Exception):
    """Raised after all destinations were attempted and at least one failed."""

    def __init__(self, failures: list[DestinationFailure], written: Optional[list[Path]] = None):
        self.failures = list(failures)
        self.written = list(written or [])
        lines = [f"Failed to write build info to {len(self.failures)} destination(s):"]
        lines.extend(f"  {failure}" for failure in self.failures)
        super().__init__("\n".join(lines))


class DestinationWriter:
    """Writes build info content to a set of destination directories.

    This writer:
    - Creates missing directories, including intermediate ones
    - Replaces existing files atomically
    - Attempts every destination before reporting failures
    """

    def __init__(self, base_dir: Optional[Path] = None):
        """Initialize the writer.

        Args:
            base_dir: Anchor for relative destinations. If None, relative
                destinations are taken from the current working directory.
        """
        self.base_dir = Path(base_dir) if base_dir is not None else None
        logger.debug(f"DestinationWriter initialized with base_dir: {self.base_dir}")

    def resolve_destinations(self, destinations: Iterable[str | Path]) -> list[Path]:
        """Normalize destinations, collapse duplicates, and sort them.

        Raises:
            ConfigurationError: If the set is empty or holds a blank path
        """
        try:
            unique = {normalize_directory(d, self.base_dir) for d in destinations}
        except PathValidationError as e:
            raise ConfigurationError(str(e)) from e
        if not unique:
            raise ConfigurationError(
                "No destinations given! Provide at least one directory, e.g. the "
                "application's main resource directory."
            )
        return sorted(unique)

    def write(
        self,
        content: str,
        destinations: Iterable[str | Path],
        filename: str = DEFAULT_FILENAME,
    ) -> list[Path]:
        """Write content to ``<destination>/<filename>`` for every destination.

        Args:
            content: Serialized build info
            destinations: Directory paths; duplicates collapse
            filename: Leaf name of the file created in each destination

        Returns:
            Paths of the written files, in destination order

        Raises:
            ConfigurationError: If destinations is empty or filename is not a
                plain leaf name (raised before touching the filesystem)
            DestinationWriteError: If any destination failed; every other
                destination has still been written
        """
        try:
            filename = validate_filename(filename)
        except PathValidationError as e:
            raise ConfigurationError(str(e)) from e
        targets = self.resolve_destinations(destinations)

        written: list[Path] = []
        failures: list[DestinationFailure] = []
        for destination in targets:
            path = destination / filename
            try:
                ensure_directory(destination)
                atomic_write_text(path, content)
            except OSError as e:
                logger.error(f"Failed to write build info to {path}: {e}")
                failures.append(DestinationFailure(destination=destination, path=path, error=e))
                continue
            logger.info(f"Build info written to: {path}")
            written.append(path)

        if failures:
            raise DestinationWriteError(failures, written=written)
        return written
