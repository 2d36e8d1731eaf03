"""File helper utilities for BuildStamp.

This module provides the filesystem operations used by the destination
writer and the configuration loader.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from .constants import SUPPORTED_CONFIG_FORMATS

logger = logging.getLogger(__name__)


class PathValidationError(Exception):
    """Raised when a path or filename fails validation."""

    pass


def ensure_directory(path: Path) -> Path:
    """Ensure directory exists, creating missing parents as needed.

    Args:
        path: Directory path to ensure

    Returns:
        Resolved Path object (for chaining)

    Raises:
        OSError: If the path cannot be resolved or created, including when
            an existing component is not a directory
    """
    try:
        resolved_path = path.resolve()
        resolved_path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Directory ensured: {resolved_path}")
        return resolved_path
    except (OSError, RuntimeError) as e:
        logger.error(f"Failed to resolve or create directory {path}: {e}")
        if isinstance(e, OSError):
            raise
        raise OSError(f"Failed to resolve directory {path}: {e}") from e


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def atomic_write_text(path: Path, text: str) -> None:
    """Write text to path so readers never observe a partial file.

    The content goes to a temporary file in the target directory which is
    then renamed over the target. On failure the temporary file is removed
    and the original error propagates.

    Args:
        path: Target file path (its parent directory must exist)
        text: Content to write

    Raises:
        OSError: If the temporary file cannot be written or renamed
    """
    # Fixed prefix keeps the temp name short for long target names.
    fd, tmp_name = tempfile.mkstemp(
        prefix=".buildinfo-", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        # mkstemp creates 0600 files; give the result the usual umask mode.
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise
    logger.debug(f"Text written to: {path}")


def get_file_extension(file_path: str | Path) -> str:
    """Get file extension from path.

    Args:
        file_path: File path

    Returns:
        File extension (without dot), empty string if no extension
    """
    path = Path(file_path)
    return path.suffix.lstrip(".").lower()


def is_supported_config_format(file_path: str | Path) -> bool:
    """Check if file is a supported config format."""
    extension = get_file_extension(file_path)
    return extension in SUPPORTED_CONFIG_FORMATS


def validate_filename(filename: str) -> str:
    """Validate that a filename is a plain leaf name.

    Args:
        filename: Output filename to validate

    Returns:
        The filename, stripped of surrounding whitespace

    Raises:
        PathValidationError: If the name is empty, a relative marker, or
            contains a path separator or control character
    """
    name = filename.strip()
    if not name:
        raise PathValidationError("Filename cannot be empty")
    if name in (".", ".."):
        raise PathValidationError(f"Filename cannot be a relative marker: {name!r}")
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in name for sep in separators):
        raise PathValidationError(
            f"Filename must not contain path separators: {name!r}"
        )
    if not all(c.isprintable() for c in name):
        raise PathValidationError(
            f"Filename contains non-printable characters: {name!r}"
        )
    return name


def normalize_directory(path: str | Path, base_dir: Optional[Path] = None) -> Path:
    """Turn a destination spelling into a canonical absolute directory path.

    Relative paths are anchored at ``base_dir`` (or the current working
    directory). Symlinks are not followed, so two spellings of the same
    directory collapse while the resulting path stays what the user wrote.

    Args:
        path: Directory path as configured
        base_dir: Optional anchor for relative paths

    Returns:
        Absolute, normalized Path

    Raises:
        PathValidationError: If the path is empty
    """
    text = str(path).strip()
    if not text:
        raise PathValidationError("Destination path cannot be empty")
    candidate = Path(text).expanduser()
    if not candidate.is_absolute():
        anchor = Path(base_dir) if base_dir is not None else Path.cwd()
        candidate = anchor / candidate
    return Path(os.path.normpath(os.path.abspath(candidate)))


def validate_path_safe(
    file_path: str | Path,
    must_exist: bool = False,
    must_be_file: bool = False,
) -> Path:
    """Resolve a path and check existence and type constraints.

    Args:
        file_path: Path to validate
        must_exist: If True, path must exist
        must_be_file: If True, path must be a regular file

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If the path cannot be resolved or is not a file
        FileNotFoundError: If the path must exist and does not
    """
    path = Path(file_path).expanduser()

    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if must_exist and not resolved.exists():
        raise FileNotFoundError(f"Path does not exist: {file_path}")

    if must_be_file and not resolved.is_file():
        if resolved.exists():
            raise PathValidationError(f"Path is not a file: {file_path}")
        else:
            raise FileNotFoundError(f"File does not exist: {file_path}")

    return resolved
