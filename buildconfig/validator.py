"""Configuration loading and validation.

This module loads YAML/JSON configuration files and validates them against
BuildInfoConfig, turning Pydantic errors into readable messages.
"""

import json
import pathlib
from typing import Any, Union

import yaml

from buildconfig.schema import BuildInfoConfig, ProjectCoordinates
from utils import PathValidationError, is_supported_config_format, validate_path_safe

# Keys under which a file may nest the step options.
SECTION_KEYS = ("saveBuildInfo", "save_build_info")


class ConfigurationError(Exception):
    """Raised when configuration is missing, malformed, or unusable."""

    pass


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load configuration from a YAML or JSON file.

    The options may sit at the top level or under a ``saveBuildInfo``
    section.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary containing the step options

    Raises:
        ConfigurationError: If the file cannot be found, read or parsed
    """
    try:
        config_path = validate_path_safe(config_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise ConfigurationError(f"Invalid configuration path: {e}") from e
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {config_path}") from e

    suffix = config_path.suffix.lower()
    if not is_supported_config_format(config_path):
        raise ConfigurationError(
            f"Unsupported file format: {config_path.suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Failed to read configuration file {config_path}: I/O error: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Failed to decode configuration file {config_path}: Encoding error: {e}") from e

    if config is None:
        raise ConfigurationError("Configuration file is empty")

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration must be a dictionary, got {type(config).__name__}"
        )

    for key in SECTION_KEYS:
        if key in config:
            section = config[key]
            if section is None:
                return {}
            if not isinstance(section, dict):
                raise ConfigurationError(
                    f"Section '{key}' must be a dictionary, got {type(section).__name__}"
                )
            return section

    return config


def validate_config(config: dict[str, Any]) -> BuildInfoConfig:
    """Validate options against BuildInfoConfig.

    Args:
        config: Configuration dictionary

    Returns:
        Validated, immutable BuildInfoConfig

    Raises:
        ConfigurationError: If validation fails
    """
    try:
        return BuildInfoConfig(**config)
    except Exception as e:
        error_msg = _format_validation_error(e)
        raise ConfigurationError(f"Configuration validation failed:\n{error_msg}") from e


def validate_coordinates(coordinates: dict[str, Any]) -> ProjectCoordinates:
    """Validate project coordinates supplied by the host.

    Raises:
        ConfigurationError: If validation fails
    """
    try:
        return ProjectCoordinates(**coordinates)
    except Exception as e:
        error_msg = _format_validation_error(e)
        raise ConfigurationError(f"Project coordinates are invalid:\n{error_msg}") from e


def _format_validation_error(error: Exception) -> str:
    """Format validation error for user-friendly display.

    Args:
        error: Exception from Pydantic validation

    Returns:
        Formatted error message
    """
    if hasattr(error, "errors"):
        errors = []
        for err in error.errors():
            field_path = " -> ".join(str(loc) for loc in err.get("loc", []))
            error_msg = err.get("msg", "Validation error")
            error_type = err.get("type", "unknown")
            errors.append(f"  {field_path}: {error_msg} ({error_type})")
        return "\n".join(errors)

    return str(error)


def load_and_validate_config(config_path: Union[str, pathlib.Path]) -> BuildInfoConfig:
    """Load and validate configuration from a file.

    Args:
        config_path: Path to YAML or JSON configuration file

    Returns:
        Validated BuildInfoConfig

    Raises:
        ConfigurationError: If loading or validation fails
    """
    config = load_config_file(config_path)
    return validate_config(config)
