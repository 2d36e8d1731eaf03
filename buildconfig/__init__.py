"""Configuration for the save-build-info step.

The host pipeline builds one immutable configuration per invocation and
passes it to every component by parameter.
"""

from .schema import BuildInfoConfig, ProjectCoordinates, TimestampBasis
from .validator import (
    ConfigurationError,
    load_and_validate_config,
    load_config_file,
    validate_config,
    validate_coordinates,
)

__all__ = [
    "BuildInfoConfig",
    "ConfigurationError",
    "ProjectCoordinates",
    "TimestampBasis",
    "load_and_validate_config",
    "load_config_file",
    "validate_config",
    "validate_coordinates",
]
