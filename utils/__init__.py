"""Shared utilities for BuildStamp.

This module provides common utilities used across the application.
"""

from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_CODE_BIT_XOR,
    DEFAULT_FILENAME,
    EXIT_INVALID_CONFIG,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_WRITE_FAILURE,
    SUMMARY_PREFIX,
    SUPPORTED_CONFIG_FORMATS,
)
from .file_helpers import (
    PathValidationError,
    atomic_write_text,
    ensure_directory,
    get_file_extension,
    is_supported_config_format,
    normalize_directory,
    validate_filename,
    validate_path_safe,
)
from .logging import get_logger, setup_logging

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_CODE_BIT_XOR",
    "DEFAULT_FILENAME",
    "EXIT_INVALID_CONFIG",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "EXIT_WRITE_FAILURE",
    "SUMMARY_PREFIX",
    "SUPPORTED_CONFIG_FORMATS",
    "PathValidationError",
    "atomic_write_text",
    "ensure_directory",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "normalize_directory",
    "setup_logging",
    "validate_filename",
    "validate_path_safe",
]
