"""Constants for BuildStamp."""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_CONFIG = 1
EXIT_WRITE_FAILURE = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "BuildStamp"
APP_VERSION = "1.0.0"

SUPPORTED_CONFIG_FORMATS = ["yaml", "yml", "json"]

# Default values
DEFAULT_FILENAME = "build-info.json"
DEFAULT_CODE_BIT_XOR = 0xFF00FF00
SUMMARY_PREFIX = "BuildInfo: "
