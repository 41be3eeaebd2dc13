"""
Central constants for scaled-decimal.

Defaults used when an accessor is bound without explicit options, plus the
environment variable names read by the command line entry point.
"""

# =============================================================================
# ACCESSOR DEFAULTS
# =============================================================================

# Fractional digits carried by the decimal view when no precision is given
DEFAULT_PRECISION = 2

# Backing field is named "<attribute>_as_integer" unless overridden
SOURCE_SUFFIX = "_as_integer"


# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_PREFIX = "SCALED_DECIMAL_"
ENV_DEFAULT_PRECISION = ENV_PREFIX + "DEFAULT_PRECISION"
ENV_RUN_ID = ENV_PREFIX + "RUN_ID"
ENV_LOG_TO_FILE = ENV_PREFIX + "LOG_TO_FILE"
ENV_LOG_DIR = ENV_PREFIX + "LOG_DIR"
ENV_LOG_LEVEL = ENV_PREFIX + "LOG_LEVEL"
ENV_CONSOLE_LOG_LEVEL = ENV_PREFIX + "CONSOLE_LOG_LEVEL"
ENV_FILE_LOG_LEVEL = ENV_PREFIX + "FILE_LOG_LEVEL"
ENV_LOG_BACKUP_COUNT = ENV_PREFIX + "LOG_BACKUP_COUNT"
