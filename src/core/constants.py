"""Core constants used across statsview modules.

This module centralizes environment variable names and defaults.
Keeping values here avoids magic literals in view logic.
"""

from __future__ import annotations

BY_WEIGHT_ENV_VAR = "STATSVIEW_BY_WEIGHT"
ENVIRONMENT_ENV_VAR = "STATSVIEW_ENVIRONMENT"
LOG_LEVEL_ENV_VAR = "STATSVIEW_LOG_LEVEL"
DEFAULT_BY_WEIGHT = False
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
TRUE_FLAG_VALUES = ("1", "true", "yes", "on")
FALSE_FLAG_VALUES = ("0", "false", "no", "off")
PATH_SEPARATOR = "."
