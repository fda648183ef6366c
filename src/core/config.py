"""Runtime configuration model for statsview.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    BY_WEIGHT_ENV_VAR,
    DEFAULT_BY_WEIGHT,
    DEFAULT_LOG_LEVEL,
    ENVIRONMENT_ENV_VAR,
    FALSE_FLAG_VALUES,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
    TRUE_FLAG_VALUES,
)
from core.errors import StatsViewConfigError


@dataclass(frozen=True)
class StatsViewConfig:
    """Validated runtime configuration.

    Attributes:
        by_weight: Whether derived queries prefer weighted statistics.
        environment: Optional environment label scoping comparisons.
        log_level: Minimum structured log level.
    """

    by_weight: bool = DEFAULT_BY_WEIGHT
    environment: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "StatsViewConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            StatsViewConfigError: If environment values are invalid.
        """
        by_weight = _parse_flag(BY_WEIGHT_ENV_VAR, os.getenv(BY_WEIGHT_ENV_VAR))
        environment = os.getenv(ENVIRONMENT_ENV_VAR) or None
        log_level = _parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        return cls(by_weight=by_weight, environment=environment, log_level=log_level)


def _parse_flag(env_name: str, raw_value: str | None) -> bool:
    """Parse a boolean environment flag.

    Args:
        env_name: Variable name, used in error messages.
        raw_value: Raw string from environment, if set.

    Returns:
        Parsed flag, or the default when unset.

    Raises:
        StatsViewConfigError: If the value is not a recognized flag.
    """
    if raw_value is None or not raw_value.strip():
        return DEFAULT_BY_WEIGHT
    normalized = raw_value.strip().lower()
    if normalized in TRUE_FLAG_VALUES:
        return True
    if normalized in FALSE_FLAG_VALUES:
        return False
    raise StatsViewConfigError(
        f"Invalid {env_name} value: expected one of "
        f"{TRUE_FLAG_VALUES + FALSE_FLAG_VALUES}, got '{raw_value}'."
    )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased supported level name.

    Raises:
        StatsViewConfigError: If the level is not supported.
    """
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        raise StatsViewConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: expected one of "
            f"{', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'."
        )
    return normalized
