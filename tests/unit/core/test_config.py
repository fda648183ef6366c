"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import StatsViewConfig
from core.errors import StatsViewConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should default to unweighted views without environment."""
    monkeypatch.delenv("STATSVIEW_BY_WEIGHT", raising=False)
    monkeypatch.delenv("STATSVIEW_ENVIRONMENT", raising=False)
    monkeypatch.delenv("STATSVIEW_LOG_LEVEL", raising=False)

    config = StatsViewConfig.from_env()

    assert config == StatsViewConfig(by_weight=False, environment=None, log_level="INFO")


def test_from_env_reads_weighting_and_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should parse the weighting flag and environment label."""
    monkeypatch.setenv("STATSVIEW_BY_WEIGHT", "Yes")
    monkeypatch.setenv("STATSVIEW_ENVIRONMENT", "SERVING")
    monkeypatch.setenv("STATSVIEW_LOG_LEVEL", "debug")

    config = StatsViewConfig.from_env()

    assert config.by_weight is True
    assert config.environment == "SERVING"
    assert config.log_level == "DEBUG"


def test_from_env_treats_empty_environment_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """An empty environment variable should not become an empty label."""
    monkeypatch.setenv("STATSVIEW_ENVIRONMENT", "")

    config = StatsViewConfig.from_env()

    assert config.environment is None


def test_from_env_raises_for_invalid_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unrecognized weighting flag."""
    monkeypatch.setenv("STATSVIEW_BY_WEIGHT", "maybe")

    with pytest.raises(StatsViewConfigError):
        StatsViewConfig.from_env()


def test_from_env_raises_for_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unsupported log level."""
    monkeypatch.setenv("STATSVIEW_LOG_LEVEL", "chatty")

    with pytest.raises(StatsViewConfigError):
        StatsViewConfig.from_env()
