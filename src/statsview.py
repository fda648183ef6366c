"""Public SDK surface for statsview.

This module provides a stable import path for view consumers.
It re-exports the view handles, record models, and config.
"""

from __future__ import annotations

from core.config import StatsViewConfig
from core.errors import StatsViewConfigError, StatsViewContractError, StatsViewError
from core.feature_path import FeaturePath
from core.logging_config import configure_logging, get_logger
from core.types import (
    CommonStatistics,
    CustomStatistic,
    DatasetFeatureStatistics,
    FeatureNameStatistics,
    FeatureType,
    NumericStatistics,
    RankBucket,
    StatsType,
    StringStatistics,
    WeightedCommonStatistics,
)
from views.statistics_view import DatasetStatsView, FeatureStatsView

__all__ = [
    "CommonStatistics",
    "CustomStatistic",
    "DatasetFeatureStatistics",
    "DatasetStatsView",
    "FeatureNameStatistics",
    "FeaturePath",
    "FeatureStatsView",
    "FeatureType",
    "NumericStatistics",
    "RankBucket",
    "StatsType",
    "StatsViewConfig",
    "StatsViewConfigError",
    "StatsViewContractError",
    "StatsViewError",
    "StringStatistics",
    "WeightedCommonStatistics",
    "configure_logging",
    "get_logger",
]
