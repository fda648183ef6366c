"""Shared typed models.

This module defines immutable statistics records consumed by the view
layer. Records are produced by an external statistics pipeline and are
only ever read here, never copied or mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from core.feature_path import FeaturePath

StatsType = Literal["INT", "FLOAT", "STRING", "BYTES", "STRUCT"]
FeatureType = Literal["TYPE_UNKNOWN", "BYTES", "INT", "FLOAT", "STRUCT"]


@dataclass(frozen=True)
class WeightedCommonStatistics:
    """Presence and value counts computed with per-example weights.

    Attributes:
        num_non_missing: Weighted number of examples with the feature.
        num_missing: Weighted number of examples without the feature.
        avg_num_values: Weighted average number of values per example.
        tot_num_values: Weighted total number of values, when recorded.
    """

    num_non_missing: float = 0.0
    num_missing: float = 0.0
    avg_num_values: float = 0.0
    tot_num_values: float | None = None


@dataclass(frozen=True)
class CommonStatistics:
    """Type-independent presence and value-count statistics.

    Attributes:
        num_non_missing: Number of examples with the feature.
        num_missing: Number of examples without the feature.
        min_num_values: Smallest value count seen in one example.
        max_num_values: Largest value count seen in one example.
        avg_num_values: Average number of values per example.
        tot_num_values: Total number of values, when recorded.
        weighted_common_stats: Weighted counterpart, when computed.
    """

    num_non_missing: float = 0.0
    num_missing: float = 0.0
    min_num_values: int = 0
    max_num_values: int = 0
    avg_num_values: float = 0.0
    tot_num_values: float | None = None
    weighted_common_stats: WeightedCommonStatistics | None = None


@dataclass(frozen=True)
class NumericStatistics:
    """Summary statistics for INT and FLOAT features."""

    mean: float = 0.0
    std_dev: float = 0.0
    num_zeros: int = 0
    min: float = 0.0
    median: float = 0.0
    max: float = 0.0


@dataclass(frozen=True)
class RankBucket:
    """One labelled bucket of a rank histogram."""

    label: str
    sample_count: float


@dataclass(frozen=True)
class StringStatistics:
    """Value distribution statistics for STRING and BYTES features.

    Attributes:
        unique: Number of distinct values.
        avg_length: Average value length.
        rank_histogram: Unweighted value counts.
        weighted_rank_histogram: Weighted value counts, when computed.
        invalid_utf8_count: Number of values that are not valid UTF-8.
    """

    unique: int = 0
    avg_length: float = 0.0
    rank_histogram: tuple[RankBucket, ...] = ()
    weighted_rank_histogram: tuple[RankBucket, ...] | None = None
    invalid_utf8_count: int = 0


@dataclass(frozen=True)
class CustomStatistic:
    """Free-form named statistic attached by the producing pipeline."""

    name: str
    num: float | None = None
    str_value: str | None = None


@dataclass(frozen=True)
class FeatureNameStatistics:
    """Statistics record for one feature.

    Attributes:
        name: Feature name; used as a one-step path when ``path`` is unset.
        type: Declared statistics type.
        common_stats: Presence and value-count statistics.
        path: Explicit multi-step path for nested features.
        num_stats: Numeric statistics, when computed.
        string_stats: String statistics, when computed.
        custom_stats: Additional named statistics.
    """

    name: str
    type: StatsType
    common_stats: CommonStatistics = field(default_factory=CommonStatistics)
    path: tuple[str, ...] | None = None
    num_stats: NumericStatistics | None = None
    string_stats: StringStatistics | None = None
    custom_stats: tuple[CustomStatistic, ...] = ()

    def feature_path(self) -> FeaturePath:
        """Return the path identifying this record."""
        if self.path is not None:
            return FeaturePath.from_steps(self.path)
        return FeaturePath((self.name,))


@dataclass(frozen=True)
class DatasetFeatureStatistics:
    """Statistics record for one dataset snapshot.

    Attributes:
        name: Dataset identifier.
        num_examples: Unweighted total example count.
        weighted_num_examples: Weighted total, or None when not computed.
        features: Per-feature records in producer order.
    """

    name: str = ""
    num_examples: int = 0
    weighted_num_examples: float | None = None
    features: tuple[FeatureNameStatistics, ...] = ()
