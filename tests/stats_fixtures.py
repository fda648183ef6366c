"""Shared statistics record builders for tests."""

from __future__ import annotations

from core.types import (
    CommonStatistics,
    DatasetFeatureStatistics,
    FeatureNameStatistics,
    StatsType,
    WeightedCommonStatistics,
)


def feature(
    path: tuple[str, ...],
    stats_type: StatsType = "INT",
    num_non_missing: float = 10.0,
    weighted_num_non_missing: float | None = None,
    **record_fields: object,
) -> FeatureNameStatistics:
    """Build a feature record addressed by an explicit path.

    Args:
        path: Feature path segments.
        stats_type: Declared statistics type.
        num_non_missing: Unweighted presence count.
        weighted_num_non_missing: Weighted presence count, if any.
        record_fields: Extra FeatureNameStatistics fields.

    Returns:
        Feature statistics record.
    """
    weighted = None
    if weighted_num_non_missing is not None:
        weighted = WeightedCommonStatistics(num_non_missing=weighted_num_non_missing)
    common_stats = record_fields.pop(
        "common_stats",
        CommonStatistics(num_non_missing=num_non_missing, weighted_common_stats=weighted),
    )
    return FeatureNameStatistics(
        name=path[-1],
        type=stats_type,
        path=path,
        common_stats=common_stats,  # type: ignore[arg-type]
        **record_fields,  # type: ignore[arg-type]
    )


def dataset(
    *features: FeatureNameStatistics,
    num_examples: int = 10,
    weighted_num_examples: float | None = None,
) -> DatasetFeatureStatistics:
    """Build a dataset record from feature records."""
    return DatasetFeatureStatistics(
        name="test",
        num_examples=num_examples,
        weighted_num_examples=weighted_num_examples,
        features=tuple(features),
    )
