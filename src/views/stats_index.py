"""Shared backing index for statistics views.

This module builds the path and parent indexes of one statistics
snapshot exactly once. Every dataset and feature view handle over the
snapshot shares a single instance, so copying a view never copies data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from core.errors import StatsViewContractError
from core.feature_path import FeaturePath
from core.logging_config import get_logger
from core.types import DatasetFeatureStatistics, FeatureNameStatistics

if TYPE_CHECKING:
    from views.statistics_view import DatasetStatsView

_LOGGER = get_logger(__name__)


class DatasetStatsIndex:
    """Immutable backing store for one dataset statistics snapshot.

    The index owns nothing but references: the statistics record stays
    owned by the caller and previous/serving views are shared.
    """

    def __init__(
        self,
        data: DatasetFeatureStatistics,
        by_weight: bool,
        environment: str | None = None,
        previous: DatasetStatsView | None = None,
        serving: DatasetStatsView | None = None,
    ) -> None:
        """Index a statistics snapshot.

        Args:
            data: Dataset-level statistics record.
            by_weight: Whether derived queries prefer weighted statistics.
            environment: Optional environment label.
            previous: Optional view of an earlier snapshot.
            serving: Optional view of the serving snapshot.

        Raises:
            StatsViewContractError: If two records share a path.
        """
        self._data = data
        self._by_weight = by_weight
        self._environment = environment
        self._previous = previous
        self._serving = serving
        self._paths = tuple(feature.feature_path() for feature in data.features)
        self._index_by_path = _build_path_index(self._paths)
        self._parent_by_index = _build_parent_index(
            data.features, self._paths, self._index_by_path
        )
        self._children_by_index = _build_children_index(self._parent_by_index)
        self._weighted_statistics_exist = _weighted_statistics_exist(data)
        _LOGGER.debug(
            "dataset_stats_indexed",
            dataset_name=data.name,
            feature_count=len(self._paths),
            root_count=sum(1 for parent in self._parent_by_index if parent is None),
            struct_count=sum(1 for feature in data.features if feature.type == "STRUCT"),
            by_weight=by_weight,
            environment=environment,
            weighted_statistics_exist=self._weighted_statistics_exist,
        )

    @property
    def by_weight(self) -> bool:
        """Return whether derived queries prefer weighted statistics."""
        return self._by_weight

    @property
    def environment(self) -> str | None:
        """Return the environment label, if any."""
        return self._environment

    @property
    def previous(self) -> DatasetStatsView | None:
        """Return the previous snapshot view, if configured."""
        return self._previous

    @property
    def serving(self) -> DatasetStatsView | None:
        """Return the serving snapshot view, if configured."""
        return self._serving

    @property
    def feature_count(self) -> int:
        """Return the number of feature records."""
        return len(self._paths)

    @property
    def weighted_statistics_exist(self) -> bool:
        """Return whether weighted statistics cover every feature."""
        return self._weighted_statistics_exist

    def num_examples(self) -> float:
        """Return the (weighted) dataset-level example count."""
        if self._by_weight:
            return float(self._data.weighted_num_examples or 0.0)
        return float(self._data.num_examples)

    def feature_name_statistics(self, index: int) -> FeatureNameStatistics:
        """Return the record at ``index``.

        Args:
            index: Position in the record list.

        Returns:
            The statistics record.

        Raises:
            StatsViewContractError: If the index is out of range.
        """
        self._check_index(index)
        return self._data.features[index]

    def get_index(self, path: FeaturePath) -> int | None:
        """Return the record index for ``path``, or None if absent."""
        return self._index_by_path.get(path)

    def path_of(self, index: int) -> FeaturePath:
        """Return the path of the record at ``index``."""
        self._check_index(index)
        return self._paths[index]

    def parent_index(self, index: int) -> int | None:
        """Return the parent record index, or None for a root feature."""
        self._check_index(index)
        return self._parent_by_index[index]

    def child_indices(self, index: int) -> tuple[int, ...]:
        """Return child record indices in record order."""
        self._check_index(index)
        return self._children_by_index[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._paths):
            raise StatsViewContractError(
                f"Feature index {index} is out of range for "
                f"{len(self._paths)} feature records."
            )


def _build_path_index(paths: tuple[FeaturePath, ...]) -> dict[FeaturePath, int]:
    """Map every record path to its index.

    Args:
        paths: Record paths in record order.

    Returns:
        Path to index mapping.

    Raises:
        StatsViewContractError: If a path occurs twice.
    """
    index_by_path: dict[FeaturePath, int] = {}
    for index, path in enumerate(paths):
        if path in index_by_path:
            raise StatsViewContractError(
                f"Duplicate feature path '{path}' at records "
                f"{index_by_path[path]} and {index}."
            )
        index_by_path[path] = index
    return index_by_path


def _build_parent_index(
    features: tuple[FeatureNameStatistics, ...],
    paths: tuple[FeaturePath, ...],
    index_by_path: Mapping[FeaturePath, int],
) -> tuple[int | None, ...]:
    """Resolve each record's parent as its deepest STRUCT-typed ancestor.

    Proper prefixes are probed from longest to shortest, so the first
    STRUCT hit is the ancestor with the longest path.

    Args:
        features: Records in record order.
        paths: Record paths in record order.
        index_by_path: Path to index mapping.

    Returns:
        Parent index per record, None for root features.
    """
    parents: list[int | None] = []
    for path in paths:
        parent: int | None = None
        for prefix_length in range(len(path) - 1, 0, -1):
            candidate = index_by_path.get(FeaturePath(path.steps[:prefix_length]))
            if candidate is not None and features[candidate].type == "STRUCT":
                parent = candidate
                break
        parents.append(parent)
    return tuple(parents)


def _build_children_index(
    parent_by_index: tuple[int | None, ...],
) -> tuple[tuple[int, ...], ...]:
    children: list[list[int]] = [[] for _ in parent_by_index]
    for index, parent in enumerate(parent_by_index):
        if parent is not None:
            children[parent].append(index)
    return tuple(tuple(child_list) for child_list in children)


def _weighted_statistics_exist(data: DatasetFeatureStatistics) -> bool:
    # Weighted stats must have feature parity with unweighted stats.
    if data.weighted_num_examples is None:
        return False
    return all(
        feature.common_stats.weighted_common_stats is not None
        for feature in data.features
    )
