"""Dataset and feature views over a statistics snapshot.

This module exposes the navigation and derived-statistics surface used
by anomaly detection. View handles are cheap: a dataset view wraps one
shared index and a feature view is a (index, dataset view) pair.
"""

from __future__ import annotations

from core.config import StatsViewConfig
from core.errors import StatsViewContractError
from core.feature_path import FeaturePath
from core.types import (
    CustomStatistic,
    DatasetFeatureStatistics,
    FeatureNameStatistics,
    FeatureType,
    NumericStatistics,
    RankBucket,
    StatsType,
)
from views.stats_index import DatasetStatsIndex

_EMPTY_NUMERIC_STATISTICS = NumericStatistics()

_FEATURE_TYPE_BY_STATS_TYPE: dict[str, FeatureType] = {
    "INT": "INT",
    "FLOAT": "FLOAT",
    "STRING": "BYTES",
    "BYTES": "BYTES",
    "STRUCT": "STRUCT",
}


class DatasetStatsView:
    """Read-only handle over one dataset statistics snapshot.

    Copies share the same backing index; no statistics are ever copied
    through this class.
    """

    __slots__ = ("_impl",)

    def __init__(
        self,
        data: DatasetFeatureStatistics,
        by_weight: bool = False,
        environment: str | None = None,
        previous: DatasetStatsView | None = None,
        serving: DatasetStatsView | None = None,
    ) -> None:
        """Create a dataset view and index its feature records.

        Args:
            data: Dataset-level statistics record, owned by the caller.
            by_weight: Whether derived queries prefer weighted statistics.
            environment: Optional environment label.
            previous: Optional view of an earlier snapshot.
            serving: Optional view of the serving snapshot.

        Raises:
            StatsViewContractError: If two feature records share a path.
        """
        self._impl = DatasetStatsIndex(data, by_weight, environment, previous, serving)

    @classmethod
    def from_config(
        cls,
        data: DatasetFeatureStatistics,
        config: StatsViewConfig,
        previous: DatasetStatsView | None = None,
        serving: DatasetStatsView | None = None,
    ) -> "DatasetStatsView":
        """Create a dataset view using weighting and environment from config.

        Args:
            data: Dataset-level statistics record.
            config: Runtime configuration.
            previous: Optional view of an earlier snapshot.
            serving: Optional view of the serving snapshot.

        Returns:
            New dataset view.
        """
        return cls(
            data,
            by_weight=config.by_weight,
            environment=config.environment,
            previous=previous,
            serving=serving,
        )

    def __copy__(self) -> "DatasetStatsView":
        clone = object.__new__(type(self))
        clone._impl = self._impl
        return clone

    def __deepcopy__(self, memo: dict[int, object]) -> "DatasetStatsView":
        return self.__copy__()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DatasetStatsView):
            return NotImplemented
        return self._impl is other._impl

    def __hash__(self) -> int:
        return id(self._impl)

    def __repr__(self) -> str:
        return (
            f"DatasetStatsView(features={self._impl.feature_count}, "
            f"by_weight={self.by_weight}, environment={self.environment!r})"
        )

    @property
    def by_weight(self) -> bool:
        """Return whether derived queries prefer weighted statistics."""
        return self._impl.by_weight

    @property
    def environment(self) -> str | None:
        """Return the environment label, if any."""
        return self._impl.environment

    def features(self) -> list[FeatureStatsView]:
        """Return one feature view per record, in record order.

        The list is rebuilt on every call; it only packages indices.
        """
        return [FeatureStatsView(index, self) for index in range(self._impl.feature_count)]

    def get_root_features(self) -> list[FeatureStatsView]:
        """Return the feature views that have no parent."""
        return [
            FeatureStatsView(index, self)
            for index in range(self._impl.feature_count)
            if self._impl.parent_index(index) is None
        ]

    def get_num_examples(self) -> float:
        """Return the (weighted) number of examples.

        A zero may be a true count or an unset default; it does not mean
        the dataset is absent.
        """
        return self._impl.num_examples()

    def get_by_path(self, path: FeaturePath) -> FeatureStatsView | None:
        """Return the feature at ``path``, or None if no record has it."""
        index = self._impl.get_index(path)
        if index is None:
            return None
        return FeatureStatsView(index, self)

    def feature_name_statistics(self, index: int) -> FeatureNameStatistics:
        """Return the record at ``index``.

        Only FeatureStatsView should call this.

        Raises:
            StatsViewContractError: If the index is out of range.
        """
        return self._impl.feature_name_statistics(index)

    def weighted_statistics_exist(self) -> bool:
        """Return whether weighted statistics exist for every feature.

        This is independent of ``by_weight``.
        """
        return self._impl.weighted_statistics_exist

    def get_parent(self, view: FeatureStatsView) -> FeatureStatsView | None:
        """Return the parent of ``view``, if one exists.

        Feature ``a`` is an ancestor of ``b`` when ``a`` is a STRUCT and its
        path is a strict prefix of the path of ``b``. The parent is the
        ancestor with the longest path.
        """
        self._check_owned(view)
        parent = self._impl.parent_index(view.index)
        if parent is None:
            return None
        return FeatureStatsView(parent, self)

    def get_children(self, view: FeatureStatsView) -> list[FeatureStatsView]:
        """Return the features whose parent is ``view``, in record order."""
        self._check_owned(view)
        return [FeatureStatsView(index, self) for index in self._impl.child_indices(view.index)]

    def get_path(self, view: FeatureStatsView) -> FeaturePath:
        """Return the path of ``view``."""
        self._check_owned(view)
        return self._impl.path_of(view.index)

    def get_previous(self) -> DatasetStatsView | None:
        """Return the previous snapshot view, if configured."""
        return self._impl.previous

    def get_serving(self) -> DatasetStatsView | None:
        """Return the serving snapshot view, if configured."""
        return self._impl.serving

    def _check_owned(self, view: FeatureStatsView) -> None:
        if view.parent_view._impl is not self._impl:
            raise StatsViewContractError(
                f"Feature view at index {view.index} belongs to a different dataset view."
            )


class FeatureStatsView:
    """View of one feature record inside a dataset view.

    This class is effectively a pair of references and handles whether
    results are weighted or unweighted.
    """

    __slots__ = ("_parent_view", "_index")

    def __init__(self, index: int, parent_view: DatasetStatsView) -> None:
        """Create a feature view; normally obtained from DatasetStatsView.

        Args:
            index: Position of the record in the dataset record list.
            parent_view: Dataset view holding the record.
        """
        self._parent_view = parent_view
        self._index = index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureStatsView):
            return NotImplemented
        return self._index == other._index and self._parent_view == other._parent_view

    def __hash__(self) -> int:
        return hash((self._index, self._parent_view))

    def __repr__(self) -> str:
        return f"FeatureStatsView(path='{self.get_path()}', type={self.type})"

    @property
    def index(self) -> int:
        """Return the record index within the dataset view."""
        return self._index

    @property
    def parent_view(self) -> DatasetStatsView:
        """Return the dataset view holding this feature."""
        return self._parent_view

    @property
    def name(self) -> str:
        return self._data().name

    @property
    def type(self) -> StatsType:
        return self._data().type

    @property
    def environment(self) -> str | None:
        return self._parent_view.environment

    @property
    def is_struct(self) -> bool:
        return self.type == "STRUCT"

    @property
    def min_num_values(self) -> int:
        """Return the minimum value count, treating negatives as zero."""
        return max(self._data().common_stats.min_num_values, 0)

    @property
    def max_num_values(self) -> int:
        return self._data().common_stats.max_num_values

    @property
    def num_stats(self) -> NumericStatistics:
        """Return numeric statistics, or an empty object if none exist."""
        num_stats = self._data().num_stats
        return num_stats if num_stats is not None else _EMPTY_NUMERIC_STATISTICS

    def get_path(self) -> FeaturePath:
        """Return the feature path resolved through the dataset view."""
        return self._parent_view.get_path(self)

    def get_feature_type(self) -> FeatureType:
        """Return the physical feature type.

        BYTES and STRING statistics both map to the BYTES physical type.
        """
        return _FEATURE_TYPE_BY_STATS_TYPE.get(self.type, "TYPE_UNKNOWN")

    def get_num_present(self) -> float:
        """Return the (weighted) number of examples where the feature is present."""
        common_stats = self._data().common_stats
        weighted = common_stats.weighted_common_stats
        if self._parent_view.by_weight and weighted is not None:
            return weighted.num_non_missing
        return float(common_stats.num_non_missing)

    def get_num_examples(self) -> float:
        """Return the (weighted) number of examples, present or not."""
        return self._parent_view.get_num_examples()

    def get_num_missing(self) -> float:
        """Return the (weighted) number of examples missing the feature.

        Inconsistent statistics never yield a negative count.
        """
        return max(self.get_num_examples() - self.get_num_present(), 0.0)

    def get_fraction_present(self) -> float | None:
        """Return present / examples, or None when there are no examples."""
        num_examples = self.get_num_examples()
        if num_examples == 0:
            return None
        return self.get_num_present() / num_examples

    def get_total_value_count_in_examples(self) -> float:
        """Return the (weighted) total number of values of this feature."""
        common_stats = self._data().common_stats
        weighted = common_stats.weighted_common_stats
        if self._parent_view.by_weight and weighted is not None:
            if weighted.tot_num_values is not None:
                return weighted.tot_num_values
            return weighted.num_non_missing * weighted.avg_num_values
        if common_stats.tot_num_values is not None:
            return float(common_stats.tot_num_values)
        return common_stats.num_non_missing * common_stats.avg_num_values

    def get_string_values_with_counts(self) -> dict[str, float]:
        """Return observed string values with (weighted) counts, sorted by value.

        Returns an empty mapping when there are no string statistics.
        """
        return {bucket.label: bucket.sample_count for bucket in self._rank_buckets()}

    def get_string_values(self) -> list[str]:
        """Return the sorted observed string values."""
        return list(self.get_string_values_with_counts())

    def has_invalid_utf8_strings(self) -> bool:
        """Return True for STRING features with invalid UTF-8 values."""
        string_stats = self._data().string_stats
        if self.type != "STRING" or string_stats is None:
            return False
        return string_stats.invalid_utf8_count > 0

    def weighted_statistics_exist(self) -> bool:
        """Return whether weighted statistics exist for the dataset."""
        return self._parent_view.weighted_statistics_exist()

    def get_serving(self) -> FeatureStatsView | None:
        """Return the same-path feature in the serving view, if any."""
        serving = self._parent_view.get_serving()
        if serving is None:
            return None
        return serving.get_by_path(self.get_path())

    def get_previous(self) -> FeatureStatsView | None:
        """Return the same-path feature in the previous view, if any."""
        previous = self._parent_view.get_previous()
        if previous is None:
            return None
        return previous.get_by_path(self.get_path())

    def get_parent(self) -> FeatureStatsView | None:
        return self._parent_view.get_parent(self)

    def get_children(self) -> list[FeatureStatsView]:
        return self._parent_view.get_children(self)

    def custom_stats(self) -> list[CustomStatistic]:
        """Return a new list of the record's custom statistics."""
        return list(self._data().custom_stats)

    def _data(self) -> FeatureNameStatistics:
        return self._parent_view.feature_name_statistics(self._index)

    def _rank_buckets(self) -> list[RankBucket]:
        string_stats = self._data().string_stats
        if string_stats is None:
            return []
        buckets = string_stats.rank_histogram
        if self._parent_view.by_weight and string_stats.weighted_rank_histogram is not None:
            buckets = string_stats.weighted_rank_histogram
        return sorted(buckets, key=lambda bucket: bucket.label)
