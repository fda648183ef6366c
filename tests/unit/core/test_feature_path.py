"""Unit tests for feature path identity."""

from __future__ import annotations

import pytest

from core.errors import StatsViewContractError
from core.feature_path import FeaturePath


def test_paths_with_equal_steps_are_equal_and_hash_alike() -> None:
    """Paths should compare by segment sequence."""
    left = FeaturePath(("a", "b"))
    right = FeaturePath.from_steps(["a", "b"])

    assert left == right
    assert hash(left) == hash(right)
    assert {left: 1}[right] == 1


def test_is_strict_prefix_of_requires_proper_prefix() -> None:
    """Only shorter paths with matching leading steps are strict prefixes."""
    parent = FeaturePath(("a",))
    child = FeaturePath(("a", "b"))

    assert parent.is_strict_prefix_of(child)
    assert not child.is_strict_prefix_of(parent)
    assert not parent.is_strict_prefix_of(parent)
    assert not FeaturePath(("ab",)).is_strict_prefix_of(FeaturePath(("a", "b")))


def test_get_child_and_get_parent_are_inverse() -> None:
    """Extending then shortening a path should return the original."""
    path = FeaturePath(("a",))

    assert path.get_child("b") == FeaturePath(("a", "b"))
    assert path.get_child("b").get_parent() == path
    assert path.get_parent().is_empty()


def test_get_parent_of_empty_path_raises() -> None:
    """The empty path has no parent."""
    with pytest.raises(StatsViewContractError):
        FeaturePath().get_parent()


def test_str_escapes_reserved_characters() -> None:
    """Serialized paths should stay unambiguous for dotted step names."""
    assert str(FeaturePath(("a", "b"))) == "a.b"
    assert str(FeaturePath(("a.b", "c"))) == "(a.b).c"
    assert str(FeaturePath(("f(x)",))) == "(f((x)))"


def test_paths_are_ordered_by_steps() -> None:
    """Sorting should follow segment order."""
    paths = [FeaturePath(("b",)), FeaturePath(("a", "z")), FeaturePath(("a",))]

    assert sorted(paths) == [FeaturePath(("a",)), FeaturePath(("a", "z")), FeaturePath(("b",))]
