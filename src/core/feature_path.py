"""Feature path identity.

A feature path is the ordered sequence of name segments that locates a
feature inside a (possibly nested) statistics record list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.constants import PATH_SEPARATOR
from core.errors import StatsViewContractError

_RESERVED_CHARACTERS = (PATH_SEPARATOR, "(", ")")


@dataclass(frozen=True, order=True)
class FeaturePath:
    """Immutable sequence of feature name segments.

    Attributes:
        steps: Name segments from the root feature downwards.
    """

    steps: tuple[str, ...] = ()

    @classmethod
    def from_steps(cls, steps: Iterable[str]) -> "FeaturePath":
        """Build a path from any iterable of segments."""
        return cls(tuple(str(step) for step in steps))

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(_serialize_step(step) for step in self.steps)

    def is_empty(self) -> bool:
        """Return whether the path has no segments."""
        return not self.steps

    def is_strict_prefix_of(self, other: "FeaturePath") -> bool:
        """Return whether this path is a proper initial segment of ``other``.

        Args:
            other: Candidate descendant path.

        Returns:
            True when ``other`` is strictly longer and starts with this path.
        """
        if len(self.steps) >= len(other.steps):
            return False
        return other.steps[: len(self.steps)] == self.steps

    def get_child(self, step: str) -> "FeaturePath":
        """Return the path extended by one segment."""
        return FeaturePath(self.steps + (step,))

    def get_parent(self) -> "FeaturePath":
        """Return the path without its last segment.

        Raises:
            StatsViewContractError: If the path is empty.
        """
        if not self.steps:
            raise StatsViewContractError("The empty feature path has no parent.")
        return FeaturePath(self.steps[:-1])


def _serialize_step(step: str) -> str:
    # Reserved characters force parenthesized form with doubled parens.
    if not any(character in step for character in _RESERVED_CHARACTERS):
        return step
    escaped = step.replace("(", "((").replace(")", "))")
    return f"({escaped})"
