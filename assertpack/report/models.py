"""Data models for mismatch reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from assertpack.compare.models import MismatchReason


@dataclass(frozen=True, slots=True)
class IndexedValue:
    """A value at a 1-based list position on one side of a list diff."""

    index: int
    value: Any


@dataclass(frozen=True, slots=True)
class CommonEntry:
    """A value shared by both lists, with its position on each side."""

    actual_index: int
    expected_index: int
    value: Any


@dataclass(slots=True)
class ListDiffReport:
    """Positional diff of two list-shaped composites.

    The lists decompose into a common prefix, a diverging middle on each side
    and a common suffix. Prefix and suffix never overlap.
    """

    actual_length: int
    expected_length: int
    common_prefix: list[CommonEntry] = field(default_factory=list)
    actual_middle: list[IndexedValue] = field(default_factory=list)
    expected_middle: list[IndexedValue] = field(default_factory=list)
    common_suffix: list[CommonEntry] = field(default_factory=list)

    @property
    def same_length(self) -> bool:
        return self.actual_length == self.expected_length

    @property
    def first_diverging_index(self) -> int:
        return len(self.common_prefix) + 1

    @property
    def suffix_length(self) -> int:
        return len(self.common_suffix)

    @property
    def last_diverging_index_from_end(self) -> int:
        """1-based distance from the end of the last diverging position."""
        return self.suffix_length + 1

    @property
    def reconverging_indices(self) -> tuple[int, int] | None:
        """Start of the common suffix in A and in B, when there is one."""
        if not self.common_suffix:
            return None
        first = self.common_suffix[0]
        return first.actual_index, first.expected_index

    @property
    def actual_is_prefix(self) -> bool:
        return len(self.common_prefix) == self.actual_length < self.expected_length

    @property
    def expected_is_prefix(self) -> bool:
        return len(self.common_prefix) == self.expected_length < self.actual_length

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "list_diff",
            "actual_length": self.actual_length,
            "expected_length": self.expected_length,
            "same_length": self.same_length,
            "first_diverging_index": self.first_diverging_index,
            "last_diverging_index_from_end": self.last_diverging_index_from_end,
            "common_prefix_length": len(self.common_prefix),
            "actual_diverging_indices": [entry.index for entry in self.actual_middle],
            "expected_diverging_indices": [entry.index for entry in self.expected_middle],
            "common_suffix_length": self.suffix_length,
        }


@dataclass(frozen=True, slots=True)
class GenericMismatchReport:
    """Rendered forms of two mismatching values and where they diverge."""

    actual_text: str
    expected_text: str
    path: tuple[Any, ...]
    path_text: str
    reason: MismatchReason | None
    actual_at_path_text: str
    expected_at_path_text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "generic",
            "actual": self.actual_text,
            "expected": self.expected_text,
            "path": self.path_text,
            "reason": self.reason,
            "actual_at_path": self.actual_at_path_text,
            "expected_at_path": self.expected_at_path_text,
        }


DiffReport = ListDiffReport | GenericMismatchReport
