"""Visited-pair tracking for cycle-safe traversal."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

IdentityPair = tuple[int, int]


@dataclass(slots=True)
class VisitedPairSet:
    """Pairs of composites already entered during one top-level comparison.

    A fresh instance belongs to exactly one ``equals`` call. It also keeps the
    ancestor chain of each side, used to label a mismatch found below a loop
    on only one side.
    """

    pairs: set[IdentityPair] = field(default_factory=set)
    _actual_chain: Counter[int] = field(default_factory=Counter, repr=False)
    _expected_chain: Counter[int] = field(default_factory=Counter, repr=False)

    def __len__(self) -> int:
        return len(self.pairs)

    def contains(self, actual: Any, expected: Any) -> bool:
        return (id(actual), id(expected)) in self.pairs

    def mark(self, actual: Any, expected: Any) -> None:
        self.pairs.add((id(actual), id(expected)))

    def is_asymmetric(self, actual: Any, expected: Any) -> bool:
        """True when exactly one side loops back onto its own ancestors."""
        actual_loops = self._actual_chain[id(actual)] > 0
        expected_loops = self._expected_chain[id(expected)] > 0
        return actual_loops != expected_loops

    @contextmanager
    def descending(self, actual: Any, expected: Any) -> Iterator[None]:
        """Mark the pair visited and keep both sides on the ancestor chain."""
        self.mark(actual, expected)
        self._actual_chain[id(actual)] += 1
        self._expected_chain[id(expected)] += 1
        try:
            yield
        finally:
            self._actual_chain[id(actual)] -= 1
            self._expected_chain[id(expected)] -= 1
