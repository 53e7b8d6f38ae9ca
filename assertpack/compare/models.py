"""Data models for structural comparison results."""

from __future__ import annotations

from dataclasses import dataclass
import math
import sys
from typing import Any, Literal

from assertpack.compare.exceptions import ComparisonConfigError

EPS = sys.float_info.epsilon

MismatchReason = Literal[
    "type_mismatch",
    "scalar_mismatch",
    "key_set_mismatch",
    "cycle_asymmetry_mismatch",
]

MISMATCH_REASONS: tuple[str, ...] = (
    "type_mismatch",
    "scalar_mismatch",
    "key_set_mismatch",
    "cycle_asymmetry_mismatch",
)


class _Missing:
    """Placeholder for the absent side of a key-set mismatch."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class ComparisonOptions:
    """Options for one comparison.

    ``margin`` is ``None`` for exact equality; otherwise finite numbers are
    equal when their absolute difference is at most ``margin``.
    """

    margin: float | None = None

    def __post_init__(self) -> None:
        if self.margin is None:
            return
        if isinstance(self.margin, bool) or not isinstance(self.margin, (int, float)):
            raise ComparisonConfigError("margin must be a number")
        if math.isnan(self.margin) or self.margin < 0:
            raise ComparisonConfigError(f"margin must be a non-negative number, got {self.margin!r}")

    @classmethod
    def approximate(cls, margin: float | None = None) -> "ComparisonOptions":
        return cls(margin=EPS if margin is None else margin)

    @property
    def approximate_mode(self) -> bool:
        return self.margin is not None


EXACT = ComparisonOptions()


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Verdict of a structural comparison.

    For a mismatch, ``path`` lists the keys from the root to the first point
    of divergence and ``actual`` / ``expected`` hold the diverging sub-values
    (``MISSING`` for an absent key).
    """

    equal: bool
    path: tuple[Any, ...] = ()
    reason: MismatchReason | None = None
    actual: Any = None
    expected: Any = None

    @classmethod
    def unequal(
        cls,
        path: tuple[Any, ...],
        reason: MismatchReason,
        actual: Any,
        expected: Any,
    ) -> "ComparisonResult":
        return cls(equal=False, path=path, reason=reason, actual=actual, expected=expected)

    def __bool__(self) -> bool:
        return self.equal


EQUAL = ComparisonResult(equal=True)
