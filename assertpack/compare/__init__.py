"""Structural equality engine for assertkit."""

from assertpack.compare.engine import contains_element, equals, identical, items_equal
from assertpack.compare.exceptions import (
    ComparisonConfigError,
    ComparisonError,
    ComparisonTypeError,
)
from assertpack.compare.models import (
    EPS,
    EQUAL,
    MISMATCH_REASONS,
    MISSING,
    ComparisonOptions,
    ComparisonResult,
    MismatchReason,
)

__all__ = [
    "EPS",
    "EQUAL",
    "MISSING",
    "MISMATCH_REASONS",
    "MismatchReason",
    "ComparisonOptions",
    "ComparisonResult",
    "ComparisonError",
    "ComparisonConfigError",
    "ComparisonTypeError",
    "equals",
    "identical",
    "items_equal",
    "contains_element",
]
