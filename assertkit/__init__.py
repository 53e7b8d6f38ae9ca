"""Stable public API surface for assertkit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from assertpack.assertions import (
    AssertionFailure,
    AssertionResult,
    assert_almost_equals,
    assert_contains,
    assert_equals,
    assert_inf,
    assert_is,
    assert_items_equals,
    assert_minus_inf,
    assert_minus_zero,
    assert_nan,
    assert_not_almost_equals,
    assert_not_contains,
    assert_not_equals,
    assert_not_inf,
    assert_not_is,
    assert_not_minus_inf,
    assert_not_minus_zero,
    assert_not_nan,
    assert_not_plus_inf,
    assert_not_plus_zero,
    assert_plus_inf,
    assert_plus_zero,
)
from assertpack.compare import (
    EPS,
    ComparisonOptions,
    ComparisonResult,
    contains_element,
    equals,
    identical,
    items_equal,
)
from assertpack.report import pretty_print, report
from assertpack.settings import AssertionSettings, use_settings

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "EPS",
    "ComparisonOptions",
    "ComparisonResult",
    "AssertionFailure",
    "AssertionResult",
    "AssertionSettings",
    "equals",
    "identical",
    "items_equal",
    "contains_element",
    "report",
    "pretty_print",
    "use_settings",
    "assert_equals",
    "assert_not_equals",
    "assert_almost_equals",
    "assert_not_almost_equals",
    "assert_is",
    "assert_not_is",
    "assert_items_equals",
    "assert_contains",
    "assert_not_contains",
    "assert_nan",
    "assert_not_nan",
    "assert_plus_inf",
    "assert_not_plus_inf",
    "assert_minus_inf",
    "assert_not_minus_inf",
    "assert_inf",
    "assert_not_inf",
    "assert_plus_zero",
    "assert_not_plus_zero",
    "assert_minus_zero",
    "assert_not_minus_zero",
]
