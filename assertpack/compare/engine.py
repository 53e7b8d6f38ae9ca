"""Recursive, cycle-safe structural equality engine.

The engine is pure: every top-level call allocates its own ``VisitedPairSet``
and nothing is shared between calls. Callers must not mutate the values
being compared while a comparison is running.
"""

from __future__ import annotations

from typing import Any

from assertpack.compare.exceptions import ComparisonTypeError
from assertpack.compare.models import (
    EQUAL,
    EXACT,
    MISSING,
    ComparisonOptions,
    ComparisonResult,
)
from assertpack.core.identity import VisitedPairSet
from assertpack.core.values import (
    classify,
    composite_items,
    container_family,
    composite_values,
    identity,
    is_composite,
    is_finite_number,
    numeric_distance,
)


def equals(
    actual: Any,
    expected: Any,
    options: ComparisonOptions | None = None,
) -> ComparisonResult:
    """Compare two values structurally.

    Composites are equal when they have the same key set and every value
    compares equal, recursively. Cycles terminate through the visited-pair set:
    a pair entered earlier in the same call is assumed equal, so the verdict
    does not depend on key order and is symmetric.
    """
    return _compare(
        actual,
        expected,
        path=(),
        options=options or EXACT,
        visited=VisitedPairSet(),
    )


def identical(actual: Any, expected: Any) -> bool:
    """Identity check that never descends into contents."""
    if classify(actual) != classify(expected):
        return False
    if identity(actual) is not None:
        return actual is expected
    return bool(actual == expected)


def items_equal(
    actual: Any,
    expected: Any,
    options: ComparisonOptions | None = None,
) -> bool:
    """Order-independent multiset comparison of two composites' values.

    Items are matched with ``equals``; nested composites are compared
    structurally, key order included, not as multisets.
    """
    actual_items = _container_values(actual, role="actual")
    expected_items = _container_values(expected, role="expected")
    if len(actual_items) != len(expected_items):
        return False

    unmatched = list(range(len(expected_items)))
    for item in actual_items:
        for position, index in enumerate(unmatched):
            if equals(item, expected_items[index], options).equal:
                del unmatched[position]
                break
        else:
            return False
    return True


def contains_element(
    container: Any,
    element: Any,
    options: ComparisonOptions | None = None,
) -> bool:
    """True when any value of ``container`` structurally equals ``element``."""
    return any(
        equals(item, element, options).equal
        for item in _container_values(container, role="container")
    )


def _container_values(value: Any, *, role: str) -> list[Any]:
    if not is_composite(value):
        raise ComparisonTypeError(
            f"{role} must be a composite value, got {type(value).__name__}"
        )
    return composite_values(value)


def _compare(
    actual: Any,
    expected: Any,
    *,
    path: tuple[Any, ...],
    options: ComparisonOptions,
    visited: VisitedPairSet,
) -> ComparisonResult:
    actual_identity = identity(actual)
    if actual_identity is not None and actual_identity == identity(expected):
        return EQUAL

    kind = classify(actual)
    if kind != classify(expected):
        return ComparisonResult.unequal(path, "type_mismatch", actual, expected)

    if kind != "composite":
        if _scalars_equal(actual, expected, options):
            return EQUAL
        return ComparisonResult.unequal(path, "scalar_mismatch", actual, expected)

    if container_family(actual) != container_family(expected):
        return ComparisonResult.unequal(path, "type_mismatch", actual, expected)

    if visited.contains(actual, expected):
        return EQUAL

    # Only the pair set decides the verdict; the ancestor chains merely label
    # a mismatch found below a pair where one side loops back on itself.
    asymmetric = visited.is_asymmetric(actual, expected)
    with visited.descending(actual, expected):
        result = _compare_composites(
            actual,
            expected,
            path=path,
            options=options,
            visited=visited,
        )
    if asymmetric and not result.equal and result.reason != "cycle_asymmetry_mismatch":
        return ComparisonResult.unequal(path, "cycle_asymmetry_mismatch", actual, expected)
    return result


def _scalars_equal(actual: Any, expected: Any, options: ComparisonOptions) -> bool:
    if (
        options.margin is not None
        and is_finite_number(actual)
        and is_finite_number(expected)
    ):
        return numeric_distance(actual, expected) <= options.margin
    return bool(actual == expected)


def _compare_composites(
    actual: Any,
    expected: Any,
    *,
    path: tuple[Any, ...],
    options: ComparisonOptions,
    visited: VisitedPairSet,
) -> ComparisonResult:
    expected_items = composite_items(expected)
    key_index: dict[Any, int] = {}
    for index, (key, _) in enumerate(expected_items):
        key_index.setdefault(key, index)
    matched = [False] * len(expected_items)

    for key, actual_value in composite_items(actual):
        index = _match_key(key, key_index, expected_items, matched)
        child_path = path + (key,)
        if index is None:
            return ComparisonResult.unequal(child_path, "key_set_mismatch", actual_value, MISSING)
        matched[index] = True

        child = _compare(
            actual_value,
            expected_items[index][1],
            path=child_path,
            options=options,
            visited=visited,
        )
        if not child.equal:
            return child

    for index, (key, expected_value) in enumerate(expected_items):
        if not matched[index]:
            return ComparisonResult.unequal(
                path + (key,), "key_set_mismatch", MISSING, expected_value
            )
    return EQUAL


def _match_key(
    key: Any,
    key_index: dict[Any, int],
    expected_items: list[tuple[Any, Any]],
    matched: list[bool],
) -> int | None:
    index = key_index.get(key)
    if index is not None and not matched[index] and _keys_equal(key, expected_items[index][0]):
        return index

    # Hash lookup misses keys that are only structurally equal (1 vs True
    # also collide in hashing, hence the verification above).
    for index, (candidate, _) in enumerate(expected_items):
        if not matched[index] and _keys_equal(key, candidate):
            return index
    return None


def _keys_equal(left: Any, right: Any) -> bool:
    if not is_composite(left):
        if left is right:
            # An identical NaN object is the same dict key, though never an
            # equal value.
            return True
        return classify(left) == classify(right) and _scalars_equal(left, right, EXACT)
    return _compare(left, right, path=(), options=EXACT, visited=VisitedPairSet()).equal
