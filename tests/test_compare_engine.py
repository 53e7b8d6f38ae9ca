from collections import OrderedDict
from fractions import Fraction
import math

import pytest

from assertpack.compare import (
    EPS,
    MISSING,
    ComparisonConfigError,
    ComparisonOptions,
    equals,
    identical,
)


def _self_list() -> list:
    value: list = []
    value.append(value)
    return value


def _diamond(depth: int) -> list:
    level: list = [0]
    for _ in range(depth):
        level = [level, level]
    return level


def test_equal_scalars_and_composites() -> None:
    assert equals(1, 1).equal
    assert equals("a", "a").equal
    assert equals(None, None).equal
    assert equals([1, [2, 3]], [1, [2, 3]]).equal
    assert equals({"a": {"b": [1]}}, {"a": {"b": [1]}}).equal
    assert bool(equals([], []))


def test_reflexivity_includes_self_referential_values() -> None:
    cyclic = _self_list()
    mapping: dict = {"v": 1}
    mapping["self"] = mapping
    for value in (cyclic, mapping, [math.nan], {"k": (1, 2)}):
        assert equals(value, value).equal


def test_type_mismatch_at_root_and_nested() -> None:
    root = equals(1, "1")
    assert not root.equal
    assert root.path == ()
    assert root.reason == "type_mismatch"

    nested = equals({"a": [1, True]}, {"a": [1, 1]})
    assert nested.path == ("a", 2)
    assert nested.reason == "type_mismatch"
    assert nested.actual is True
    assert nested.expected == 1


def test_list_and_tuple_do_not_compare_equal() -> None:
    result = equals([1, 2], (1, 2))
    assert result.reason == "type_mismatch"


def test_mapping_types_and_set_types_compare_across_classes() -> None:
    assert equals({"a": 1, "b": 2}, OrderedDict([("b", 2), ("a", 1)])).equal
    assert equals({1, 2}, frozenset({2, 1})).equal


def test_scalar_mismatch_reports_first_diverging_path() -> None:
    result = equals({"x": [1, {"y": 2}]}, {"x": [1, {"y": 3}]})
    assert result.path == ("x", 2, "y")
    assert result.reason == "scalar_mismatch"
    assert (result.actual, result.expected) == (2, 3)


def test_key_set_mismatch_marks_the_missing_side() -> None:
    extra_expected = equals({"a": 1}, {"a": 1, "b": 2})
    assert extra_expected.path == ("b",)
    assert extra_expected.reason == "key_set_mismatch"
    assert extra_expected.actual is MISSING
    assert extra_expected.expected == 2

    extra_actual = equals({"a": 1, "b": 2}, {"a": 1})
    assert extra_actual.path == ("b",)
    assert extra_actual.actual == 2
    assert extra_actual.expected is MISSING

    shorter = equals([1, 2], [1, 2, 3])
    assert shorter.path == (3,)
    assert shorter.reason == "key_set_mismatch"


def test_keys_are_matched_structurally_not_by_hash_alone() -> None:
    assert equals({(1, (2, 3)): "a"}, {(1, (2, 3)): "a"}).equal
    assert equals({1: "a"}, {1.0: "a"}).equal

    result = equals({True: "a"}, {1: "a"})
    assert result.reason == "key_set_mismatch"
    assert result.path == (True,)


def test_first_mismatch_follows_actual_iteration_order() -> None:
    result = equals({"b": 1, "a": 1}, {"a": 2, "b": 2})
    assert result.path == ("b",)


def test_isomorphic_cycles_compare_equal() -> None:
    assert equals(_self_list(), _self_list()).equal

    left: dict = {"v": 1}
    left["self"] = left
    right: dict = {"v": 1}
    right["self"] = right
    assert equals(left, right).equal

    right["v"] = 2
    result = equals(left, right)
    assert result.path == ("v",)
    assert result.reason == "scalar_mismatch"


def test_two_step_cycles_compare_equal() -> None:
    first_a: list = ["a"]
    first_b: list = ["b", first_a]
    first_a.append(first_b)

    second_a: list = ["a"]
    second_b: list = ["b", second_a]
    second_a.append(second_b)

    assert equals(first_a, second_a).equal


def test_cycles_of_different_length_with_same_unrolling_are_equal() -> None:
    looping = _self_list()
    outer: list = []
    outer.append([outer])

    assert equals(outer, looping).equal
    assert equals(looping, outer).equal


def test_mismatch_below_one_sided_loop_is_labelled() -> None:
    looping = _self_list()
    outer: list = []
    outer.append([outer, 1])

    forward = equals(outer, looping)
    assert not forward.equal
    assert forward.path == (1,)
    assert forward.reason == "cycle_asymmetry_mismatch"

    backward = equals(looping, outer)
    assert not backward.equal
    assert backward.reason == "cycle_asymmetry_mismatch"


def test_cyclic_verdict_does_not_depend_on_key_order() -> None:
    a0: dict = {}
    a1: dict = {}
    a0.update({"b": a1, "a": a1})
    a1.update({"b": a0, "a": a1})
    b0: dict = {}
    b1: dict = {}
    b0.update({"a": b1, "b": b0})
    b1.update({"b": b0, "a": b0})

    assert equals(a0, b0).equal
    assert equals(b0, a0).equal

    b1["a"] = {"leaf": 1}
    assert not equals(a0, b0).equal
    assert not equals(b0, a0).equal


def test_diamond_sharing_is_compared_without_blowup() -> None:
    assert equals(_diamond(64), _diamond(64)).equal

    tweaked = _diamond(64)
    assert not equals(_diamond(64), [tweaked, [0]]).equal


def test_nan_never_equals_nan() -> None:
    result = equals(math.nan, math.nan)
    assert result.reason == "scalar_mismatch"
    assert not equals([math.nan], [math.nan]).equal
    assert not equals(math.nan, math.nan, ComparisonOptions(margin=1.0)).equal


def test_signed_zeros_compare_equal() -> None:
    assert equals(0.0, -0.0).equal
    assert equals([-0.0], [0]).equal


def test_margin_equality() -> None:
    assert equals(1.0, 1.0 + 1e-20, ComparisonOptions(margin=1e-10)).equal
    assert not equals(1.0, 1.1, ComparisonOptions(margin=1e-10)).equal
    assert equals({"n": [1.0]}, {"n": [1.05]}, ComparisonOptions(margin=0.1)).equal
    assert not equals(1.0, 1.0 + 1e-12).equal


def test_margin_never_applies_to_non_finite_numbers() -> None:
    options = ComparisonOptions(margin=1e308)
    assert equals(math.inf, math.inf, options).equal
    assert not equals(math.inf, -math.inf, options).equal
    assert not equals(math.inf, 1.0, options).equal


def test_approximate_options_default_to_machine_epsilon() -> None:
    assert ComparisonOptions.approximate().margin == EPS
    assert ComparisonOptions.approximate(0.5).margin == 0.5
    assert ComparisonOptions().margin is None
    assert equals(1.0, 1.0 + EPS, ComparisonOptions.approximate()).equal


@pytest.mark.parametrize("margin", [-1.0, math.nan, "0.1", True])
def test_invalid_margin_is_rejected(margin) -> None:
    with pytest.raises(ComparisonConfigError):
        ComparisonOptions(margin=margin)


def test_symmetry_on_mixed_pairs() -> None:
    pairs = [
        ([1, 2], [1, 2, 3]),
        ({"a": 1}, {"a": 1.0}),
        ({"a": [1]}, {"a": (1,)}),
        (_self_list(), _self_list()),
        ({1, 2}, {1, 3}),
        ("x", b"x"),
    ]
    for left, right in pairs:
        assert equals(left, right).equal == equals(right, left).equal


def test_identical_never_descends() -> None:
    items = [1]
    assert identical(items, items)
    assert not identical(items, [1])
    assert identical(1, 1)
    assert identical("a", "a")
    assert not identical(True, 1)
    assert not identical(math.nan, math.nan)
    assert identical(len, len)
    assert not identical(object(), object())


def test_ints_beyond_float_range_never_raise() -> None:
    big = 10**400
    options = ComparisonOptions(margin=1.0)
    assert equals(big, big, options).equal
    assert equals(big, big + 1, options).equal
    assert not equals(big, big + 2, options).equal
    assert not equals(big, 1.5, options).equal
    assert equals([big, Fraction(1, 3)], [big, Fraction(1, 3)], options).equal


def test_identical_nan_key_object_matches_itself() -> None:
    key = float("nan")
    original = {key: 1}
    assert equals(original, dict(original)).equal
    assert not equals({float("nan"): 1}, {float("nan"): 1}).equal
    assert not equals({key: math.nan}, {key: math.nan}).equal
