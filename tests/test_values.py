from collections import OrderedDict
from fractions import Fraction
import functools
import math

import pytest

from assertpack.core import (
    VALUE_KINDS,
    classify,
    classify_number,
    composite_items,
    container_family,
    identity,
    is_composite,
    is_finite_number,
    is_inf,
    is_list_shaped,
    is_minus_inf,
    is_minus_zero,
    is_nan,
    is_plus_inf,
    is_plus_zero,
    list_length,
    list_values,
    numeric_distance,
)


class _Handle:
    pass


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (None, "nil"),
        (True, "boolean"),
        (False, "boolean"),
        (0, "number"),
        (1.5, "number"),
        (math.nan, "number"),
        ("text", "string"),
        (b"raw", "string"),
        ({"a": 1}, "composite"),
        ([1, 2], "composite"),
        ((1, 2), "composite"),
        ({1, 2}, "composite"),
        (frozenset(), "composite"),
        (len, "function"),
        (lambda: None, "function"),
        (functools.partial(int, base=2), "function"),
        (_Handle(), "opaque"),
        (object(), "opaque"),
    ],
)
def test_classify_tags_every_value_kind(value, kind: str) -> None:
    assert classify(value) == kind
    assert kind in VALUE_KINDS


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (math.nan, "nan"),
        (math.inf, "plus_inf"),
        (-math.inf, "minus_inf"),
        (0.0, "plus_zero"),
        (-0.0, "minus_zero"),
        (0, "plus_zero"),
        (3, "finite"),
        (-2.5, "finite"),
        ("1", None),
        (True, None),
        (None, None),
    ],
)
def test_classify_number_subkinds(value, expected) -> None:
    assert classify_number(value) == expected


def test_signed_zero_is_distinguished_despite_ordinary_equality() -> None:
    assert 0.0 == -0.0
    assert is_plus_zero(0.0) and not is_minus_zero(0.0)
    assert is_minus_zero(-0.0) and not is_plus_zero(-0.0)
    assert classify(0.0) == classify(-0.0)


def test_non_finite_predicates() -> None:
    assert is_nan(math.nan)
    assert not is_nan(1.0)
    assert is_plus_inf(math.inf) and not is_minus_inf(math.inf)
    assert is_minus_inf(-math.inf) and not is_plus_inf(-math.inf)
    assert is_inf(math.inf) and is_inf(-math.inf)
    assert not is_inf(1e308)
    assert is_finite_number(-0.0)
    assert not is_finite_number(math.nan)
    assert not is_finite_number("1")


def test_identity_only_applies_to_non_scalars() -> None:
    items = [1]
    assert identity(items) == id(items)
    assert identity(len) == id(len)
    assert identity(1) is None
    assert identity("text") is None
    assert identity(None) is None


def test_composite_items_use_one_based_positions_and_set_membership() -> None:
    assert composite_items(["a", "b"]) == [(1, "a"), (2, "b")]
    assert composite_items(OrderedDict([("x", 1), ("y", 2)])) == [("x", 1), ("y", 2)]
    assert composite_items({"only"}) == [("only", True)]
    with pytest.raises(TypeError):
        composite_items(3)


def test_list_shape_detection() -> None:
    assert list_length([]) == 0
    assert list_length((1, 2, 3)) == 3
    assert list_length({1: "a", 2: "b"}) == 2
    assert list_length({2: "b", 1: "a"}) == 2
    assert list_length({1: "a", 3: "c"}) is None
    assert list_length({0: "a"}) is None
    assert list_length({True: "a"}) is None
    assert list_length({"1": "a"}) is None
    assert list_length({1, 2}) is None
    assert list_length("abc") is None
    assert is_list_shaped({}) is True
    assert is_list_shaped(5) is False


def test_list_values_follow_position_order() -> None:
    assert list_values({2: "b", 1: "a"}) == ["a", "b"]
    assert list_values(("x",)) == ["x"]
    with pytest.raises(TypeError):
        list_values({"a": 1})


def test_container_family_separates_tuples_from_lists() -> None:
    assert container_family([1]) == "list"
    assert container_family((1,)) == "tuple"
    assert container_family({"a": 1}) == "mapping"
    assert container_family(frozenset({1})) == "set"
    assert container_family("abc") is None
    assert is_composite("abc") is False


def test_exact_rationals_are_classified_without_float_conversion() -> None:
    assert classify_number(10**400) == "finite"
    assert classify_number(-(10**400)) == "finite"
    assert classify_number(Fraction(0, 5)) == "plus_zero"
    assert classify_number(Fraction(1, 3)) == "finite"
    assert is_finite_number(10**400)
    assert not is_inf(10**400)


def test_numeric_distance_survives_float_overflow() -> None:
    assert numeric_distance(3, 1) == 2
    assert numeric_distance(1.5, 2.0) == 0.5
    assert numeric_distance(10**400, 0.5) == Fraction(10**400) - Fraction(1, 2)
