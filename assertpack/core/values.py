"""Value classification and composite views."""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from fractions import Fraction
import functools
import inspect
import math
import numbers
from typing import Any

from assertpack.core.types import SCALAR_KINDS, CompositeShape, NumberKind, ValueKind

_STRING_TYPES = (str, bytes, bytearray)


def classify(value: Any) -> ValueKind:
    """Return the kind tag used for type-mismatch detection."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Real):
        return "number"
    if isinstance(value, _STRING_TYPES):
        return "string"
    if composite_shape(value) is not None:
        return "composite"
    if inspect.isroutine(value) or isinstance(value, functools.partial):
        return "function"
    return "opaque"


def is_scalar(value: Any) -> bool:
    return classify(value) in SCALAR_KINDS


def is_composite(value: Any) -> bool:
    return composite_shape(value) is not None


def composite_shape(value: Any) -> CompositeShape | None:
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, Sequence) and not isinstance(value, _STRING_TYPES):
        return "sequence"
    if isinstance(value, Set):
        return "set"
    return None


def identity(value: Any) -> int | None:
    """Identity key of a non-scalar value; scalars have none."""
    if is_scalar(value):
        return None
    return id(value)


def classify_number(value: Any) -> NumberKind | None:
    """IEEE-754 sub-classification, or ``None`` for non-numbers."""
    if classify(value) != "number":
        return None
    if isinstance(value, numbers.Rational):
        # Exact ints and fractions have no NaN, infinity or negative zero.
        return "plus_zero" if value == 0 else "finite"
    number = value if isinstance(value, float) else float(value)
    if math.isnan(number):
        return "nan"
    if math.isinf(number):
        return "plus_inf" if number > 0 else "minus_inf"
    if number == 0:
        # The sign bit is the only thing separating +0 from -0.
        return "plus_zero" if math.copysign(1.0, number) > 0 else "minus_zero"
    return "finite"


def is_nan(value: Any) -> bool:
    return classify_number(value) == "nan"


def is_plus_inf(value: Any) -> bool:
    return classify_number(value) == "plus_inf"


def is_minus_inf(value: Any) -> bool:
    return classify_number(value) == "minus_inf"


def is_inf(value: Any) -> bool:
    return classify_number(value) in {"plus_inf", "minus_inf"}


def is_plus_zero(value: Any) -> bool:
    return classify_number(value) == "plus_zero"


def is_minus_zero(value: Any) -> bool:
    return classify_number(value) == "minus_zero"


def is_finite_number(value: Any) -> bool:
    return classify_number(value) in {"plus_zero", "minus_zero", "finite"}


def numeric_distance(left: Any, right: Any) -> Any:
    """Absolute difference of two finite numbers.

    Falls back to exact fractions when an int is too large for float
    arithmetic against the other operand.
    """
    try:
        return abs(left - right)
    except OverflowError:
        return abs(Fraction(left) - Fraction(right))


def composite_items(value: Any) -> list[tuple[Any, Any]]:
    """Ordered ``(key, value)`` pairs of a composite.

    Sequences are keyed by 1-based position and sets map each member to
    ``True``.
    """
    shape = composite_shape(value)
    if shape == "mapping":
        return list(value.items())
    if shape == "sequence":
        return list(enumerate(value, start=1))
    if shape == "set":
        return [(member, True) for member in value]
    raise TypeError(f"not a composite value: {type(value).__name__}")


def composite_values(value: Any) -> list[Any]:
    """Values of a composite; for sets, the members themselves."""
    if composite_shape(value) == "set":
        return list(value)
    return [item for _, item in composite_items(value)]


def list_length(value: Any) -> int | None:
    """Length of a list-shaped composite, ``None`` when not list-shaped."""
    shape = composite_shape(value)
    if shape == "sequence":
        return len(value)
    if shape != "mapping":
        return None

    count = len(value)
    for key in value.keys():
        if isinstance(key, bool) or not isinstance(key, int):
            return None
        if key < 1 or key > count:
            return None
    # Keys are distinct ints inside 1..count, so they cover the range exactly.
    return count


def is_list_shaped(value: Any) -> bool:
    return list_length(value) is not None


def list_values(value: Any) -> list[Any]:
    """Values of a list-shaped composite in position order."""
    length = list_length(value)
    if length is None:
        raise TypeError(f"not a list-shaped value: {type(value).__name__}")
    if composite_shape(value) == "sequence":
        return list(value)
    return [value[index] for index in range(1, length + 1)]


def container_family(value: Any) -> str | None:
    """Finer composite grouping: tuples never equal lists, as in Python."""
    shape = composite_shape(value)
    if shape == "sequence":
        return "tuple" if isinstance(value, tuple) else "list"
    return shape
