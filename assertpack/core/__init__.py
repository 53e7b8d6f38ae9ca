"""Value model and identity tracking for assertkit."""

from assertpack.core.identity import VisitedPairSet
from assertpack.core.types import NUMBER_KINDS, VALUE_KINDS, CompositeShape, NumberKind, ValueKind
from assertpack.core.values import (
    classify,
    classify_number,
    composite_items,
    composite_shape,
    container_family,
    composite_values,
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
    is_scalar,
    list_length,
    list_values,
    numeric_distance,
)

__all__ = [
    "VALUE_KINDS",
    "NUMBER_KINDS",
    "ValueKind",
    "NumberKind",
    "CompositeShape",
    "VisitedPairSet",
    "classify",
    "classify_number",
    "identity",
    "is_scalar",
    "is_composite",
    "composite_shape",
    "container_family",
    "composite_items",
    "composite_values",
    "list_length",
    "is_list_shaped",
    "list_values",
    "is_nan",
    "is_plus_inf",
    "is_minus_inf",
    "is_inf",
    "is_plus_zero",
    "is_minus_zero",
    "is_finite_number",
    "numeric_distance",
]
