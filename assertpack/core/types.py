"""Type definitions for the assertkit value model."""

from typing import Literal

ValueKind = Literal[
    "nil",
    "boolean",
    "number",
    "string",
    "function",
    "opaque",
    "composite",
]

VALUE_KINDS: tuple[str, ...] = (
    "nil",
    "boolean",
    "number",
    "string",
    "function",
    "opaque",
    "composite",
)

SCALAR_KINDS: frozenset[str] = frozenset({"nil", "boolean", "number", "string"})

NumberKind = Literal[
    "nan",
    "plus_inf",
    "minus_inf",
    "plus_zero",
    "minus_zero",
    "finite",
]

NUMBER_KINDS: tuple[str, ...] = (
    "nan",
    "plus_inf",
    "minus_inf",
    "plus_zero",
    "minus_zero",
    "finite",
)

CompositeShape = Literal["mapping", "sequence", "set"]
