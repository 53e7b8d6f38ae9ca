"""Deterministic, cycle-safe pretty printer for arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass, field
import functools
import re
from typing import Any

from assertpack.core.values import classify, composite_shape

_ADDRESS_RE = re.compile(r" at 0x[0-9a-fA-F]+")


def pretty_print(value: Any, *, show_refs: bool = False) -> str:
    """Render ``value`` as a single-line, Python-literal-like string.

    Nested composites are rendered inline. A composite that contains itself
    is labelled ``<N>`` and the back-reference is printed as ``<cycle N>``.
    Functions and opaque objects never show memory addresses unless
    ``show_refs`` is set.
    """
    return _PrettyPrinter(show_refs=show_refs).render(value)


@dataclass(slots=True)
class _PrettyPrinter:
    show_refs: bool = False
    _ancestors: dict[int, int | None] = field(default_factory=dict)
    _next_label: int = 1

    def render(self, value: Any) -> str:
        kind = classify(value)
        if kind == "composite":
            return self._render_composite(value)
        if kind == "function":
            return self._render_function(value)
        if kind == "opaque":
            return self._render_opaque(value)
        return repr(value)

    def _render_composite(self, value: Any) -> str:
        key = id(value)
        if key in self._ancestors:
            label = self._ancestors[key]
            if label is None:
                label = self._next_label
                self._next_label += 1
                self._ancestors[key] = label
            return f"<cycle {label}>"

        self._ancestors[key] = None
        try:
            body = self._render_body(value)
            label = self._ancestors[key]
        finally:
            del self._ancestors[key]

        prefix = f"<{label}>" if label is not None else ""
        if self.show_refs:
            prefix = f"<{type(value).__name__} {id(value):#x}> {prefix}"
        return prefix + body

    def _render_body(self, value: Any) -> str:
        shape = composite_shape(value)
        if shape == "mapping":
            inner = ", ".join(
                f"{self.render(key)}: {self.render(item)}" for key, item in value.items()
            )
            return _wrap(value, dict, f"{{{inner}}}")

        if shape == "set":
            members = sorted(self.render(member) for member in value)
            inner = ", ".join(members)
            if type(value) is set:
                return f"{{{inner}}}" if members else "set()"
            if not members:
                return f"{type(value).__name__}()"
            return f"{type(value).__name__}({{{inner}}})"

        items = [self.render(item) for item in value]
        if isinstance(value, tuple):
            inner = items[0] + "," if len(items) == 1 else ", ".join(items)
            return _wrap(value, tuple, f"({inner})")
        return _wrap(value, list, f"[{', '.join(items)}]")

    def _render_function(self, value: Any) -> str:
        if isinstance(value, functools.partial):
            return f"<partial {_callable_name(value.func)}>"
        return f"<function {_callable_name(value)}>"

    def _render_opaque(self, value: Any) -> str:
        value_type = type(value)
        if value_type.__repr__ is object.__repr__:
            if self.show_refs:
                return f"<{value_type.__name__} {id(value):#x}>"
            return f"<{value_type.__name__}>"
        rendered = repr(value)
        if self.show_refs:
            return rendered
        return _ADDRESS_RE.sub("", rendered)


def _wrap(value: Any, builtin: type, rendered: str) -> str:
    if type(value) is builtin:
        return rendered
    return f"{type(value).__name__}({rendered})"


def _callable_name(value: Any) -> str:
    return str(getattr(value, "__qualname__", None) or getattr(value, "__name__", type(value).__name__))
