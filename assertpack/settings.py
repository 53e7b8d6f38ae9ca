"""Assertion and report settings resolved from context or environment."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
import os
from typing import Any

ORDER_ACTUAL_EXPECTED_ENV_VAR = "ASSERTKIT_ORDER_ACTUAL_EXPECTED"
SHOW_REFS_ENV_VAR = "ASSERTKIT_SHOW_REFS"
LIST_DIFF_THRESHOLD_ENV_VAR = "ASSERTKIT_LIST_DIFF_THRESHOLD"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class SettingsConfigError(ValueError):
    """Raised when settings or their environment variables are malformed."""


@dataclass(frozen=True, slots=True)
class AssertionSettings:
    """Behavior of the assertion surface.

    ``order_actual_expected`` selects whether two-value assertions take
    ``(actual, expected)`` (the default) or ``(expected, actual)``.
    ``show_refs`` adds object addresses to rendered composites and
    ``list_diff_threshold`` is the minimum list length for the list
    difference analysis.
    """

    order_actual_expected: bool = True
    show_refs: bool = False
    list_diff_threshold: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.order_actual_expected, bool):
            raise SettingsConfigError("order_actual_expected must be boolean")
        if not isinstance(self.show_refs, bool):
            raise SettingsConfigError("show_refs must be boolean")
        if isinstance(self.list_diff_threshold, bool) or not isinstance(
            self.list_diff_threshold, int
        ):
            raise SettingsConfigError("list_diff_threshold must be an integer")
        if self.list_diff_threshold < 0:
            raise SettingsConfigError("list_diff_threshold must be >= 0")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AssertionSettings":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            order_actual_expected=_parse_bool(
                env,
                ORDER_ACTUAL_EXPECTED_ENV_VAR,
                default=defaults.order_actual_expected,
            ),
            show_refs=_parse_bool(env, SHOW_REFS_ENV_VAR, default=defaults.show_refs),
            list_diff_threshold=_parse_int(
                env,
                LIST_DIFF_THRESHOLD_ENV_VAR,
                default=defaults.list_diff_threshold,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "order_actual_expected": self.order_actual_expected,
            "show_refs": self.show_refs,
            "list_diff_threshold": self.list_diff_threshold,
        }


_ACTIVE_SETTINGS: ContextVar[AssertionSettings | None] = ContextVar(
    "assertpack_active_settings",
    default=None,
)


def get_settings() -> AssertionSettings:
    """Resolve settings from the context override, else from the environment."""
    settings = _ACTIVE_SETTINGS.get()
    if settings is not None:
        return settings
    return AssertionSettings.from_env()


@contextmanager
def use_settings(
    settings: AssertionSettings | None = None,
    **overrides: Any,
) -> Iterator[AssertionSettings]:
    """Activate settings for the current context.

    Keyword overrides are applied on top of ``settings`` (or of the currently
    resolved settings when none are given).
    """
    base = settings if settings is not None else get_settings()
    try:
        active = replace(base, **overrides) if overrides else base
    except TypeError as error:
        raise SettingsConfigError(str(error)) from error
    token = _ACTIVE_SETTINGS.set(active)
    try:
        yield active
    finally:
        _ACTIVE_SETTINGS.reset(token)


def _parse_bool(env: Mapping[str, str], name: str, *, default: bool) -> bool:
    raw = env.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise SettingsConfigError(f"{name} must be a boolean flag (1/0, true/false), got {raw!r}")


def _parse_int(env: Mapping[str, str], name: str, *, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as error:
        raise SettingsConfigError(f"{name} must be an integer, got {raw!r}") from error
